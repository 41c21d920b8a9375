def test_can_import_all_protocols():
    # Import must succeed and expose the expected names
    import minicat.core.interfaces as I

    assert hasattr(I, "LoggerFactoryProtocol")
    assert hasattr(I, "LoggerLikeProtocol")
    assert hasattr(I, "PreciseMinifierProtocol")
    assert hasattr(I, "RendererProtocol")
    assert hasattr(I, "WalkerProtocol")


def test_default_components_satisfy_protocols():
    from minicat.core.interfaces import RendererProtocol, WalkerProtocol
    from minicat.io.walker import FileWalker
    from minicat.processing.minifier_registry import MinifierRegistry
    from minicat.rendering.markdown import MarkdownRenderer

    assert isinstance(FileWalker(registry=MinifierRegistry.default()), WalkerProtocol)
    assert isinstance(MarkdownRenderer(), RendererProtocol)


def test_processing_package_reexports():
    import minicat.processing as P
    from minicat.processing.comment_stripper import strip_comments
    from minicat.processing.minifier_registry import minify_source

    for name in P.__all__:
        assert hasattr(P, name), name
    assert P.strip_comments is strip_comments
    assert P.minify_source is minify_source
    assert "python" in P.LANGUAGES

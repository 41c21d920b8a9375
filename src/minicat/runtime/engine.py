from __future__ import annotations

"""Minification engine: discovery → read → minify → render.

Each file is processed by a pure function of its own text, so files can be
minified on a thread pool without coordination. Output order always follows
discovery order regardless of the worker count.
"""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional, Sequence

from minicat.ai.token_budget import TokenBudgetEstimator
from minicat.core.errors import SourceReadError
from minicat.core.interfaces import LoggerLikeProtocol, RendererProtocol, WalkerProtocol
from minicat.core.models import Document, MinifiedFile, RunConfig, SourceFile
from minicat.core.report import ExecutionReport, StageTimer
from minicat.discovery.project_name import discover_project_name
from minicat.io.reader import read_source
from minicat.io.walker import FileWalker
from minicat.logging.helpers import get_logger
from minicat.processing.minifier_registry import MinifierRegistry, minify_source
from minicat.rendering.markdown import MarkdownRenderer


class MinifyEngine:
    def __init__(
        self,
        config: RunConfig,
        *,
        registry: Optional[MinifierRegistry] = None,
        walker: Optional[WalkerProtocol] = None,
        renderer: Optional[RendererProtocol] = None,
        estimator: Optional[TokenBudgetEstimator] = None,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._cfg = config
        self._log = logger or get_logger('engine')
        base = registry or MinifierRegistry.default()
        self._registry = base.restrict(config.languages) if config.languages else base
        self._walker = walker or FileWalker(
            registry=self._registry,
            use_gitignore=config.use_gitignore,
            absolute_path=config.absolute_path,
        )
        self._renderer = renderer or MarkdownRenderer()
        self._estimator = estimator or TokenBudgetEstimator()
        self.report = ExecutionReport()

    def minify_file(self, source: SourceFile) -> MinifiedFile:
        """Read and minify one file; read failures become an error entry."""
        try:
            text = read_source(source.path)
        except SourceReadError as exc:
            self._log.error('Error processing %s: %s', source.display, exc.reason)
            return MinifiedFile(source=source, body='', bytes_in=0, bytes_out=0, error=exc.reason)
        body = minify_source(
            text,
            source.language,
            strip_docs=self._cfg.remove_docs,
            use_precise=self._cfg.use_precise,
            logger=self._log,
        )
        return MinifiedFile(
            source=source,
            body=body,
            bytes_in=len(text.encode('utf-8')),
            bytes_out=len(body.encode('utf-8')),
        )

    def _minify_all(self, files: Sequence[SourceFile]) -> List[MinifiedFile]:
        jobs = max(1, int(self._cfg.jobs))
        if jobs == 1 or len(files) < 2:
            return [self.minify_file(f) for f in files]
        with ThreadPoolExecutor(max_workers=jobs) as executor:
            return list(executor.map(self.minify_file, files))

    def build_document(self) -> Document:
        roots = list(self._cfg.paths) or [Path('.')]
        self.report.roots = [str(r) for r in roots]
        project = discover_project_name(roots[0])
        self.report.project = project

        with StageTimer(self.report, 'discovery'):
            files = self._walker.gather_files(roots, list(self._cfg.exclude_paths))
        self._log.info('found %d file(s) to minify', len(files))

        with StageTimer(self.report, 'minify'):
            results = self._minify_all(files)

        for item in results:
            if item.ok:
                self.report.add_file(
                    language=item.source.language.name,
                    bytes_in=item.bytes_in,
                    bytes_out=item.bytes_out,
                )
            else:
                self.report.add_error(f'{item.source.display}: {item.error}')
        return Document(project=project, files=tuple(results))

    def run(self) -> str:
        """Produce the full Markdown document for the configured paths."""
        document = self.build_document()

        token_note: Optional[str] = None
        if self._cfg.token_model:
            with StageTimer(self.report, 'tokens'):
                bodies = '\n'.join(f.body for f in document.files if f.ok)
                est = self._estimator.estimate(bodies, model=self._cfg.token_model)
            self.report.tokens = est.tokens
            self.report.token_model = est.model
            token_note = est.describe()

        with StageTimer(self.report, 'render'):
            text = self._renderer.render(document, token_note=token_note)

        if self._cfg.output is not None:
            out = self._cfg.output
            out.parent.mkdir(parents=True, exist_ok=True)
            out.write_text(text, encoding='utf-8')
            self._log.info('✔ output written → %s', out)

        self.report.finish()
        return text

"""
languages – Declarative language table for minicat.

LANGUAGES is the single source of truth for:
  • which file suffixes belong to which language
  • the comment markers fed to the generic comment stripper
  • the Markdown fence label used in the output
  • an optional precise (grammar-aware) minifier

Adding a language is a one-line change to _TABLE; nothing else branches on
language names.
"""

from typing import Dict, Optional, Tuple

from minicat.core.interfaces.minifier import PreciseMinifierProtocol
from minicat.core.models import DelimiterSet, LanguageSpec
from minicat.processing.docstrip.py_minify import PythonMinifier

C_STYLE = DelimiterSet('//', '/*', '*/')
HASH = DelimiterSet('#')
DASH_DASH = DelimiterSet('--')
SQL = DelimiterSet('--', '/*', '*/')
CSS = DelimiterSet('', '/*', '*/')
HASKELL = DelimiterSet('--', '{-', '-}')
MARKUP = DelimiterSet('', '<!--', '-->')

_TABLE: Tuple[Tuple[str, Tuple[str, ...], DelimiterSet, str, Optional[PreciseMinifierProtocol]], ...] = (
    ('rust', ('.rs',), C_STYLE, 'rust', None),
    ('c', ('.c', '.h'), C_STYLE, 'c', None),
    ('cpp', ('.cc', '.cpp', '.cxx', '.hpp', '.hh'), C_STYLE, 'cpp', None),
    ('csharp', ('.cs',), C_STYLE, 'csharp', None),
    ('java', ('.java',), C_STYLE, 'java', None),
    ('kotlin', ('.kt', '.kts'), C_STYLE, 'kotlin', None),
    ('scala', ('.scala',), C_STYLE, 'scala', None),
    ('swift', ('.swift',), C_STYLE, 'swift', None),
    ('go', ('.go',), C_STYLE, 'go', None),
    ('javascript', ('.js', '.mjs', '.cjs', '.jsx'), C_STYLE, 'javascript', None),
    ('typescript', ('.ts', '.tsx'), C_STYLE, 'typescript', None),
    ('dart', ('.dart',), C_STYLE, 'dart', None),
    ('php', ('.php',), C_STYLE, 'php', None),
    ('css', ('.css',), CSS, 'css', None),
    ('scss', ('.scss',), C_STYLE, 'scss', None),
    ('python', ('.py',), HASH, 'python', PythonMinifier()),
    ('ruby', ('.rb',), HASH, 'ruby', None),
    ('shell', ('.sh', '.bash'), HASH, 'bash', None),
    ('perl', ('.pl', '.pm'), HASH, 'perl', None),
    ('r', ('.r',), HASH, 'r', None),
    ('yaml', ('.yml', '.yaml'), HASH, 'yaml', None),
    ('toml', ('.toml',), HASH, 'toml', None),
    ('sql', ('.sql',), SQL, 'sql', None),
    ('lua', ('.lua',), DASH_DASH, 'lua', None),
    ('haskell', ('.hs',), HASKELL, 'haskell', None),
    ('html', ('.html', '.htm'), MARKUP, 'html', None),
    ('xml', ('.xml',), MARKUP, 'xml', None),
)

LANGUAGES: Dict[str, LanguageSpec] = {
    name: LanguageSpec(name=name, extensions=exts, delimiters=delims, fence=fence, precise=precise)
    for name, exts, delims, fence, precise in _TABLE
}


def describe_languages() -> str:
    """Human-readable table of supported languages, one per line."""
    rows = []
    for spec in LANGUAGES.values():
        d = spec.delimiters
        block = f'{d.block_comment_open} {d.block_comment_close}' if d.has_block else '-'
        line = d.line_comment or '-'
        extra = '  [precise]' if spec.precise is not None else ''
        rows.append(f"{spec.name:<12} {' '.join(spec.extensions):<28} {line:<4} {block}{extra}")
    return '\n'.join(rows) + '\n'

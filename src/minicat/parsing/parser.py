# minicat/parsing/parser.py
from __future__ import annotations

import argparse

from minicat.constants import DEFAULT_TOKEN_MODEL


def _build_parser() -> argparse.ArgumentParser:
    """
    Build the CLI argument parser.

    Notes:
        - Paths are positional; a bare run minifies the current directory.
        - Environment defaults (MINICAT_JOBS, MINICAT_TOKEN_MODEL) are applied
          later by runtime.config so the parser stays side-effect free.
    """
    p = argparse.ArgumentParser(
        prog="minicat",
        formatter_class=argparse.RawTextHelpFormatter,
        description=(
            "minicat – concatenate a project's sources into one minified Markdown document\n"
            "Comments (with -r) and insignificant whitespace are removed so the result\n"
            "fits densely into a limited text window."
        ),
    )

    g_loc = p.add_argument_group("Discovery")
    g_min = p.add_argument_group("Minification")
    g_out = p.add_argument_group("Output")
    g_misc = p.add_argument_group("Miscellaneous")

    # -----------------------
    # Discovery
    # -----------------------
    g_loc.add_argument(
        "paths",
        metavar="PATH",
        nargs="*",
        help="Files or directories to minify (recursively). Defaults to the current directory.",
    )
    g_loc.add_argument(
        "-l",
        "--lang",
        metavar="NAME",
        action="append",
        dest="languages",
        help="Restrict to the named language. Repeatable. See --list-languages.",
    )
    g_loc.add_argument(
        "-A",
        "--exclude-path",
        metavar="DIR",
        action="append",
        dest="exclude_paths",
        help="Skip everything under DIR. Repeatable.",
    )
    g_loc.add_argument(
        "--no-gitignore",
        action="store_false",
        dest="use_gitignore",
        help="Do not honour the root's .gitignore.",
    )

    # -----------------------
    # Minification
    # -----------------------
    g_min.add_argument(
        "-r",
        "--remove-docs",
        action="store_true",
        dest="remove_docs",
        help=(
            "Strip comments before collapsing whitespace. For Python this also\n"
            "removes module, class and function docstrings."
        ),
    )
    g_min.add_argument(
        "--no-precise",
        action="store_false",
        dest="use_precise",
        help="Use the generic comment/whitespace pipeline even where a precise minifier exists.",
    )
    g_min.add_argument(
        "-j",
        "--jobs",
        metavar="N",
        type=int,
        dest="jobs",
        help="Minify files on N worker threads (default: $MINICAT_JOBS or 1).",
    )

    # -----------------------
    # Output
    # -----------------------
    g_out.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        dest="output",
        help="Write the document to FILE instead of stdout.",
    )
    g_out.add_argument(
        "-R",
        "--absolute-path",
        action="store_true",
        dest="absolute_path",
        help="Show absolute paths in file headings.",
    )
    g_out.add_argument(
        "--tokens",
        metavar="MODEL",
        nargs="?",
        const="",
        dest="token_model",
        help=(
            "Append a token count of the minified bodies. MODEL defaults to\n"
            f"$MINICAT_TOKEN_MODEL or {DEFAULT_TOKEN_MODEL}."
        ),
    )
    g_out.add_argument(
        "--report",
        action="store_true",
        dest="report",
        help="Print the JSON execution report to stderr.",
    )

    # -----------------------
    # Miscellaneous
    # -----------------------
    g_misc.add_argument(
        "--list-languages",
        action="store_true",
        dest="list_languages",
        help="Print the supported languages and exit.",
    )
    g_misc.add_argument(
        "--json-logs",
        action="store_true",
        dest="json_logs",
        help="Emit logs as JSON lines (also: MINICAT_JSON_LOGS=1).",
    )
    g_misc.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        dest="verbose",
        help="Enable debug logging.",
    )
    return p

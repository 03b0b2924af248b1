#!/usr/bin/env python3
"""
fontres – setup_fonts.py
========================

Interactive entry point: find a directory of fonts, rename them into Android
resource names and print the matching Jetpack Compose ``FontFamily`` code.

Flow
----
1. Start from ``--directory`` or the current working directory.
2. While the directory holds no fonts, ask for another path on stderr.
   With both ``--directory`` and ``--yes`` nothing is asked: a directory
   without fonts is an error.
3. Ask ``y/n`` before renaming (skipped with ``--yes``).
4. Rename, re-scan, group by family and print the generated code.

Everything past the prompts is delegated to the stateless functions in
:mod:`fontres.resource_fonts` and :mod:`fontres.compose_template`.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from pathlib import Path

from fontres.compose_template import LINE_ENDINGS, template_fonts_for_jetpack_compose
from fontres.errors import FontResourceError
from fontres.resource_fonts import (
    check_font_directory,
    folder_contains_fonts,
    get_fonts_in_resource,
    rename_fonts_for_android,
)

BANNER = "Android Resource Font Setup"
DIRECTORY_PROMPT = "Enter the path of where your fonts are located: "
RENAME_PROMPT = "Rename fonts for Android Resource? y/n: "


# -----------------------
# Prompt helpers
# -----------------------
def read_input() -> str | None:
    """Read one trimmed line from stdin, or ``None`` once stdin is closed."""
    line = sys.stdin.readline()
    if not line:
        return None
    return line.strip()


def ask(prompt: str, reader: Callable[[], str | None] = read_input) -> str | None:
    print(prompt, end="", file=sys.stderr, flush=True)
    return reader()


def prompt_for_font_directory(
    start: Path,
    working_dir: Path,
    reader: Callable[[], str | None] = read_input,
) -> Path | None:
    """Ask for directories until one contains fonts.

    Args:
        start: First directory to check.
        working_dir: The process working directory, used to word the notice.
        reader: Line reader, replaceable in tests.

    Returns:
        A directory for which :func:`folder_contains_fonts` is true, or
        ``None`` if the input ends before one is given.
    """
    directory = start
    while not folder_contains_fonts(directory):
        # an empty answer is Path(""), i.e. the working directory
        if directory.resolve() == Path(working_dir).resolve():
            print("Sorry, the current working directory does not contain any fonts.")
        else:
            print("Sorry, the directory selected does not contain any fonts.")

        answer = ask(DIRECTORY_PROMPT, reader)
        if answer is None:
            return None
        directory = Path(answer).expanduser()
    return directory


def confirm(answer: str | None) -> bool:
    return bool(answer) and answer[0] in ("y", "Y")


# -----------------------
# Main
# -----------------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fontres",
        description="Rename fonts into Android resources and print Jetpack Compose FontFamily code.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=None,
        help="Directory holding the fonts (default: current working directory)",
    )
    parser.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="Rename without asking for confirmation",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Also write the generated code to this file",
    )
    parser.add_argument(
        "--line-endings",
        choices=sorted(LINE_ENDINGS),
        default="crlf",
        help="Line endings of the generated code",
    )
    parser.add_argument(
        "--no-sort",
        action="store_true",
        help="Keep families in scan order instead of sorting them by name",
    )
    parser.add_argument(
        "--oblique-as-italic",
        action="store_true",
        help="Declare oblique faces as FontStyle.Italic",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print every rename and every font read",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point.

    Exits with status 1 on any core error or when stdin closes while a
    directory is being asked for. Declining the rename is not an error.
    """
    args = build_parser().parse_args(argv)

    print(BANNER)
    print()

    working_dir = Path.cwd()
    if args.yes and args.directory is not None:
        # non-interactive: fail instead of prompting
        try:
            directory = check_font_directory(args.directory)
        except FontResourceError as e:
            print(f"❌ Error: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        directory = prompt_for_font_directory(
            args.directory or working_dir, working_dir
        )
        if directory is None:
            print()
            print("❌ Error: no directory containing fonts was given", file=sys.stderr)
            sys.exit(1)

    print("Fonts have been found!")
    print(f"Directory: {directory}")
    print()

    if not args.yes and not confirm(ask(RENAME_PROMPT)):
        print("Exiting...")
        return

    try:
        rename_fonts_for_android(directory, verbose=args.verbose)
        print("Renamed fonts for Android.")

        families = get_fonts_in_resource(
            directory,
            oblique_as_italic=args.oblique_as_italic,
            verbose=args.verbose,
        )
    except FontResourceError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        sys.exit(1)

    code = template_fonts_for_jetpack_compose(
        families,
        newline=LINE_ENDINGS[args.line_endings],
        sort_families=not args.no_sort,
    )

    print()
    print()
    print("#jetpack_compose:")
    print()
    print(code)
    print()

    if args.output is not None:
        args.output.write_text(code, encoding="utf-8", newline="")
        if args.verbose:
            print(f"OK: wrote generated code to {args.output}")


if __name__ == "__main__":
    main()

"""
filediff - Command-line entry point
"""

from __future__ import annotations

import argparse
import sys

from filediff import __version__
from filediff.models.settings import ColorMode, DiffSettings
from filediff.services.comparator import run_comparison
from filediff.services.file_reader import FileDiffError


class ArgumentParser(argparse.ArgumentParser):
    """argparse with the exit status used for every other failure (1)"""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="filediff",
        description="Compare two text files and print their changed lines, color-coded by origin file.",
    )
    parser.add_argument("file1", help="original file (removed lines are shown in red)")
    parser.add_argument("file2", help="modified file (added lines are shown in green)")
    parser.add_argument(
        "--color",
        type=ColorMode,
        choices=list(ColorMode),
        default=ColorMode.ALWAYS,
        metavar="{always,never,auto}",
        help="when to use ANSI colors (default: always)",
    )
    parser.add_argument("--no-color", action="store_true", help="same as --color never")
    parser.add_argument("--encoding", default="utf-8", help="text encoding of both files (default: utf-8)")
    parser.add_argument("-v", "--verbose", action="store_true", help="print progress to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit code"""
    try:
        args = build_parser().parse_args(argv)
    except SystemExit as e:
        # Usage errors, --help and --version end here before any file is read
        return e.code if isinstance(e.code, int) else 1
    settings = DiffSettings.from_args(args)

    try:
        run_comparison(args.file1, args.file2, settings)
    except FileDiffError as e:
        # The reader has already reported which file failed
        print(f"Error comparing files: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error comparing files: {type(e).__name__}: {e}", file=sys.stderr)
        return 1

    return 0


def main_entry() -> None:
    sys.exit(main())


if __name__ == "__main__":
    main_entry()

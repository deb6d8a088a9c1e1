"""Command-line entry point."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from .core import Options, Scanner


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the command."""
    parser = argparse.ArgumentParser(
        prog="gus",
        description=(
            "Git Uncommitted Scanner - find Git repositories with uncommitted changes. "
            "Recursively searches through directories to find Git repositories "
            "and checks their status."
        ),
    )
    parser.add_argument("--json", action="store_true", help="output in JSON format")
    parser.add_argument("--path", default=".", help="path to scan for Git repositories")
    parser.add_argument("-v", "--verbose", action="store_true", help="verbose output")
    parser.add_argument("paths", nargs="*", metavar="PATH", help="path to scan (overrides --path)")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and return its exit status."""
    args = build_parser().parse_args(argv)
    path = args.paths[0] if args.paths else args.path
    options = Options(path=path, json=args.json, verbose=args.verbose)
    try:
        Scanner(options).run()
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
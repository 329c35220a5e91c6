"""CLI for quickdeck - convert a reference document into an Anki deck."""

import argparse
import logging
import platform
import sys
from pathlib import Path

from . import __version__
from .core.errors import QuickdeckError
from .pipeline import convert_file
from .runtime import build_runtime


class VersionAction(argparse.Action):
    """Print package, interpreter and platform versions, then exit."""

    def __init__(self, option_strings, dest=argparse.SUPPRESS, default=argparse.SUPPRESS, help=None):
        super().__init__(option_strings, dest=dest, default=default, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        print(f"quickdeck {__version__}")
        print(f"python {platform.python_version()}")
        print(f"platform {platform.platform()}")
        parser.exit()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quickdeck",
        description="Convert a line-oriented reference document into a tab-separated Anki deck",
    )
    parser.add_argument("input", type=Path, help="Reference document (e.g. quickref.txt)")
    parser.add_argument("output", type=Path, help="Deck file to write (e.g. vim-quickref.csv)")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Show a diff of the document before and after every deletion pass",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config file (default: cwd/quickdeck.toml)",
    )
    parser.add_argument(
        "--recipe",
        type=Path,
        default=None,
        help="Path to a YAML recipe (default: built-in vim_quickref)",
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Minimize output"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log engine details to stderr"
    )
    parser.add_argument("--version", action=VersionAction, help="Show version information")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    
    try:
        rt = build_runtime(
            config_path=args.config,
            recipe_path=args.recipe,
            debug=args.debug,
        )
        result = convert_file(args.input, args.output, rt)
    except (QuickdeckError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    
    if not args.quiet:
        print(
            f"Wrote {result.cards} cards from {result.sections} sections "
            f"({result.lines_kept} of {result.lines_in} lines kept) to {args.output}"
        )
    sys.exit(0)


if __name__ == "__main__":
    main()

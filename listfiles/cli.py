"""Command-line front door for listfiles.

Parses CLI options into ``ListOptions``, walks the requested directory, and
hands the rendered document to the output sink.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import NoReturn

from .console import configure_logging, prepare_console
from .errors import ArgumentError
from .file_tree_model import list_files
from .options import ListOptions, OutputFormat
from .output import emit
from .render import render_document

logger = logging.getLogger(__name__)

PROG_NAME = "listfiles"
UNBOUNDED_DEPTH_VALUES = frozenset({"inf", "INF"})


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing and exiting."""

    def error(self, message: str) -> NoReturn:
        raise ArgumentError(message)


def _depth(value: str) -> int | None:
    """argparse type for depth values: an integer or ``inf``."""
    if value in UNBOUNDED_DEPTH_VALUES:
        return None
    try:
        return int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid depth value: {value!r}") from exc


def build_parser() -> argparse.ArgumentParser:
    """Build the listfiles argument parser."""
    parser = _ArgumentParser(
        prog=PROG_NAME,
        usage=f"{PROG_NAME} <directory> [options]",
        description="List a directory tree as a tree, JSON document, or flat list.",
        epilog="Short flags may be grouped: -st is the same as -s -t.",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("directory", nargs="?", default=None, help="Directory to list.")
    parser.add_argument("-d", "--depth", type=_depth, default=None, metavar="<n>", help="Recursion depth (default: inf)")
    parser.add_argument("-s", "--size", action="store_true", help="Show file size")
    parser.add_argument("-t", "--time", action="store_true", help="Show modification time")
    parser.add_argument("-T", "--type", action="store_true", help="Show file type/extension")
    parser.add_argument(
        "-f",
        "--filter",
        default="",
        metavar="<p>",
        help="Include filter (wildcard: *.lua or regex: regex:.*\\.lua$)",
    )
    parser.add_argument("-e", "--exclude", default="", metavar="<p>", help="Exclude filter")
    parser.add_argument("--dirs-only", action="store_true", help="List directories only")
    parser.add_argument("--files-only", action="store_true", help="List files only")
    parser.add_argument(
        "-F",
        "--format",
        default=OutputFormat.TREE.value,
        choices=[fmt.value for fmt in OutputFormat],
        metavar="<fmt>",
        help="Output format (tree/json/list, default: tree)",
    )
    parser.add_argument("-r", "--relative", action="store_true", help="Use relative paths")
    parser.add_argument("-o", "--output", default=None, metavar="<file>", help="Output to file")
    parser.add_argument("-c", "--compress", action="store_true", help="gzip compress output (requires -o)")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Report skipped entries on stderr.")
    parser.add_argument("-h", "--help", action="store_true", help="Show this help")
    return parser


def parse_arguments(parser: argparse.ArgumentParser, argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse ``argv`` allowing the directory anywhere; the last positional wins.

    Raises ``ArgumentError`` for unknown options and missing or invalid values.
    """
    args, extras = parser.parse_known_args(argv)
    for extra in extras:
        if extra.startswith("-"):
            raise ArgumentError(f"Unknown option - {extra}")
    if extras:
        args.directory = extras[-1]
    return args


def options_from_args(args: argparse.Namespace) -> ListOptions:
    """Convert parsed arguments into validated ``ListOptions``."""
    if not args.directory:
        raise ArgumentError("missing directory argument")
    return ListOptions(
        depth=args.depth,
        show_size=args.size,
        show_time=args.time,
        show_type=args.type,
        include_filter=args.filter,
        exclude_filter=args.exclude,
        dirs_only=args.dirs_only,
        files_only=args.files_only,
        output_format=OutputFormat(args.format),
        relative_paths=args.relative,
        output_path=args.output,
        compress=args.compress,
        color=not args.no_color,
    ).validate()


def run_listing(root: str, options: ListOptions) -> None:
    """Enumerate, render, and emit one listing."""
    records = list_files(root, options)
    document = render_document(records, root, options)
    emit(document, options)


def main(argv: Sequence[str] | None = None) -> int:
    """Parse CLI arguments, run the listing, and return the process exit code.

    Argument problems print usage and return 1 before anything is traversed.
    A missing root or an unwritable output file is reported but still
    returns 0.
    """
    prepare_console()
    configure_logging()
    parser = build_parser()

    try:
        args = parse_arguments(parser, argv)
        if args.help:
            sys.stdout.write(parser.format_help())
            return 0
        options = options_from_args(args)
    except ArgumentError as exc:
        logger.error("%s", exc)
        sys.stdout.write(parser.format_help())
        return 1

    if args.verbose:
        configure_logging(verbose=True)
    run_listing(args.directory, options)
    return 0


def run() -> None:
    """Console-script entrypoint."""
    raise SystemExit(main())


if __name__ == "__main__":
    run()

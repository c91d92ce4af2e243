"""Command line interface for looking at the content of files.

This module provides a command line interface to load CSV or Parquet files
as a :class:`arrowframe.DataFrame`, optionally select or reshape their data,
and print them using any of the :mod:`arrowframe.display` render modes.
"""

import argparse
import logging
import sys

from arrowframe import DataFrame, FrameError
from arrowframe.display import RenderMode


def build_parser() -> argparse.ArgumentParser:
    """Build the parser for the command line arguments."""
    parser = argparse.ArgumentParser(description="Show the content of a data file.")
    parser.add_argument("filename", type=str, help="The CSV or Parquet file to show.")
    parser.add_argument(
        "-m",
        "--mode",
        choices=[mode.value for mode in RenderMode],
        help="How to render the data, by default read from ARROWFRAME_OUTPUT_MODE.",
    )
    rows = parser.add_mutually_exclusive_group()
    rows.add_argument("--head", type=int, help="Only show the first N rows.")
    rows.add_argument("--tail", type=int, help="Only show the last N rows.")
    parser.add_argument(
        "-c", "--columns", nargs="+", help="Only show the given columns."
    )
    reshape = parser.add_mutually_exclusive_group()
    reshape.add_argument(
        "--transpose",
        nargs="?",
        const="",
        metavar="KEY",
        help="Transpose the data using the values of KEY (default: first column) as keys.",
    )
    reshape.add_argument(
        "--long",
        nargs="*",
        metavar="KEY",
        help="Melt the data to long form, keeping the given columns.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log what is being done."
    )
    return parser


def view(args: argparse.Namespace) -> str:
    """Load, select and reshape the data, then render it."""
    df = DataFrame.load(args.filename)
    if args.columns:
        df = df[args.columns]
    if args.head is not None:
        df = df.head(args.head)
    elif args.tail is not None:
        df = df.tail(args.tail)

    if args.transpose is not None:
        df = df.transpose(args.transpose or None)
    elif args.long is not None:
        df = df.to_long(*args.long)
    return df.render(args.mode)


def main(argv: list[str] | None = None) -> None:
    """Parse the command line arguments and show the file."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        output = view(args)
    except (FrameError, NotImplementedError) as e:
        print(f"Invalid arguments, {e}", file=sys.stderr)
        sys.exit(1)

    print(output, end="" if output.endswith("\n") else "\n")


if __name__ == "__main__":
    main()

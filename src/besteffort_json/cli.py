"""Command-line front end (``besteffort-json`` / ``python -m besteffort_json``)."""

from __future__ import annotations

import argparse
import sys
from typing import IO, Iterator

from .api import parse
from .log import configure_logging
from .progress import iter_progress


def _chunked(text: str, size: int) -> Iterator[str]:
    for start in range(0, len(text), size):
        yield text[start:start + size]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="besteffort-json",
        description="Print the best-effort JSON value found in model output.",
    )
    parser.add_argument("file", nargs="?", help="input file (default: stdin)")
    parser.add_argument(
        "--progress",
        action="store_true",
        help="replay the input in chunks and print one snapshot per chunk",
    )
    parser.add_argument(
        "--chunk-size",
        type=int,
        default=16,
        help="characters per chunk with --progress (default: 16)",
    )
    parser.add_argument("--log-level", default="WARNING")
    parser.add_argument("--log-format", choices=("console", "json"), default="console")
    return parser


def main(argv: list[str] | None = None, dest: IO[str] | None = None) -> int:
    """Run the CLI.  Returns the process exit status."""
    args = _build_parser().parse_args(argv)
    dest = dest if dest is not None else sys.stdout
    configure_logging(args.log_level, args.log_format)

    if args.chunk_size < 1:
        print("Error: --chunk-size must be at least 1", file=sys.stderr)
        return 2

    if args.file:
        try:
            with open(args.file, encoding="utf-8", errors="replace") as fh:
                text = fh.read()
        except OSError as exc:
            print(f"Error reading '{args.file}': {exc}", file=sys.stderr)
            return 1
    else:
        if hasattr(sys.stdin, "reconfigure"):
            sys.stdin.reconfigure(errors="replace")
        text = sys.stdin.read()

    if args.progress and text:
        for snapshot in iter_progress(_chunked(text, args.chunk_size)):
            print(snapshot, file=dest)
    else:
        print(parse(text), file=dest)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Command line entry point: load a text file into blobs and print it."""

from __future__ import annotations

import argparse
import shutil
import sys

from blobtext.blobs import BLOB_SIZE, load_file


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blobtext",
        description="Load a text file as a list of blobs and print it.",
    )
    parser.add_argument("path", nargs="?", default="split.txt", help="file to read")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--blob-size",
        type=int,
        default=BLOB_SIZE,
        help="characters per blob (default: %(default)s)",
    )
    mode.add_argument("--lines", action="store_true", help="one blob per line")
    parser.add_argument(
        "--separator",
        default="",
        help="text printed after every blob",
    )
    limit = parser.add_mutually_exclusive_group()
    limit.add_argument("--max-lines", type=int, help="print at most this many lines")
    limit.add_argument(
        "--fit", action="store_true", help="print only what fits on the screen"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command; return the exit status."""
    args = _parser().parse_args(argv)
    if args.blob_size <= 0:
        print("blobtext: blob size must be positive", file=sys.stderr)
        return 2
    if args.max_lines is not None and args.max_lines < 0:
        print("blobtext: max lines must not be negative", file=sys.stderr)
        return 2

    try:
        blobs = load_file(args.path, None if args.lines else args.blob_size)
    except OSError as error:
        print(f"blobtext: {args.path}: {error.strerror or error}", file=sys.stderr)
        return 1

    max_lines = shutil.get_terminal_size().lines if args.fit else args.max_lines
    if args.separator:
        output = "".join(data + args.separator for data in blobs)
        if max_lines is not None:
            output = "".join(output.splitlines(keepends=True)[:max_lines])
    else:
        output = blobs.render(max_lines)

    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
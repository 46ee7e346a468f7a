"""Command-line interface for hiding and retrieving messages in PNG files."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from .commands import decode, encode, print_png, remove

__all__ = ["build_parser", "main"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pngpong",
        description="CLI commands to hide and retrieve messages in PNG files",
    )
    sub = parser.add_subparsers(dest="command", metavar="COMMAND")
    sub.required = True

    p = sub.add_parser("encode", help="Encodes a message inside a PNG file")
    p.add_argument("file_path", type=Path)
    p.add_argument("chunk_type")
    p.add_argument("message")
    p.add_argument("output_path", type=Path, nargs="?", default=None, metavar="OUTPUT")

    p = sub.add_parser("decode", help="Decodes message hidden in PNG file")
    p.add_argument("file_path", type=Path)
    p.add_argument("chunk_type")

    p = sub.add_parser(
        "remove", help="Removes first chunk of specified type from PNG file"
    )
    p.add_argument("file_path", type=Path)
    p.add_argument("chunk_type")

    p = sub.add_parser("print", help="Prints desired file to CLI")
    p.add_argument("file_path", type=Path)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        if args.command == "encode":
            encode(args.file_path, args.chunk_type, args.message, args.output_path)
        elif args.command == "decode":
            decode(args.file_path, args.chunk_type)
        elif args.command == "remove":
            remove(args.file_path, args.chunk_type)
        else:
            print_png(args.file_path)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
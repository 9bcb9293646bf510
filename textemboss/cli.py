"""Command-line tool that prints text extracted from images."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Sequence

from textemboss.emboss import EmbosserError, EmbossTextResult, new_embosser

DEFAULT_EMBOSSER_URI = "local:///usr/local/sfomuseum/bin/text-emboss"

_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _encode(result: EmbossTextResult) -> str:
    encoded = json.dumps(result.to_dict(), separators=(",", ":"), ensure_ascii=False)
    return "".join(_HTML_ESCAPES.get(ch, ch) for ch in encoded)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="emboss", description="Extract text from one or more images."
    )
    parser.add_argument(
        "-embosser-uri",
        "--embosser-uri",
        dest="embosser_uri",
        default=DEFAULT_EMBOSSER_URI,
        help="A valid embosser URI.",
    )
    parser.add_argument(
        "-as-json",
        "--as-json",
        dest="as_json",
        action="store_true",
        help="Return results as a JSON-encoded dictionary containing text, "
        "source and creation time properties.",
    )
    parser.add_argument("paths", nargs="*", help="Images to extract text from.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return the process exit status."""
    args = _parser().parse_args(argv)

    try:
        embosser = new_embosser(args.embosser_uri)
    except EmbosserError as err:
        print(f"Failed to create new embosser, {err}", file=sys.stderr)
        return 1

    with embosser:
        for path in args.paths:
            try:
                result = embosser.emboss_text(path)
            except EmbosserError as err:
                print(f"Failed to extract text from {path}, {err}", file=sys.stderr)
                return 1
            print(_encode(result) if args.as_json else str(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Command-line interface for jpdetect."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import jpdetect
from jpdetect.document import first_newline
from jpdetect.pipeline import DetectionResult


def _describe(result: DetectionResult) -> str:
    if result.encoding is None:
        return "undetermined"
    if result.has_bom:
        return f"{result.encoding.value} (BOM)"
    return result.encoding.value


def _newline_label(data: bytes, result: DetectionResult) -> str:
    if result.codec is None:
        return "unknown"
    try:
        text = data.decode(result.codec)
    except UnicodeDecodeError:
        return "unknown"
    newline = first_newline(text)
    return newline.label if newline is not None else "none"


def _report(name: str, data: bytes, args: argparse.Namespace) -> None:
    result = jpdetect.detect_result(data)
    if args.minimal:
        print(result.encoding.value if result.encoding is not None else "undetermined")
        return
    line = f"{name}: {_describe(result)}"
    if args.newline:
        line += f", newline {_newline_label(data, result)}"
    print(line)


def main(argv: list[str] | None = None) -> None:
    """Run the ``jpdetect`` command-line tool.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = argparse.ArgumentParser(
        description="Detect the character encoding of Japanese text files."
    )
    parser.add_argument("files", nargs="*", help="Files to detect encoding of")
    parser.add_argument(
        "--minimal", action="store_true", help="Output only the encoding name"
    )
    parser.add_argument(
        "--newline", action="store_true", help="Also report the first line ending"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log detection steps to stderr"
    )
    parser.add_argument(
        "--version", action="version", version=f"jpdetect {jpdetect.__version__}"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(name)s: %(message)s", stream=sys.stderr
        )

    if not args.files:
        _report("stdin", sys.stdin.buffer.read(), args)
        return

    failed = False
    for filepath in args.files:
        try:
            data = Path(filepath).read_bytes()
        except OSError as e:
            print(f"jpdetect: {filepath}: {e}", file=sys.stderr)
            failed = True
            continue
        _report(filepath, data, args)
    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()

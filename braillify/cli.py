from __future__ import annotations

import argparse
import shutil
import sys
import textwrap
from functools import partial
from pathlib import Path
from typing import Sequence

from braillify.base import BraillifyError
from braillify.bitmap import invert, parse_bitmap, render, unrender
from braillify.text import rasterize


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="braillify",
        description="Render text or a bitmap as braille characters.",
        usage=textwrap.dedent(
            """
            Render the shape of a text file, or a bitmap drawn with 0/1 or #/. characters,
            as braille text. Every braille character covers 4 lines and 2 columns.
            By default, text is laid out at the width of the terminal.

              Examples:

                Show the outline of a source file, laid out at 80 columns:
                $ braillify main.py -w 80

                # Render a bitmap and save it to a file:
                $ braillify --bitmap face.txt -o face.braille

                # Turn braille text back into a #/. bitmap:
                $ braillify --decode face.braille
            """.strip()
        ),
        add_help=True,
    )
    parser.add_argument(
        "input",
        type=str,
        nargs="?",
        default="-",
        help="The input file, or '-' to read from stdin.",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        type=Path,
        help="Output text file. If not specified, output will be written to stdout.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Output logs verbosely",
    )
    parser.add_argument(
        "-w",
        "--width",
        type=int,
        default=None,
        help="Column width used to lay out text. Defaults to the terminal width.",
    )
    parser.add_argument(
        "-i",
        "--invert",
        action="store_true",
        default=False,
        help="Invert the bitmap before rendering it.",
    )

    input_kind = parser.add_mutually_exclusive_group()
    input_kind.add_argument(
        "-b",
        "--bitmap",
        action="store_true",
        help="Treat the input as a bitmap of 0/1 or #/. characters rather than text",
    )
    input_kind.add_argument(
        "-d",
        "--decode",
        action="store_true",
        help="Treat the input as braille text and print the bitmap it draws",
    )

    args = parser.parse_args(argv)
    log = partial(print, file=sys.stderr) if args.verbose else lambda message: None

    width = args.width if args.width is not None else shutil.get_terminal_size()[0]
    if width < 1:
        parser.error(f"width must be at least 1, got {width}")

    try:
        log(f"Reading {'stdin' if args.input == '-' else args.input}")
        if args.input == "-":
            source = sys.stdin.read()
        else:
            source = Path(args.input).read_text(encoding="utf-8")

        if args.decode:
            bitmap = unrender(source)
        elif args.bitmap:
            bitmap = parse_bitmap(source)
        else:
            # Files normally end with a newline, which shouldn't count as a blank last row
            log(f"Rasterizing text at width {width}")
            bitmap = rasterize(source.removesuffix("\n"), width)

        if args.invert:
            bitmap = invert(bitmap)

        if args.decode:
            result_text = "\n".join("".join("#" if cell else "." for cell in row) for row in bitmap)
        else:
            log(f"Rendering {len(bitmap[0]) if bitmap else 0}x{len(bitmap)} bitmap")
            result_text = render(bitmap)
    except (BraillifyError, OSError, UnicodeDecodeError) as e:
        print(f"braillify: {e}", file=sys.stderr)
        return 1

    if (output_file := args.output) is not None:
        log(f"Writing output to {output_file}")
        with output_file.open("w", encoding="utf-8") as f:
            f.write(result_text + "\n")
        log(f"Output written to {output_file}")
    else:
        sys.stdout.write(result_text + "\n")

    return 0


if __name__ == "__main__":
    sys.exit(main())

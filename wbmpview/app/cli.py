from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from ..codec import Color, DecodeSettings, WbmpImage, decode_file, parse_header
from ..registry import default_registry
from ..rendering import to_pil_image
from .diagnostics import emit_warnings


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="wbmpview: inspect and convert Wireless Bitmap (WBMP) images."
    )
    parser.add_argument("path", help="WBMP file to read")
    parser.add_argument("--strict", action="store_true", help="Reject images with missing pixel data (reads the whole file)")
    parser.add_argument("--convert", metavar="OUT", help="Save the image through Pillow (format from OUT extension)")
    parser.add_argument("--ascii", action="store_true", help="Print the image as text ('#' black, '.' white)")
    return parser.parse_args(argv)


def show_info(args: argparse.Namespace) -> int:
    settings = _settings(args)
    if args.strict:
        header = decode_file(args.path, settings).header
    else:
        with open(args.path, "rb") as handle:
            header = parse_header(handle, settings.max_int_bits)
    print(f"{header.width}x{header.height} type={header.type_field} fixed=0x{header.fixed_header:02X}")
    return 0


def show_image(args: argparse.Namespace) -> int:
    image = decode_file(args.path, _settings(args))
    emit_warnings(image)
    if args.ascii:
        for line in render_ascii(image):
            print(line)
    if args.convert:
        to_pil_image(image).save(args.convert)
    return 0


def render_ascii(image: WbmpImage) -> List[str]:
    return ["".join("." if color == Color.WHITE else "#" for color in row) for row in image.pixels()]


def _settings(args: argparse.Namespace) -> DecodeSettings:
    return DecodeSettings(strict=args.strict)


def _validate_input_path(path: str) -> None:
    registry = default_registry()
    registry.for_path(path)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        _validate_input_path(args.path)
        if args.convert or args.ascii:
            return show_image(args)
        return show_info(args)
    except Exception as exc:
        print(str(exc), file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())

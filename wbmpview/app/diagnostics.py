from __future__ import annotations

import sys
from typing import List

from ..codec import WbmpImage


def collect_warnings(image: WbmpImage) -> List[str]:
    """Describe deviations the lenient decoder tolerated."""
    warnings: List[str] = []
    header = image.header
    if header.type_field != 0:
        warnings.append(f"WBMP type {header.type_field} is not type 0; pixels decoded as type 0")
    if header.fixed_header != 0:
        warnings.append(f"Fixed header byte is 0x{header.fixed_header:02X}; extension headers are ignored")
    if len(image.data) < image.expected_data_size:
        warnings.append(
            f"Pixel data is short: expected {image.expected_data_size} bytes, got {len(image.data)}"
        )
    if image.trailing_bytes:
        warnings.append(f"{image.trailing_bytes} trailing bytes after pixel data")
    if not image.padding_is_clean():
        warnings.append("Row padding bits are not zero")
    return warnings


def emit_warnings(image: WbmpImage) -> None:
    for warning in collect_warnings(image):
        print(f"warning: {warning}", file=sys.stderr)

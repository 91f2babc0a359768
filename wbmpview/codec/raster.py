from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Protocol, Tuple

from .errors import OutOfRangeAccess
from .types import BILEVEL_MODE, Color, WbmpHeader

Bounds = Tuple[int, int, int, int]


def row_stride(width: int) -> int:
    """Return the number of bytes per row, including padding bits."""
    return (width + 7) // 8


class RasterImage(Protocol):
    """Read-only pixel access shared by every decoded image kind."""

    @property
    def color_model(self) -> str: ...

    def bounds(self) -> Bounds: ...

    def color_at(self, x: int, y: int) -> Color: ...


@dataclass(frozen=True)
class WbmpImage:
    """Decoded WBMP image; pixels are computed from the packed data on each access."""

    header: WbmpHeader
    data: bytes

    @property
    def width(self) -> int:
        return self.header.width

    @property
    def height(self) -> int:
        return self.header.height

    @property
    def size(self) -> Tuple[int, int]:
        return self.header.size

    @property
    def color_model(self) -> str:
        return BILEVEL_MODE

    @property
    def stride(self) -> int:
        return row_stride(self.header.width)

    @property
    def expected_data_size(self) -> int:
        return self.stride * self.header.height

    @property
    def trailing_bytes(self) -> int:
        """Number of bytes after the last row, zero when the data is short."""
        return max(0, len(self.data) - self.expected_data_size)

    def bounds(self) -> Bounds:
        return 0, 0, self.header.width, self.header.height

    def color_at(self, x: int, y: int) -> Color:
        """Return the colour of pixel (x, y).

        The leftmost pixel of each 8-pixel group is the most significant bit
        of its byte; a set bit is white. Raises OutOfRangeAccess for
        coordinates outside the image or pixels past the end of the data.
        """
        if not (0 <= x < self.header.width and 0 <= y < self.header.height):
            raise OutOfRangeAccess(
                f"Pixel ({x}, {y}) outside image bounds {self.header.width}x{self.header.height}"
            )
        index = y * self.stride + x // 8
        if index >= len(self.data):
            raise OutOfRangeAccess(
                f"Pixel ({x}, {y}) needs byte {index} but pixel data has {len(self.data)} bytes"
            )
        if self.data[index] >> (7 - x % 8) & 1:
            return Color.WHITE
        return Color.BLACK

    def row(self, y: int) -> List[Color]:
        return [self.color_at(x, y) for x in range(self.header.width)]

    def pixels(self) -> Iterator[List[Color]]:
        for y in range(self.header.height):
            yield self.row(y)

    def padding_is_clean(self) -> bool:
        """Return True when the unused low bits of every row's last byte are zero."""
        unused = self.stride * 8 - self.header.width
        if unused == 0:
            return True
        mask = (1 << unused) - 1
        for y in range(self.header.height):
            index = (y + 1) * self.stride - 1
            if index >= len(self.data):
                break
            if self.data[index] & mask:
                return False
        return True

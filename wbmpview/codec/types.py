from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple

BILEVEL_MODE = "1"


class Color(IntEnum):
    """Pixel colour; the value is the grey level of the pixel."""

    BLACK = 0
    WHITE = 255


@dataclass(frozen=True)
class WbmpHeader:
    """Fields preceding the pixel data of a WBMP stream."""

    type_field: int
    fixed_header: int
    width: int
    height: int
    header_size: int = 0

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height


@dataclass(frozen=True)
class ImageConfig:
    width: int
    height: int
    color_model: str = BILEVEL_MODE

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

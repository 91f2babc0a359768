from __future__ import annotations

import io
from typing import BinaryIO

from .errors import HeaderOverflow, UnexpectedEndOfInput
from .types import WbmpHeader

DEFAULT_MAX_BITS = 64


def encode_multibyte_int(value: int) -> bytes:
    """Encode an unsigned integer as a WBMP multi-byte integer (MSB first)."""
    if value < 0:
        raise ValueError("Multi-byte integers must be non-negative")
    out = [value & 0x7F]
    value >>= 7
    while value:
        out.append(0x80 | (value & 0x7F))
        value >>= 7
    return bytes(reversed(out))


def read_byte(stream: BinaryIO, field: str) -> int:
    chunk = stream.read(1)
    if not chunk:
        raise UnexpectedEndOfInput(field)
    return chunk[0]


def read_multibyte_int(stream: BinaryIO, field: str = "integer", max_bits: int = DEFAULT_MAX_BITS) -> int:
    """Read one multi-byte integer: 7 bits per byte, high bit set on all but the last byte."""
    value = 0
    while True:
        byte = read_byte(stream, field)
        value = (value << 7) | (byte & 0x7F)
        if value >> max_bits:
            raise HeaderOverflow(field, max_bits)
        if not byte & 0x80:
            return value


def parse_header(stream: BinaryIO, max_bits: int = DEFAULT_MAX_BITS) -> WbmpHeader:
    """Read type, fixed header byte, width and height, leaving the stream at the pixel data.

    Only single-byte reads are issued, so the stream is never advanced past
    the last header byte.
    """
    consumed = _CountingReader(stream)
    type_field = read_multibyte_int(consumed, "type field", max_bits)
    fixed_header = read_byte(consumed, "fixed header")
    width = read_multibyte_int(consumed, "width", max_bits)
    height = read_multibyte_int(consumed, "height", max_bits)
    return WbmpHeader(
        type_field=type_field,
        fixed_header=fixed_header,
        width=width,
        height=height,
        header_size=consumed.count,
    )


def parse_header_bytes(data: bytes, max_bits: int = DEFAULT_MAX_BITS) -> WbmpHeader:
    return parse_header(io.BytesIO(data), max_bits)


class _CountingReader:
    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self.count = 0

    def read(self, size: int = -1) -> bytes:
        chunk = self._stream.read(size)
        if chunk:
            self.count += len(chunk)
        return chunk

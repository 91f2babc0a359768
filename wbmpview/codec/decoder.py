from __future__ import annotations

import io
from dataclasses import dataclass
from typing import BinaryIO, Optional, Tuple

from .errors import IOFailure, TruncatedPixelData
from .header import DEFAULT_MAX_BITS, parse_header
from .raster import WbmpImage
from .types import ImageConfig, WbmpHeader


@dataclass
class DecodeSettings:
    strict: bool = False
    max_int_bits: int = DEFAULT_MAX_BITS
    buffer_size: int = io.DEFAULT_BUFFER_SIZE

    def __post_init__(self) -> None:
        if self.buffer_size <= 0:
            raise ValueError("buffer_size must be greater than zero")
        if self.max_int_bits <= 0:
            raise ValueError("max_int_bits must be greater than zero")


def decode(stream: BinaryIO, settings: Optional[DecodeSettings] = None) -> WbmpImage:
    """Decode a complete WBMP image, reading the stream to its end."""
    settings = settings or DecodeSettings()
    reader, wrapped = _buffered(stream, settings.buffer_size)
    try:
        header = parse_header(reader, settings.max_int_bits)
        data = _read_to_end(reader, settings.buffer_size)
    finally:
        if wrapped:
            reader.detach()
    image = WbmpImage(header, data)
    if settings.strict and len(data) < image.expected_data_size:
        raise TruncatedPixelData(image.expected_data_size, len(data))
    return image


def decode_config(stream: BinaryIO, settings: Optional[DecodeSettings] = None) -> ImageConfig:
    """Decode only the image dimensions, leaving the stream at the first pixel byte."""
    settings = settings or DecodeSettings()
    header = _read_header_only(stream, settings)
    return ImageConfig(width=header.width, height=header.height)


def decode_bytes(data: bytes, settings: Optional[DecodeSettings] = None) -> WbmpImage:
    return decode(io.BytesIO(data), settings)


def decode_file(path: str, settings: Optional[DecodeSettings] = None) -> WbmpImage:
    with open(path, "rb") as handle:
        return decode(handle, settings)


def decode_config_file(path: str, settings: Optional[DecodeSettings] = None) -> ImageConfig:
    with open(path, "rb") as handle:
        return decode_config(handle, settings)


def _read_header_only(stream: BinaryIO, settings: DecodeSettings) -> WbmpHeader:
    # Unseekable raw sources are read bytewise on purpose: read-ahead could not be given back.
    if hasattr(stream, "peek") or not _seekable(stream):
        return parse_header(stream, settings.max_int_bits)
    start = stream.tell()
    reader = io.BufferedReader(stream, settings.buffer_size)
    try:
        header = parse_header(reader, settings.max_int_bits)
    finally:
        reader.detach()
    stream.seek(start + header.header_size)
    return header


def _buffered(stream: BinaryIO, buffer_size: int) -> Tuple[BinaryIO, bool]:
    if hasattr(stream, "peek"):
        return stream, False
    return io.BufferedReader(stream, buffer_size), True


def _seekable(stream: BinaryIO) -> bool:
    seekable = getattr(stream, "seekable", None)
    return bool(seekable and seekable())


def _read_to_end(reader: BinaryIO, chunk_size: int) -> bytes:
    chunks = []
    while True:
        try:
            chunk = reader.read(chunk_size)
        except OSError as exc:
            raise IOFailure(f"Failed to read WBMP pixel data: {exc}") from exc
        if not chunk:
            break
        chunks.append(chunk)
    return b"".join(chunks)

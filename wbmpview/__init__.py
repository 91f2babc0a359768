"""Decoder for Wireless Bitmap (WBMP) images."""

__version__ = "0.1.0"

from .codec import (
    Color,
    DecodeSettings,
    HeaderOverflow,
    IOFailure,
    ImageConfig,
    OutOfRangeAccess,
    RasterImage,
    TruncatedPixelData,
    UnexpectedEndOfInput,
    UnknownFormat,
    WbmpError,
    WbmpHeader,
    WbmpImage,
    decode,
    decode_bytes,
    decode_config,
    decode_file,
    row_stride,
)
from .registry import FormatRegistry, ImageFormat, WBMP_FORMAT, default_registry

__all__ = [
    "Color",
    "DecodeSettings",
    "FormatRegistry",
    "HeaderOverflow",
    "IOFailure",
    "ImageConfig",
    "ImageFormat",
    "OutOfRangeAccess",
    "RasterImage",
    "TruncatedPixelData",
    "UnexpectedEndOfInput",
    "UnknownFormat",
    "WBMP_FORMAT",
    "WbmpError",
    "WbmpHeader",
    "WbmpImage",
    "decode",
    "decode_bytes",
    "decode_config",
    "decode_file",
    "default_registry",
    "row_stride",
]

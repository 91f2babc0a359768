from .decoder import (
    DecodeSettings,
    decode,
    decode_bytes,
    decode_config,
    decode_config_file,
    decode_file,
)
from .errors import (
    HeaderOverflow,
    IOFailure,
    OutOfRangeAccess,
    TruncatedPixelData,
    UnexpectedEndOfInput,
    UnknownFormat,
    WbmpError,
)
from .header import encode_multibyte_int, parse_header, parse_header_bytes, read_multibyte_int
from .raster import RasterImage, WbmpImage, row_stride
from .types import Color, ImageConfig, WbmpHeader

__all__ = [
    "Color",
    "DecodeSettings",
    "HeaderOverflow",
    "IOFailure",
    "ImageConfig",
    "OutOfRangeAccess",
    "RasterImage",
    "TruncatedPixelData",
    "UnexpectedEndOfInput",
    "UnknownFormat",
    "WbmpError",
    "WbmpHeader",
    "WbmpImage",
    "decode",
    "decode_bytes",
    "decode_config",
    "decode_config_file",
    "decode_file",
    "encode_multibyte_int",
    "parse_header",
    "parse_header_bytes",
    "read_multibyte_int",
    "row_stride",
]

from __future__ import annotations


class WbmpError(Exception):
    """Base class for every error raised while decoding a WBMP image."""

    def __init__(self, message: str = "") -> None:
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class UnexpectedEndOfInput(WbmpError, EOFError):
    """The stream ended before a header field was fully read."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Unexpected end of input while reading WBMP {field}")


class HeaderOverflow(WbmpError, ValueError):
    """A multi-byte header integer does not fit in the allowed number of bits."""

    def __init__(self, field: str, max_bits: int) -> None:
        self.field = field
        self.max_bits = max_bits
        super().__init__(f"WBMP {field} does not fit in {max_bits} bits")


class IOFailure(WbmpError, OSError):
    """Reading pixel data failed for a reason other than end of stream."""


class OutOfRangeAccess(WbmpError, IndexError):
    """A pixel was requested outside the image or beyond its pixel data."""


class TruncatedPixelData(WbmpError, ValueError):
    """Strict decoding found fewer pixel bytes than the header requires."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Pixel data too short: expected {expected} bytes, got {actual}")


class UnknownFormat(WbmpError, KeyError):
    """No registered image format matches the requested name or extension."""

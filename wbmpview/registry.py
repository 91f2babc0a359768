from __future__ import annotations

import os
from dataclasses import dataclass
from typing import BinaryIO, Callable, Dict, Iterable, List, Optional, Set, Tuple

from .codec import ImageConfig, RasterImage, UnknownFormat, decode, decode_config


@dataclass(frozen=True)
class ImageFormat:
    name: str
    extensions: Tuple[str, ...]
    mime_type: str
    decode: Callable[[BinaryIO], RasterImage]
    decode_config: Callable[[BinaryIO], ImageConfig]


WBMP_FORMAT = ImageFormat(
    name="wbmp",
    extensions=(".wbmp",),
    mime_type="image/vnd.wap.wbmp",
    decode=decode,
    decode_config=decode_config,
)


class FormatRegistry:
    """Image formats known to an application, looked up by name or file extension."""

    def __init__(self, formats: Optional[Iterable[ImageFormat]] = None) -> None:
        self._formats: Dict[str, ImageFormat] = {}
        for fmt in formats or ():
            self.register(fmt)

    def register(self, fmt: ImageFormat) -> None:
        key = fmt.name.lower()
        if key in self._formats:
            raise ValueError(f"Image format already registered: {fmt.name}")
        self._formats[key] = fmt

    @property
    def formats(self) -> List[ImageFormat]:
        return list(self._formats.values())

    @property
    def supported_extensions(self) -> Set[str]:
        return {ext for fmt in self._formats.values() for ext in fmt.extensions}

    def get(self, name: str) -> ImageFormat:
        fmt = self._formats.get(name.lower())
        if not fmt:
            raise UnknownFormat(f"Unknown image format: {name}")
        return fmt

    def for_path(self, path: str) -> ImageFormat:
        ext = os.path.splitext(path)[1].lower()
        for fmt in self._formats.values():
            if ext in fmt.extensions:
                return fmt
        raise UnknownFormat(f"Unsupported file extension: {ext}")

    def decode(self, name: str, stream: BinaryIO) -> RasterImage:
        return self.get(name).decode(stream)

    def decode_config(self, name: str, stream: BinaryIO) -> ImageConfig:
        return self.get(name).decode_config(stream)

    def open(self, path: str) -> RasterImage:
        fmt = self.for_path(path)
        with open(path, "rb") as handle:
            return fmt.decode(handle)


def default_registry() -> FormatRegistry:
    return FormatRegistry([WBMP_FORMAT])


__all__ = ["FormatRegistry", "ImageFormat", "WBMP_FORMAT", "default_registry"]

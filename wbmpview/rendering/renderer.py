from __future__ import annotations

from typing import List

from PIL import Image

from ..codec import Color, RasterImage, WbmpImage


def image_to_bw_pixels(image: RasterImage) -> List[int]:
    """Return row-major pixels of any raster image, 1 for white and 0 for black."""
    x0, y0, x1, y1 = image.bounds()
    return [
        1 if image.color_at(x, y) == Color.WHITE else 0
        for y in range(y0, y1)
        for x in range(x0, x1)
    ]


def to_pil_image(image: RasterImage) -> Image.Image:
    # Pillow's packed "1" layout matches WBMP rows: MSB first, byte padded, set bit white.
    if isinstance(image, WbmpImage) and image.expected_data_size and len(image.data) >= image.expected_data_size:
        return Image.frombytes("1", image.size, image.data[: image.expected_data_size])
    x0, y0, x1, y1 = image.bounds()
    pixels = image_to_bw_pixels(image)
    img = Image.new("1", (x1 - x0, y1 - y0), 0)
    if pixels:
        img.putdata([255 if p else 0 for p in pixels])
    return img

"""PNG loading into bottom-left-origin RGBA pixel buffers."""

from __future__ import annotations

import os
from dataclasses import dataclass

from PIL import Image

_BYTES_PER_PIXEL = 4


class ImageLoadError(OSError):
    """Raised when a PNG file cannot be read or decoded."""


@dataclass(frozen=True)
class PNGImage:
    """Decoded image: RGBA bytes, rows ordered from the bottom up."""

    width: int
    height: int
    pixels: bytes


def _flip_rows(data: bytes, width: int, height: int) -> bytes:
    row_bytes = _BYTES_PER_PIXEL * width
    rows = [data[row * row_bytes:(row + 1) * row_bytes] for row in range(height)]
    return b"".join(reversed(rows))


def load_png_file(file_name: str | os.PathLike[str]) -> PNGImage:
    """Decode a PNG file to RGBA and flip it so the first row is the bottom one."""
    try:
        with Image.open(file_name) as image:
            image_format = image.format
            rgba = image.convert("RGBA")
    except (OSError, ValueError, SyntaxError) as exc:
        raise ImageLoadError(f"decoder error: {exc}") from exc

    if image_format != "PNG":
        raise ImageLoadError(f"decoder error: {os.fspath(file_name)} is not a PNG file")

    width, height = rgba.size
    pixels = _flip_rows(rgba.tobytes(), width, height)
    return PNGImage(width=width, height=height, pixels=pixels)
"""Writing rendered canvases as 32-bit BMP files."""

from __future__ import annotations

import struct
from os import PathLike
from typing import Sequence

HEADER_SIZE = 54
DIB_HEADER_SIZE = 40
COLOR_PLANES = 1
BITS_PER_PIXEL = 32


def _header(width: int, height: int) -> bytes:
    file_size = HEADER_SIZE + 3 * width * height
    return (b"BM"
            + struct.pack("<I", file_size & 0xFFFFFFFF)
            + bytes(4)
            + struct.pack("<I", HEADER_SIZE)
            + struct.pack("<Iii", DIB_HEADER_SIZE, width, height)
            + struct.pack("<HH", COLOR_PLANES, BITS_PER_PIXEL)
            + bytes(24))


def bmp_bytes(canvas: Sequence[Sequence[int]], width: int, height: int) -> bytes:
    """Encode rows of packed pixels, top row first, as a BMP image."""
    if len(canvas) != height or any(len(row) != width for row in canvas):
        raise ValueError(f"canvas is not {width}x{height} pixels")
    pixels = b"".join(struct.pack(f"<{width}I", *row) for row in reversed(canvas))
    padding = bytes(4 - (width * 3) % 4)
    return _header(width, height) + pixels + padding


def write_bmp(path: str | PathLike[str], canvas: Sequence[Sequence[int]],
              width: int, height: int) -> None:
    """Write ``canvas`` to ``path`` as a BMP image."""
    data = bmp_bytes(canvas, width, height)
    with open(path, "wb") as handle:
        handle.write(data)
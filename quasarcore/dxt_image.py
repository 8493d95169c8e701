"""DXT compression of whole RGBA images, plus related pixel conversions.

Images are row-major RGBA bytes, four bytes per pixel.  They are cut into
4x4 blocks, left to right and top to bottom.  Blocks that run past the right
or bottom edge are padded by repeating pixels from inside the image.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Iterator, Sequence, Tuple, Union

import numpy as np

from .dxt_block import compress_dxt_block

__all__ = [
    "extract_block",
    "rgb_to_ycocg_block",
    "ryg_compress",
    "ryg_compress_ycocg",
    "linearize",
]

PixelsLike = Union[bytes, bytearray, memoryview, Sequence[int]]

# Whole-image compression refines twice and does not dither.
_IMAGE_MODE = 10

# For an edge block that holds n pixels in a row (or column), which of them
# fills each of the four slots: row n - 1 of this table.
_REMAP = (
    (0, 0, 0, 0),
    (0, 1, 0, 1),
    (0, 1, 2, 0),
    (0, 1, 2, 3),
)


def _as_image(pixels: PixelsLike, width: int, height: int) -> bytes:
    if width < 0 or height < 0:
        raise ValueError(f"image size must not be negative, got {width}x{height}")
    data = bytes(pixels)
    expected = width * height * 4
    if len(data) != expected:
        raise ValueError(f"a {width}x{height} RGBA image holds {expected} bytes, got {len(data)}")
    return data


def _block_origins(width: int, height: int) -> Iterator[Tuple[int, int]]:
    for y in range(0, height, 4):
        for x in range(0, width, 4):
            yield x, y


def _extract(data: bytes, x: int, y: int, width: int, height: int) -> bytes:
    rows = _REMAP[min(height - y, 4) - 1]
    cols = _REMAP[min(width - x, 4) - 1]
    stride = width * 4
    block = bytearray()
    for row in rows:
        line = (y + row) * stride
        for col in cols:
            start = line + (x + col) * 4
            block += data[start : start + 4]
    return bytes(block)


def extract_block(pixels: PixelsLike, x: int, y: int, width: int, height: int) -> bytes:
    """The 64-byte 4x4 block whose top-left pixel is at (``x``, ``y``)."""
    data = _as_image(pixels, width, height)
    if not (0 <= x < width and 0 <= y < height):
        raise ValueError(f"block origin ({x}, {y}) lies outside the {width}x{height} image")
    return _extract(data, x, y, width, height)


def _clamp255(n: int) -> int:
    return max(0, min(255, n))


def rgb_to_ycocg_block(block: PixelsLike) -> bytes:
    """Convert a 64-byte RGBA block to (Co, Cg, scale, Y) per pixel.

    The scale byte is always zero: the colour extents are never measured, so
    the scale factor stays at its unquantised minimum.
    """
    data = bytes(block)
    if len(data) != 64:
        raise ValueError(f"a block holds 64 bytes (16 RGBA pixels), got {len(data)}")
    scale_byte = 0
    out = bytearray()
    for i in range(0, 64, 4):
        r = data[i]
        g = (data[i + 1] + 1) >> 1
        b = data[i + 2]
        tmp = (2 + r + b) >> 2
        co = _clamp255(128 + ((r - b + 1) >> 1))
        luma = _clamp255(g + tmp)
        cg = _clamp255(128 + g - tmp)
        out += bytes((co, cg, scale_byte, luma))
    return bytes(out)


def ryg_compress(pixels: PixelsLike, width: int, height: int, dxt5: bool = False) -> bytes:
    """Compress an RGBA image to DXT1, or to DXT5 when ``dxt5`` is set."""
    data = _as_image(pixels, width, height)
    return b"".join(
        compress_dxt_block(_extract(data, x, y, width, height), dxt5, _IMAGE_MODE)
        for x, y in _block_origins(width, height)
    )


def ryg_compress_ycocg(pixels: PixelsLike, width: int, height: int) -> bytes:
    """Compress an RGBA image to DXT5 after converting each block to YCoCg."""
    data = _as_image(pixels, width, height)
    return b"".join(
        compress_dxt_block(rgb_to_ycocg_block(_extract(data, x, y, width, height)), True, _IMAGE_MODE)
        for x, y in _block_origins(width, height)
    )


@lru_cache(maxsize=1)
def _linearize_table() -> bytes:
    table = bytearray()
    for value in range(256):
        srgb = np.float32(value) / np.float32(255.0)
        if srgb < 0.04045:
            linear = srgb / np.float32(12.92)
        else:
            linear = np.power((srgb + np.float32(0.055)) / np.float32(1.055), np.float32(2.4))
        root = float(np.sqrt(np.float32(linear)))
        table.append(int(np.floor(root * 255.0 + 0.5)) & 0xFF)
    return bytes(table)


def linearize(pixels: PixelsLike) -> bytes:
    """Map every byte of RGBA pixels from sRGB to the square root of linear light."""
    data = bytes(pixels)
    if len(data) % 4:
        raise ValueError(f"RGBA pixel data must be a multiple of 4 bytes, got {len(data)}")
    return data.translate(_linearize_table())
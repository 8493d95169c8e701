"""Texture formats, sampling options and the specification describing a texture."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum
from pathlib import Path
from typing import Union

__all__ = [
    "TextureFormat",
    "TextureWrap",
    "TextureFilter",
    "TextureSpecification",
    "texture_wrap_to_str",
    "texture_filter_to_str",
    "texture_format_to_str",
    "str_to_texture_wrap",
    "str_to_texture_filter",
    "desired_channels",
    "resolve_formats",
    "read_file",
]


class TextureFormat(IntEnum):
    RED = 0
    RGB = 1
    RGBA = 2
    SRGB = 3
    SRGBA = 4


class TextureWrap(IntEnum):
    REPEAT = 0
    MIRRORED_REPEAT = 1
    CLAMP_TO_EDGE = 2
    CLAMP_TO_BORDER = 3


class TextureFilter(IntEnum):
    NEAREST = 0
    LINEAR = 1
    NEAREST_MIPMAP_NEAREST = 2
    LINEAR_MIPMAP_NEAREST = 3
    NEAREST_MIPMAP_LINEAR = 4
    LINEAR_MIPMAP_LINEAR = 5


@dataclass
class TextureSpecification:
    """How a texture is stored and sampled."""

    format: TextureFormat = TextureFormat.RGB
    internal_format: TextureFormat = TextureFormat.RGB

    wrap_r: TextureWrap = TextureWrap.REPEAT
    wrap_s: TextureWrap = TextureWrap.REPEAT
    wrap_t: TextureWrap = TextureWrap.REPEAT

    min_filter: TextureFilter = TextureFilter.NEAREST
    mag_filter: TextureFilter = TextureFilter.NEAREST

    width: int = 0
    height: int = 0

    alpha: bool = False
    gamma: bool = False
    flip: bool = False
    mipmap: bool = True
    compressed: bool = False

    samples: int = 1
    channels: int = 3


_WRAP_NAMES = {
    TextureWrap.REPEAT: "Repeat",
    TextureWrap.MIRRORED_REPEAT: "Mirrored Repeat",
    TextureWrap.CLAMP_TO_EDGE: "Clamp to Edge",
    TextureWrap.CLAMP_TO_BORDER: "Clamp to Border",
}

_FILTER_NAMES = {
    TextureFilter.NEAREST: "Nearest",
    TextureFilter.LINEAR: "Linear",
    TextureFilter.NEAREST_MIPMAP_NEAREST: "Nearest Mipmap Nearest",
    TextureFilter.LINEAR_MIPMAP_NEAREST: "Linear Mipmap Nearest",
    TextureFilter.NEAREST_MIPMAP_LINEAR: "Nearest Mipmap Linear",
    TextureFilter.LINEAR_MIPMAP_LINEAR: "Linear Mipmap Linear",
}

_FORMAT_NAMES = {
    TextureFormat.RED: "RED",
    TextureFormat.RGB: "RGB",
    TextureFormat.RGBA: "RGBA",
    TextureFormat.SRGB: "SRGB",
    TextureFormat.SRGBA: "SRGBA",
}

_WRAPS_BY_NAME = {name: wrap for wrap, name in _WRAP_NAMES.items()}
_FILTERS_BY_NAME = {name: filt for filt, name in _FILTER_NAMES.items()}

_CHANNELS = {TextureFormat.RGB: 3, TextureFormat.RGBA: 4, TextureFormat.RED: 1}


def texture_wrap_to_str(wrap: TextureWrap) -> str:
    return _WRAP_NAMES.get(wrap, "Unknown")


def texture_filter_to_str(filter: TextureFilter) -> str:
    return _FILTER_NAMES.get(filter, "Unknown")


def texture_format_to_str(format: TextureFormat) -> str:
    return _FORMAT_NAMES.get(format, "Unknown")


def str_to_texture_wrap(text: str) -> TextureWrap:
    """Parse a wrap mode's display name; unknown names give ``REPEAT``."""
    return _WRAPS_BY_NAME.get(text, TextureWrap.REPEAT)


def str_to_texture_filter(text: str) -> TextureFilter:
    """Parse a filter's display name; unknown names give ``NEAREST``."""
    return _FILTERS_BY_NAME.get(text, TextureFilter.NEAREST)


def desired_channels(format: TextureFormat) -> int:
    """Channels to request when decoding an image into ``format`` (0: keep as stored)."""
    return _CHANNELS.get(format, 0)


def resolve_formats(specification: TextureSpecification) -> TextureSpecification:
    """Return a copy whose formats follow its ``alpha`` and ``gamma`` flags."""
    if specification.alpha:
        fmt = TextureFormat.RGBA
        internal = TextureFormat.SRGBA if specification.gamma else TextureFormat.RGBA
    else:
        fmt = TextureFormat.RGB
        internal = TextureFormat.SRGB if specification.gamma else TextureFormat.RGB
    return replace(specification, format=fmt, internal_format=internal)


def read_file(path: Union[str, Path]) -> bytes:
    """Return the whole content of the file at ``path``."""
    return Path(path).read_bytes()
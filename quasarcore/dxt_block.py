"""Compression of 4x4 RGBA pixel blocks into DXT1 (BC1) and DXT5 (BC3) blocks.

A source block is 64 bytes: 16 pixels of RGBA in row-major order.  A colour
block is 8 bytes: two RGB565 endpoints followed by sixteen 2-bit indices.  A
DXT5 block is an 8-byte alpha block followed by the colour block.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntFlag
from functools import lru_cache
from typing import List, Sequence, Tuple, Union

import numpy as np

__all__ = ["DxtMode", "compress_dxt_block", "compress_color_block", "compress_alpha_block"]

BlockLike = Union[bytes, bytearray, memoryview, Sequence[int]]

_MASK32 = 0xFFFFFFFF
_F32 = np.float32


class DxtMode(IntFlag):
    """Compression mode flags."""

    NORMAL = 0
    DITHER = 1  # dither before fitting; not for normal maps
    HIGHQUAL = 2  # two refinement passes instead of one


@dataclass(frozen=True)
class _Tables:
    expand5: Tuple[int, ...]
    expand6: Tuple[int, ...]
    omatch5: Tuple[Tuple[int, int], ...]
    omatch6: Tuple[Tuple[int, int], ...]
    quant_rb: Tuple[int, ...]
    quant_g: Tuple[int, ...]


def _mul8bit(a: int, b: int) -> int:
    t = a * b + 128
    return (t + (t >> 8)) >> 8


def _lerp13(a: int, b: int) -> int:
    """Point one third of the way from ``a`` to ``b``, without rounding bias."""
    return (2 * a + b) // 3


def _prepare_opt_table(expand: Sequence[int]) -> Tuple[Tuple[int, int], ...]:
    """For each 8-bit value, the (max, min) endpoint pair reproducing it best."""
    size = len(expand)
    values = np.asarray(expand, dtype=np.int64)
    maxe = values[np.newaxis, :]  # indexed by mx
    mine = values[:, np.newaxis]  # indexed by mn
    lerped = (2 * maxe + mine) // 3
    spread = np.abs(maxe - mine) * 3 // 100
    targets = np.arange(256, dtype=np.int64)[:, np.newaxis, np.newaxis]
    errors = np.abs(lerped[np.newaxis] - targets) + spread[np.newaxis]
    # Pairs are scanned mn-major; the first strict minimum wins.
    best = errors.reshape(256, size * size).argmin(axis=1)
    return tuple((int(b % size), int(b // size)) for b in best)


@lru_cache(maxsize=1)
def _tables() -> _Tables:
    expand5 = tuple((i << 3) | (i >> 2) for i in range(32))
    expand6 = tuple((i << 2) | (i >> 4) for i in range(64))
    quant_rb = []
    quant_g = []
    for i in range(256 + 16):
        v = min(max(i - 8, 0), 255)
        quant_rb.append(expand5[_mul8bit(v, 31)])
        quant_g.append(expand6[_mul8bit(v, 63)])
    return _Tables(
        expand5=expand5,
        expand6=expand6,
        omatch5=_prepare_opt_table(expand5),
        omatch6=_prepare_opt_table(expand6),
        quant_rb=tuple(quant_rb),
        quant_g=tuple(quant_g),
    )


def _as_block(block: BlockLike) -> bytes:
    data = bytes(block)
    if len(data) != 64:
        raise ValueError(f"a block holds 64 bytes (16 RGBA pixels), got {len(data)}")
    return data


def _as16bit(r: int, g: int, b: int) -> int:
    return (_mul8bit(r, 31) << 11) + (_mul8bit(g, 63) << 5) + _mul8bit(b, 31)


def _from16bit(v: int, tables: _Tables) -> List[int]:
    return [
        tables.expand5[(v & 0xF800) >> 11],
        tables.expand6[(v & 0x07E0) >> 5],
        tables.expand5[v & 0x001F],
        0,
    ]


def _eval_colors(c0: int, c1: int, tables: _Tables) -> List[int]:
    first = _from16bit(c0, tables)
    second = _from16bit(c1, tables)
    third = [_lerp13(a, b) for a, b in zip(first[:3], second[:3])] + [0]
    fourth = [_lerp13(a, b) for a, b in zip(second[:3], first[:3])] + [0]
    return first + second + third + fourth


def _single_color_endpoints(r: int, g: int, b: int, tables: _Tables) -> Tuple[int, int]:
    o5, o6 = tables.omatch5, tables.omatch6
    max16 = (o5[r][0] << 11) | (o6[g][0] << 5) | o5[b][0]
    min16 = (o5[r][1] << 11) | (o6[g][1] << 5) | o5[b][1]
    return max16, min16


def _dither_block(block: bytes, tables: _Tables) -> bytes:
    """Floyd-Steinberg dither of the block's RGB channels to RGB565 levels."""
    dest = bytearray(64)
    for ch in range(3):
        quant = tables.quant_g if ch == 1 else tables.quant_rb
        ep1 = [0, 0, 0, 0]
        ep2 = [0, 0, 0, 0]
        for y in range(4):
            base = y * 16 + ch
            b0, b1, b2, b3 = (block[base + 4 * k] for k in range(4))
            d0 = quant[8 + b0 + ((3 * ep2[1] + 5 * ep2[0]) >> 4)]
            ep1[0] = b0 - d0
            d1 = quant[8 + b1 + ((7 * ep1[0] + 3 * ep2[2] + 5 * ep2[1] + ep2[0]) >> 4)]
            ep1[1] = b1 - d1
            d2 = quant[8 + b2 + ((7 * ep1[1] + 3 * ep2[3] + 5 * ep2[2] + ep2[1]) >> 4)]
            ep1[2] = b2 - d2
            d3 = quant[8 + b3 + ((7 * ep1[2] + 5 * ep2[3] + ep2[2]) >> 4)]
            ep1[3] = b3 - d3
            dest[base], dest[base + 4], dest[base + 8], dest[base + 12] = d0, d1, d2, d3
            ep1, ep2 = ep2, ep1
    return bytes(dest)


def _pick_step(dot: int, half_point: int, c0_point: int, c3_point: int) -> int:
    if dot < half_point:
        return 1 if dot < c0_point else 3
    return 2 if dot < c3_point else 0


_INDEX_MAP = (0 << 30, 2 << 30, 0 << 30, 2 << 30, 3 << 30, 3 << 30, 1 << 30, 1 << 30)


def _match_colors_block(block: bytes, color: Sequence[int], dither: bool) -> int:
    """Choose a palette index for each pixel by projecting onto the endpoint axis."""
    dirr = color[0] - color[4]
    dirg = color[1] - color[5]
    dirb = color[2] - color[6]
    dots = [block[i * 4] * dirr + block[i * 4 + 1] * dirg + block[i * 4 + 2] * dirb for i in range(16)]
    stops = [color[i * 4] * dirr + color[i * 4 + 1] * dirg + color[i * 4 + 2] * dirb for i in range(4)]

    c0_point = (stops[1] + stops[3]) >> 1
    half_point = (stops[3] + stops[2]) >> 1
    c3_point = (stops[2] + stops[0]) >> 1

    mask = 0
    if not dither:
        for dot in dots:
            mask >>= 2
            bits = (
                (4 if dot < half_point else 0)
                | (2 if dot < c0_point else 0)
                | (1 if dot < c3_point else 0)
            )
            mask |= _INDEX_MAP[bits]
        return mask & _MASK32

    c0_point <<= 4
    half_point <<= 4
    c3_point <<= 4
    ep1 = [0, 0, 0, 0]
    ep2 = [0, 0, 0, 0]
    for y in range(4):
        dp = dots[y * 4 : y * 4 + 4]
        dot = (dp[0] << 4) + (3 * ep2[1] + 5 * ep2[0])
        step = _pick_step(dot, half_point, c0_point, c3_point)
        ep1[0] = dp[0] - stops[step]
        lmask = step

        dot = (dp[1] << 4) + (7 * ep1[0] + 3 * ep2[2] + 5 * ep2[1] + ep2[0])
        step = _pick_step(dot, half_point, c0_point, c3_point)
        ep1[1] = dp[1] - stops[step]
        lmask |= step << 2

        dot = (dp[2] << 4) + (7 * ep1[1] + 3 * ep2[3] + 5 * ep2[2] + ep2[1])
        step = _pick_step(dot, half_point, c0_point, c3_point)
        ep1[2] = dp[2] - stops[step]
        lmask |= step << 4

        dot = (dp[3] << 4) + (7 * ep1[2] + 5 * ep2[3] + ep2[2])
        step = _pick_step(dot, half_point, c0_point, c3_point)
        ep1[3] = dp[3] - stops[step]
        lmask |= step << 6

        mask |= lmask << (y * 8)
        ep1, ep2 = ep2, ep1
    return mask & _MASK32


def _optimize_colors_block(block: bytes) -> Tuple[int, int]:
    """Initial endpoints from the principal axis of the block's colours."""
    mu = []
    lows = []
    highs = []
    for ch in range(3):
        channel = block[ch::4]
        mu.append((sum(channel) + 8) >> 4)
        lows.append(min(channel))
        highs.append(max(channel))

    cov = [0] * 6
    for i in range(16):
        r = block[i * 4] - mu[0]
        g = block[i * 4 + 1] - mu[1]
        b = block[i * 4 + 2] - mu[2]
        cov[0] += r * r
        cov[1] += r * g
        cov[2] += r * b
        cov[3] += g * g
        cov[4] += g * b
        cov[5] += b * b

    covf = [_F32(c) / _F32(255.0) for c in cov]
    vfr = _F32(highs[0] - lows[0])
    vfg = _F32(highs[1] - lows[1])
    vfb = _F32(highs[2] - lows[2])
    with np.errstate(over="ignore", invalid="ignore"):
        for _ in range(4):
            r = vfr * covf[0] + vfg * covf[1] + vfb * covf[2]
            g = vfr * covf[1] + vfg * covf[3] + vfb * covf[4]
            b = vfr * covf[2] + vfg * covf[4] + vfb * covf[5]
            vfr, vfg, vfb = r, g, b

    magn = max(abs(float(vfr)), abs(float(vfg)), abs(float(vfb)))
    if magn < 4.0:
        v_r, v_g, v_b = 299, 587, 114  # luma weights scaled by 1000
    else:
        scale = 512.0 / magn
        v_r = int(float(vfr) * scale)
        v_g = int(float(vfg) * scale)
        v_b = int(float(vfb) * scale)

    mind = maxd = block[0] * v_r + block[1] * v_g + block[2] * v_b
    minp = maxp = 0
    for i in range(1, 16):
        dot = block[i * 4] * v_r + block[i * 4 + 1] * v_g + block[i * 4 + 2] * v_b
        if dot < mind:
            mind = dot
            minp = i
            continue
        if dot > maxd:
            maxd = dot
            maxp = i

    max16 = _as16bit(block[maxp * 4], block[maxp * 4 + 1], block[maxp * 4 + 2])
    min16 = _as16bit(block[minp * 4], block[minp * 4 + 1], block[minp * 4 + 2])
    return max16, min16


def _sclamp(y, low: int, high: int) -> int:
    x = int(y)
    x = high if x > high else x
    return low if x < low else x


_W1_TAB = (3, 0, 2, 1)
_PRODS = (0x090000, 0x000900, 0x040102, 0x010402)


def _refine_block(block: bytes, max16: int, min16: int, mask: int, tables: _Tables) -> Tuple[bool, int, int]:
    """Least-squares refit of the endpoints to the current indices."""
    old_min, old_max = min16, max16

    if (mask ^ ((mask << 2) & _MASK32)) < 4:
        # Every pixel has the same index: fit the average colour instead.
        r = (8 + sum(block[0::4])) >> 4
        g = (8 + sum(block[1::4])) >> 4
        b = (8 + sum(block[2::4])) >> 4
        max16, min16 = _single_color_endpoints(r, g, b, tables)
    else:
        akku = 0
        at1 = [0, 0, 0]
        at2 = [0, 0, 0]
        cm = mask
        for i in range(16):
            step = cm & 3
            w1 = _W1_TAB[step]
            akku += _PRODS[step]
            for ch in range(3):
                value = block[i * 4 + ch]
                at1[ch] += w1 * value
                at2[ch] += value
            cm >>= 2
        at2 = [3 * a2 - a1 for a1, a2 in zip(at1, at2)]

        xx = akku >> 16
        yy = (akku >> 8) & 0xFF
        xy = akku & 0xFF

        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            frb = _F32(3.0) * _F32(31.0) / _F32(255.0) / _F32(xx * yy - xy * xy)
            fg = frb * _F32(63.0) / _F32(31.0)
            half = _F32(0.5)

            def solve(value: int, factor, top: int) -> int:
                result = _F32(value) * factor + half
                if not np.isfinite(result):
                    return top if result > 0 else 0
                return _sclamp(result, 0, top)

            max16 = solve(at1[0] * yy - at2[0] * xy, frb, 31) << 11
            max16 |= solve(at1[1] * yy - at2[1] * xy, fg, 63) << 5
            max16 |= solve(at1[2] * yy - at2[2] * xy, frb, 31)

            min16 = solve(at2[0] * xx - at1[0] * xy, frb, 31) << 11
            min16 |= solve(at2[1] * xx - at1[1] * xy, fg, 63) << 5
            min16 |= solve(at2[2] * xx - at1[2] * xy, frb, 31)

    return (old_min != min16 or old_max != max16), max16, min16


def compress_color_block(block: BlockLike, mode: int = DxtMode.NORMAL) -> bytes:
    """Compress the RGB part of a 64-byte RGBA block into an 8-byte DXT1 block."""
    data = _as_block(block)
    tables = _tables()
    dither = bool(mode & DxtMode.DITHER)
    refine_count = 2 if mode & DxtMode.HIGHQUAL else 1

    first = data[0:4]
    if all(data[i * 4 : i * 4 + 4] == first for i in range(1, 16)):
        mask = 0xAAAAAAAA
        max16, min16 = _single_color_endpoints(data[0], data[1], data[2], tables)
    else:
        source = _dither_block(data, tables) if dither else data
        max16, min16 = _optimize_colors_block(source)
        if max16 != min16:
            mask = _match_colors_block(data, _eval_colors(max16, min16, tables), dither)
        else:
            mask = 0

        for _ in range(refine_count):
            last_mask = mask
            changed, max16, min16 = _refine_block(source, max16, min16, mask, tables)
            if changed:
                if max16 != min16:
                    mask = _match_colors_block(data, _eval_colors(max16, min16, tables), dither)
                else:
                    mask = 0
                    break
            if mask == last_mask:
                break

    if max16 < min16:
        max16, min16 = min16, max16
        mask ^= 0x55555555

    return struct.pack("<HHI", max16 & 0xFFFF, min16 & 0xFFFF, mask & _MASK32)


def compress_alpha_block(block: BlockLike) -> bytes:
    """Compress the alpha channel of a 64-byte RGBA block into an 8-byte DXT5 alpha block."""
    data = _as_block(block)
    alphas = data[3::4]
    mn = min(alphas)
    mx = max(alphas)

    out = bytearray((mx, mn))
    if mn == mx:
        out.extend(bytes(6))
        return bytes(out)

    dist = mx - mn
    dist4 = dist * 4
    dist2 = dist * 2
    bias = (dist - 1) if dist < 8 else (dist // 2 + 2)
    bias -= mn * 7
    bits = 0
    mask = 0

    for alpha in alphas:
        a = alpha * 7 + bias
        t = -1 if a >= dist4 else 0
        ind = t & 4
        a -= dist4 & t
        t = -1 if a >= dist2 else 0
        ind += t & 2
        a -= dist2 & t
        ind += 1 if a >= dist else 0

        # Linear scale to DXT index order (0 and 1 are the extremes).
        ind = -ind & 7
        ind ^= 1 if 2 > ind else 0

        mask |= ind << bits
        bits += 3
        if bits >= 8:
            out.append(mask & 0xFF)
            mask >>= 8
            bits -= 8

    return bytes(out)


def compress_dxt_block(block: BlockLike, alpha: bool = False, mode: int = DxtMode.NORMAL) -> bytes:
    """Compress a 64-byte RGBA block: 16 bytes of DXT5 if ``alpha``, else 8 bytes of DXT1."""
    data = _as_block(block)
    color = compress_color_block(data, mode)
    if alpha:
        return compress_alpha_block(data) + color
    return color
"""Perlin noise in one to three dimensions, with octave variants.

Permutation tables come from a Mersenne Twister, so seeded noise does not
depend on the platform.
"""

from __future__ import annotations

import math
from typing import Callable, Iterable, Optional, Union

__all__ = ["MT19937", "PerlinNoise"]

_DEFAULT_Y = 0.12345
_DEFAULT_Z = 0.34567

_DEFAULT_PERMUTATION = (
    151, 160, 137, 91, 90, 15,
    131, 13, 201, 95, 96, 53, 194, 233, 7, 225, 140, 36, 103, 30, 69, 142, 8, 99, 37, 240, 21, 10, 23,
    190, 6, 148, 247, 120, 234, 75, 0, 26, 197, 62, 94, 252, 219, 203, 117, 35, 11, 32, 57, 177, 33,
    88, 237, 149, 56, 87, 174, 20, 125, 136, 171, 168, 68, 175, 74, 165, 71, 134, 139, 48, 27, 166,
    77, 146, 158, 231, 83, 111, 229, 122, 60, 211, 133, 230, 220, 105, 92, 41, 55, 46, 245, 40, 244,
    102, 143, 54, 65, 25, 63, 161, 1, 216, 80, 73, 209, 76, 132, 187, 208, 89, 18, 169, 200, 196,
    135, 130, 116, 188, 159, 86, 164, 100, 109, 198, 173, 186, 3, 64, 52, 217, 226, 250, 124, 123,
    5, 202, 38, 147, 118, 126, 255, 82, 85, 212, 207, 206, 59, 227, 47, 16, 58, 17, 182, 189, 28, 42,
    223, 183, 170, 213, 119, 248, 152, 2, 44, 154, 163, 70, 221, 153, 101, 155, 167, 43, 172, 9,
    129, 22, 39, 253, 19, 98, 108, 110, 79, 113, 224, 232, 178, 185, 112, 104, 218, 246, 97, 228,
    251, 34, 242, 193, 238, 210, 144, 12, 191, 179, 162, 241, 81, 51, 145, 235, 249, 14, 239, 107,
    49, 192, 214, 31, 181, 199, 106, 157, 184, 84, 204, 176, 115, 121, 50, 45, 127, 4, 150, 254,
    138, 236, 205, 93, 222, 114, 67, 29, 24, 72, 243, 141, 128, 195, 78, 66, 215, 61, 156, 180,
)

_MASK32 = 0xFFFFFFFF


class MT19937:
    """The 32-bit Mersenne Twister, seeded from a single integer."""

    _N = 624
    _M = 397

    def __init__(self, seed: int = 5489) -> None:
        state = [seed & _MASK32]
        for i in range(1, self._N):
            prev = state[-1]
            state.append((1812433253 * (prev ^ (prev >> 30)) + i) & _MASK32)
        self._state = state
        self._index = self._N

    def _twist(self) -> None:
        s = self._state
        n, m = self._N, self._M
        for i in range(n):
            y = (s[i] & 0x80000000) | (s[(i + 1) % n] & 0x7FFFFFFF)
            value = s[(i + m) % n] ^ (y >> 1)
            if y & 1:
                value ^= 0x9908B0DF
            s[i] = value
        self._index = 0

    def __call__(self) -> int:
        """Return the next 32-bit output."""
        if self._index >= self._N:
            self._twist()
        y = self._state[self._index]
        self._index += 1
        y ^= y >> 11
        y ^= (y << 7) & 0x9D2C5680
        y ^= (y << 15) & 0xEFC60000
        y ^= y >> 18
        return y & _MASK32


SeedOrGenerator = Union[int, Callable[[], int]]


def _fade(t: float) -> float:
    return t * t * t * (t * (t * 6 - 15) + 10)


def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def _grad(hash_: int, x: float, y: float, z: float) -> float:
    h = hash_ & 15
    u = x if h < 8 else y
    if h < 4:
        v = y
    elif h in (12, 14):
        v = x
    else:
        v = z
    return (u if (h & 1) == 0 else -u) + (v if (h & 2) == 0 else -v)


def _remap_01(x: float) -> float:
    return x * 0.5 + 0.5


def _clamp_11(x: float) -> float:
    return max(-1.0, min(1.0, x))


def _remap_clamp_01(x: float) -> float:
    if x <= -1.0:
        return 0.0
    if x >= 1.0:
        return 1.0
    return x * 0.5 + 0.5


def _max_amplitude(octaves: int, persistence: float) -> float:
    result = 0.0
    amplitude = 1.0
    for _ in range(octaves):
        result += amplitude
        amplitude *= persistence
    return result


def _normalize(value: float, octaves: int, persistence: float) -> float:
    amplitude = _max_amplitude(octaves, persistence)
    if amplitude == 0.0:
        return math.nan
    return value / amplitude


class PerlinNoise:
    """Improved Perlin noise driven by a 256-entry permutation table."""

    def __init__(self, seed: Optional[SeedOrGenerator] = None) -> None:
        self._permutation = list(_DEFAULT_PERMUTATION)
        if seed is not None:
            self.reseed(seed)

    def reseed(self, seed: SeedOrGenerator) -> None:
        """Rebuild the table by shuffling 0..255 with a generator or an MT19937 seed."""
        generator = seed if callable(seed) else MT19937(seed)
        perm = list(range(256))
        for n in range(1, len(perm)):
            j = generator() % (n + 1)
            perm[n], perm[j] = perm[j], perm[n]
        self._permutation = perm

    def serialize(self) -> bytes:
        """The permutation table as 256 bytes."""
        return bytes(self._permutation)

    def deserialize(self, state: Iterable[int]) -> None:
        """Load a permutation table of 256 values in 0..255."""
        values = list(state)
        if len(values) != 256:
            raise ValueError(f"expected 256 entries, got {len(values)}")
        if any(not 0 <= v <= 255 for v in values):
            raise ValueError("permutation entries must lie in 0..255")
        self._permutation = [int(v) for v in values]

    # Noise in [-1, 1]

    def noise1d(self, x: float) -> float:
        return self.noise3d(x, _DEFAULT_Y, _DEFAULT_Z)

    def noise2d(self, x: float, y: float) -> float:
        return self.noise3d(x, y, _DEFAULT_Z)

    def noise3d(self, x: float, y: float, z: float) -> float:
        p = self._permutation
        fx0, fy0, fz0 = math.floor(x), math.floor(y), math.floor(z)
        ix, iy, iz = int(fx0) & 255, int(fy0) & 255, int(fz0) & 255
        fx, fy, fz = x - fx0, y - fy0, z - fz0
        u, v, w = _fade(fx), _fade(fy), _fade(fz)

        a = (p[ix] + iy) & 255
        b = (p[(ix + 1) & 255] + iy) & 255
        aa = (p[a] + iz) & 255
        ab = (p[(a + 1) & 255] + iz) & 255
        ba = (p[b] + iz) & 255
        bb = (p[(b + 1) & 255] + iz) & 255

        p0 = _grad(p[aa], fx, fy, fz)
        p1 = _grad(p[ba], fx - 1, fy, fz)
        p2 = _grad(p[ab], fx, fy - 1, fz)
        p3 = _grad(p[bb], fx - 1, fy - 1, fz)
        p4 = _grad(p[(aa + 1) & 255], fx, fy, fz - 1)
        p5 = _grad(p[(ba + 1) & 255], fx - 1, fy, fz - 1)
        p6 = _grad(p[(ab + 1) & 255], fx, fy - 1, fz - 1)
        p7 = _grad(p[(bb + 1) & 255], fx - 1, fy - 1, fz - 1)

        q0 = _lerp(p0, p1, u)
        q1 = _lerp(p2, p3, u)
        q2 = _lerp(p4, p5, u)
        q3 = _lerp(p6, p7, u)
        r0 = _lerp(q0, q1, v)
        r1 = _lerp(q2, q3, v)
        return _lerp(r0, r1, w)

    # Noise remapped to [0, 1]

    def noise1d_01(self, x: float) -> float:
        return _remap_01(self.noise1d(x))

    def noise2d_01(self, x: float, y: float) -> float:
        return _remap_01(self.noise2d(x, y))

    def noise3d_01(self, x: float, y: float, z: float) -> float:
        return _remap_01(self.noise3d(x, y, z))

    # Octave noise (may leave [-1, 1])

    def octave1d(self, x: float, octaves: int, persistence: float = 0.5) -> float:
        result, amplitude = 0.0, 1.0
        for _ in range(octaves):
            result += self.noise1d(x) * amplitude
            x *= 2
            amplitude *= persistence
        return result

    def octave2d(self, x: float, y: float, octaves: int, persistence: float = 0.5) -> float:
        result, amplitude = 0.0, 1.0
        for _ in range(octaves):
            result += self.noise2d(x, y) * amplitude
            x *= 2
            y *= 2
            amplitude *= persistence
        return result

    def octave3d(self, x: float, y: float, z: float, octaves: int, persistence: float = 0.5) -> float:
        result, amplitude = 0.0, 1.0
        for _ in range(octaves):
            result += self.noise3d(x, y, z) * amplitude
            x *= 2
            y *= 2
            z *= 2
            amplitude *= persistence
        return result

    # Octave noise clamped to [-1, 1]

    def octave1d_11(self, x: float, octaves: int, persistence: float = 0.5) -> float:
        return _clamp_11(self.octave1d(x, octaves, persistence))

    def octave2d_11(self, x: float, y: float, octaves: int, persistence: float = 0.5) -> float:
        return _clamp_11(self.octave2d(x, y, octaves, persistence))

    def octave3d_11(self, x: float, y: float, z: float, octaves: int, persistence: float = 0.5) -> float:
        return _clamp_11(self.octave3d(x, y, z, octaves, persistence))

    # Octave noise clamped and remapped to [0, 1]

    def octave1d_01(self, x: float, octaves: int, persistence: float = 0.5) -> float:
        return _remap_clamp_01(self.octave1d(x, octaves, persistence))

    def octave2d_01(self, x: float, y: float, octaves: int, persistence: float = 0.5) -> float:
        return _remap_clamp_01(self.octave2d(x, y, octaves, persistence))

    def octave3d_01(self, x: float, y: float, z: float, octaves: int, persistence: float = 0.5) -> float:
        return _remap_clamp_01(self.octave3d(x, y, z, octaves, persistence))

    # Octave noise normalised to [-1, 1]

    def normalized_octave1d(self, x: float, octaves: int, persistence: float = 0.5) -> float:
        return _normalize(self.octave1d(x, octaves, persistence), octaves, persistence)

    def normalized_octave2d(self, x: float, y: float, octaves: int, persistence: float = 0.5) -> float:
        return _normalize(self.octave2d(x, y, octaves, persistence), octaves, persistence)

    def normalized_octave3d(
        self, x: float, y: float, z: float, octaves: int, persistence: float = 0.5
    ) -> float:
        return _normalize(self.octave3d(x, y, z, octaves, persistence), octaves, persistence)

    # Octave noise normalised and remapped to [0, 1]

    def normalized_octave1d_01(self, x: float, octaves: int, persistence: float = 0.5) -> float:
        return _remap_01(self.normalized_octave1d(x, octaves, persistence))

    def normalized_octave2d_01(self, x: float, y: float, octaves: int, persistence: float = 0.5) -> float:
        return _remap_01(self.normalized_octave2d(x, y, octaves, persistence))

    def normalized_octave3d_01(
        self, x: float, y: float, z: float, octaves: int, persistence: float = 0.5
    ) -> float:
        return _remap_01(self.normalized_octave3d(x, y, z, octaves, persistence))
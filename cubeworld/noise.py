"""Improved Perlin gradient noise in one to four dimensions.

Each dimension has a plain variant (``noiseN``) and a periodic variant
(``pnoiseN``) that repeats with the given integer period along every axis.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence

_BASE_PERMUTATION = (
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

# Repeated twice so that lookups of the form perm[i + perm[j]] never wrap.
PERMUTATION = _BASE_PERMUTATION * 2

Grad = Callable[..., float]


def _fade(t: float) -> float:
    return t * t * t * (t * (t * 6 - 15) + 10)


def _lerp(t: float, a: float, b: float) -> float:
    return a + t * (b - a)


def _fastfloor(x: float) -> int:
    # Exact integers deliberately map to x - 1, giving a fraction of 1.0.
    truncated = int(x)
    return truncated if truncated < x else truncated - 1


def _trunc_mod(a: int, b: int) -> int:
    """Remainder with the sign of the dividend (truncating division)."""
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def _grad1(hash_: int, x: float) -> float:
    h = hash_ & 15
    grad = 1.0 + (h & 7)
    if h & 8:
        grad = -grad
    return grad * x


def _grad2(hash_: int, x: float, y: float) -> float:
    h = hash_ & 7
    u = x if h < 4 else y
    v = y if h < 4 else x
    return (-u if h & 1 else u) + (-2.0 * v if h & 2 else 2.0 * v)


def _grad3(hash_: int, x: float, y: float, z: float) -> float:
    h = hash_ & 15
    u = x if h < 8 else y
    if h < 4:
        v = y
    elif h in (12, 14):
        v = x
    else:
        v = z
    return (-u if h & 1 else u) + (-v if h & 2 else v)


def _grad4(hash_: int, x: float, y: float, z: float, t: float) -> float:
    h = hash_ & 31
    u = x if h < 24 else y
    v = y if h < 16 else z
    w = z if h < 8 else t
    return (-u if h & 1 else u) + (-v if h & 2 else v) + (-w if h & 4 else w)


def _hash(indices: Sequence[int]) -> int:
    value = PERMUTATION[indices[-1]]
    for index in reversed(indices[:-1]):
        value = PERMUTATION[index + value]
    return value


def _noise(
    coords: Sequence[float],
    periods: Optional[Sequence[int]],
    grad: Grad,
    scale: float,
) -> float:
    lattice = []
    for axis, coord in enumerate(coords):
        i0 = _fastfloor(coord)
        f0 = coord - i0
        if periods is None:
            i1 = (i0 + 1) & 0xFF
            i0 &= 0xFF
        else:
            period = periods[axis]
            i1 = _trunc_mod(i0 + 1, period) & 0xFF
            i0 = _trunc_mod(i0, period) & 0xFF
        lattice.append(((i0, f0), (i1, f0 - 1.0)))

    fades = [_fade(low[1]) for low, _ in lattice]
    dims = len(coords)

    def blend(depth: int, indices: tuple, fractions: tuple) -> float:
        if depth == dims:
            return grad(_hash(indices), *fractions)
        (i0, f0), (i1, f1) = lattice[depth]
        a = blend(depth + 1, indices + (i0,), fractions + (f0,))
        b = blend(depth + 1, indices + (i1,), fractions + (f1,))
        return _lerp(fades[depth], a, b)

    return scale * blend(0, (), ())


def noise1(x: float) -> float:
    """1D Perlin noise."""
    return _noise((x,), None, _grad1, 0.188)


def pnoise1(x: float, px: int) -> float:
    """1D Perlin noise with period ``px``."""
    return _noise((x,), (px,), _grad1, 0.188)


def noise2(x: float, y: float) -> float:
    """2D Perlin noise."""
    return _noise((x, y), None, _grad2, 0.507)


def pnoise2(x: float, y: float, px: int, py: int) -> float:
    """2D Perlin noise with periods ``px`` and ``py``."""
    return _noise((x, y), (px, py), _grad2, 0.507)


def noise3(x: float, y: float, z: float) -> float:
    """3D Perlin noise."""
    return _noise((x, y, z), None, _grad3, 0.936)


def pnoise3(x: float, y: float, z: float, px: int, py: int, pz: int) -> float:
    """3D Perlin noise with periods ``px``, ``py`` and ``pz``."""
    return _noise((x, y, z), (px, py, pz), _grad3, 0.936)


def noise4(x: float, y: float, z: float, w: float) -> float:
    """4D Perlin noise."""
    return _noise((x, y, z, w), None, _grad4, 0.87)


def pnoise4(
    x: float, y: float, z: float, w: float, px: int, py: int, pz: int, pw: int
) -> float:
    """4D Perlin noise with periods ``px``, ``py``, ``pz`` and ``pw``."""
    return _noise((x, y, z, w), (px, py, pz, pw), _grad4, 0.87)
"""Seeded two-dimensional gradient noise."""

from __future__ import annotations

import math
import random

_GRADIENTS = ((1.0, 1.0), (-1.0, 1.0), (1.0, -1.0), (-1.0, -1.0))


def _fade(t: float) -> float:
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def _lerp(t: float, a: float, b: float) -> float:
    return a + t * (b - a)


class Perlin:
    """Perlin noise over the plane, fixed by its seed.

    Values lie in [-1.0, 1.0], vary smoothly, and are zero at integer points.
    """

    def __init__(self, seed: int = 0) -> None:
        self.seed = seed
        table = list(range(256))
        random.Random(seed).shuffle(table)
        self._perm = tuple(table * 2)

    def _corner(self, hashed: int, dx: float, dy: float) -> float:
        gx, gy = _GRADIENTS[hashed & 3]
        return gx * dx + gy * dy

    def get(self, x: float, y: float) -> float:
        """Noise value at the point (x, y)."""
        x0 = math.floor(x)
        y0 = math.floor(y)
        dx = x - x0
        dy = y - y0
        xi = x0 & 255
        yi = y0 & 255
        perm = self._perm

        a = perm[xi] + yi
        b = perm[xi + 1] + yi
        n00 = self._corner(perm[a], dx, dy)
        n01 = self._corner(perm[a + 1], dx, dy - 1.0)
        n10 = self._corner(perm[b], dx - 1.0, dy)
        n11 = self._corner(perm[b + 1], dx - 1.0, dy - 1.0)

        u = _fade(dx)
        v = _fade(dy)
        value = _lerp(v, _lerp(u, n00, n10), _lerp(u, n01, n11))
        return max(-1.0, min(1.0, value))
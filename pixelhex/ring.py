"""Ordered enumeration of the hexes on a ring around a center."""

from __future__ import annotations

from collections.abc import Iterator

from .coords import Axial

_LEG_COUNT = 6


class HexRing(Iterator[Axial]):
    """Offsets of the hexes at exact distance ``radius`` from the origin.

    The ring is walked as six straight legs of ``radius`` hexes each,
    starting at ``(0, radius)``. Instances are single-pass; build a new one
    to iterate again.
    """

    __slots__ = ("radius", "_leg", "_step")

    def __init__(self, radius: int) -> None:
        if radius < 0:
            raise ValueError(f"ring radius must be non-negative, got {radius}")
        self.radius = int(radius)
        self._leg = 0
        self._step = 0

    def _offset(self) -> tuple[int, int]:
        n, k = self.radius, self._step
        leg = self._leg
        if leg == 0:
            return (-k, n)
        if leg == 1:
            return (-n, n - k)
        if leg == 2:
            return (-n + k, -k)
        if leg == 3:
            return (k, -n)
        if leg == 4:
            return (n, -n + k)
        return (n - k, k)

    def __next__(self) -> Axial:
        if self._leg >= _LEG_COUNT:
            raise StopIteration
        q, r = self._offset()
        if self.radius == 0:
            self._leg = _LEG_COUNT
        elif self._step < self.radius - 1:
            self._step += 1
        else:
            self._step = 0
            self._leg += 1
        return Axial(q, r)

    def __length_hint__(self) -> int:
        if self._leg >= _LEG_COUNT:
            return 0
        if self.radius == 0:
            return 1
        return (_LEG_COUNT - self._leg) * self.radius - self._step


class RingAroundHex(Iterator[Axial]):
    """A :class:`HexRing` translated to ``center``."""

    __slots__ = ("center", "_ring")

    def __init__(self, center: Axial, radius: int) -> None:
        self.center = center
        self._ring = HexRing(radius)

    @property
    def radius(self) -> int:
        return self._ring.radius

    def __next__(self) -> Axial:
        return next(self._ring) + self.center

    def __length_hint__(self) -> int:
        return self._ring.__length_hint__()

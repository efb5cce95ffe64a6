#
# PROJECT: raytracer-core
# MODULE: raytracer_core/point.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from typing import Iterable, Optional

from .tuple import Tuple, Slot, one_of
from .vector import Vector


class Point(Tuple):
    """
    Position in homogeneous coordinates; the last slot is 1.

    Point - Point gives the Vector between them, Point +/- Vector
    translates the point. Two points cannot be added.
    """
    __slots__ = ()

    x = Slot(0, 4)
    y = Slot(1, 4)
    z = Slot(2, 4)
    w = Slot(3, 4)

    def __init__(self, x, y, z):
        super().__init__(x, y, z, one_of(x))

    @classmethod
    def origin(cls, dimension: int = 4, scalar=float) -> 'Point':
        if dimension < 1:
            raise ValueError("A point needs at least the homogeneous slot")
        return cls._wrap([scalar(0)] * (dimension - 1) + [scalar(1)])

    @classmethod
    def from_xyz(cls, values) -> 'Point':
        x, y, z = values
        return cls(x, y, z)

    def to_xyz(self) -> list:
        return [self.x, self.y, self.z]

    def to_vec(self) -> Vector:
        """Displacement from the origin to this point."""
        return self - Point.origin(len(self), type(self._data[-1]))

    @classmethod
    def centroid(cls, points: Iterable['Point']) -> Optional['Point']:
        """Mean position of `points`, or None for an empty input."""
        it = iter(points)
        first = next(it, None)
        if first is None:
            return None
        total = first.to_vec()
        count = 1
        for p in it:
            total += p.to_vec()
            count += 1
        return (total / count).to_point()

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return Point._wrap(self._zip_vector(other, lambda a, b: a + b))

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, Point):
            return Vector._wrap(self._zip_vector(other, lambda a, b: a - b))
        if isinstance(other, Vector):
            return Point._wrap(self._zip_vector(other, lambda a, b: a - b))
        return NotImplemented

    def __iadd__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        self._data[:] = self._zip_vector(other, lambda a, b: a + b)
        return self

    def __isub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        self._data[:] = self._zip_vector(other, lambda a, b: a - b)
        return self

    def _zip_vector(self, other, op):
        if len(other) != len(self):
            raise ValueError(f"Width mismatch: {len(self)} vs {len(other)}")
        return self._zip_with(other, op)

#
# PROJECT: raytracer-core
# MODULE: raytracer_core/vector.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import math

from .tuple import Tuple, Slot, zero_of, one_of


class Vector(Tuple):
    """
    Displacement in homogeneous coordinates.

    The last slot is the homogeneous tag and is 0 for every vector built
    through the constructors below or through vector/scalar arithmetic.
    `Vector(x, y, z)` is the 3-D case (4 slots); other widths go through
    `from_array`. Named access (`x, y, z, w`) and `cross` exist only for
    the 4-slot case.
    """
    __slots__ = ()

    x = Slot(0, 4)
    y = Slot(1, 4)
    z = Slot(2, 4)
    w = Slot(3, 4)

    def __init__(self, x, y, z):
        super().__init__(x, y, z, zero_of(x))

    @classmethod
    def unit_x(cls, scalar=float) -> 'Vector':
        return cls(scalar(1), scalar(0), scalar(0))

    @classmethod
    def unit_y(cls, scalar=float) -> 'Vector':
        return cls(scalar(0), scalar(1), scalar(0))

    @classmethod
    def unit_z(cls, scalar=float) -> 'Vector':
        return cls(scalar(0), scalar(0), scalar(1))

    def length_squared(self):
        # Sums every slot; the tag is 0 so only the spatial part counts.
        return sum(c * c for c in self._data)

    def magnitude(self) -> float:
        return math.sqrt(self.length_squared())

    def normalize(self) -> 'Vector':
        """Scale to unit length in place. A zero vector raises ZeroDivisionError."""
        self /= self.magnitude()
        return self

    def normalized(self) -> 'Vector':
        return self / self.magnitude()

    def dot(self, other: 'Vector'):
        if not isinstance(other, Vector):
            raise TypeError(f"dot() needs a Vector, got {type(other).__name__}")
        if len(other) != len(self):
            raise ValueError(f"Width mismatch: {len(self)} vs {len(other)}")
        return sum(a * b for a, b in zip(self._data, other._data))

    def cross(self, other: 'Vector') -> 'Vector':
        if len(self) != 4 or not isinstance(other, Vector) or len(other) != 4:
            raise TypeError("cross() is only defined between 4-slot vectors")
        a, b = self._data, other._data
        return Vector(
            a[1] * b[2] - a[2] * b[1],
            a[2] * b[0] - a[0] * b[2],
            a[0] * b[1] - a[1] * b[0],
        )

    def to_point(self):
        """Reinterpret the slots as a point, forcing the tag to 1."""
        from .point import Point
        data = list(self._data)
        data[-1] = one_of(data[-1])
        return Point.from_array(data)

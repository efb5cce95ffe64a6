#
# PROJECT: raytracer-core
# MODULE: raytracer_core/color.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from .tuple import Tuple, Slot

# Largest 8-bit channel value
MAX_CHANNEL = 255


class Color(Tuple):
    """
    Linear RGB value with `r, g, b` channels.

    Floating colors are not range-checked; sums and products may exceed
    1.0 until they are quantized with `to_u8()`. The 8-bit form uses the
    same class with integer channels, so a color meant to be floating must
    be written with float literals: `Color(1.0, 0.0, 0.0)`, not
    `Color(1, 0, 0)`. The latter counts as 8-bit and the Color product
    rejects it with TypeError.
    """
    __slots__ = ()
    DIMENSION = 3

    r = Slot(0, 3)
    g = Slot(1, 3)
    b = Slot(2, 3)

    def __init__(self, r=0.0, g=0.0, b=0.0):
        super().__init__(r, g, b)

    def is_floating(self) -> bool:
        return all(isinstance(c, float) for c in self._data)

    def hadamard(self, other: 'Color') -> 'Color':
        """Component-wise product; only defined for floating colors."""
        if not (self.is_floating() and other.is_floating()):
            raise TypeError("Color product needs floating channels on both sides")
        return self._wrap(self._zip_with(other, lambda a, b: a * b))

    def __mul__(self, other):
        if isinstance(other, Color):
            return self.hadamard(other)
        return super().__mul__(other)

    def to_u8(self, max_value: int = MAX_CHANNEL) -> 'Color':
        """
        Quantize to integer channels in 0..max_value (8-bit by default).

        Each channel is capped at 1.0, scaled by `max_value` and truncated
        toward zero. There is no lower cap: a negative channel stays negative.
        """
        return self._wrap([int(min(c, 1.0) * max_value) for c in self._data])

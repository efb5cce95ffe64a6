#
# PROJECT: raytracer-core
# MODULE: raytracer_core/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import logging

from .color import Color
from .errors import CanvasIndexError

logger = logging.getLogger(__name__)


class Canvas:
    """
    Fixed-size grid of Colors stored row-major, initially black.

    Pixels are only changed through write_pixel(); readers get copies,
    so no caller can alias the stored colors.
    """
    __slots__ = ('_w', '_h', '_pixels')

    def __init__(self, width: int, height: int):
        if width < 0 or height < 0:
            raise ValueError(f"Canvas size must not be negative, got {width} x {height}")
        self._w, self._h = width, height
        self._pixels = [Color() for _ in range(width * height)]
        logger.debug("Created %d x %d canvas", width, height)

    @property
    def width(self) -> int:
        return self._w

    @property
    def height(self) -> int:
        return self._h

    def _offset(self, x: int, y: int) -> int:
        if 0 <= x < self._w and 0 <= y < self._h:
            return y * self._w + x
        raise CanvasIndexError(x, y, self._w, self._h)

    def write_pixel(self, x: int, y: int, color: Color):
        """Store `color` at column x, row y; raises CanvasIndexError out of bounds."""
        try:
            offset = self._offset(x, y)
        except CanvasIndexError as e:
            logger.debug("Rejected pixel write: %s", e)
            raise
        self._pixels[offset] = color.copy()

    def pixel_at(self, x: int, y: int) -> Color:
        return self._pixels[self._offset(x, y)].copy()

    def pixels(self) -> tuple:
        """Every pixel in row-major order."""
        return tuple(p.copy() for p in self._pixels)

    def rows(self):
        """Yield each row as a tuple of Colors, top to bottom."""
        for y in range(self._h):
            start = y * self._w
            yield tuple(p.copy() for p in self._pixels[start:start + self._w])

    def to_ppm(self, config=None):
        """Quantize to 8-bit and wrap in a PpmCanvas ready for encoding."""
        from .ppm import PpmCanvas
        return PpmCanvas.from_canvas(self, config)

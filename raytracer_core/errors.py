#
# PROJECT: raytracer-core
# MODULE: raytracer_core/errors.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#


class RaytracerError(Exception):
    """Base error of the package."""


class CanvasIndexError(RaytracerError, IndexError):
    """A pixel coordinate fell outside the canvas."""

    def __init__(self, x: int, y: int, width: int, height: int):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        super().__init__(
            f"Invalid index at {x}, {y}; The canvas size is {width} x {height}.")

    def __eq__(self, other):
        if not isinstance(other, CanvasIndexError):
            return NotImplemented
        return ((self.x, self.y, self.width, self.height) ==
                (other.x, other.y, other.width, other.height))

    def __hash__(self):
        return hash((self.x, self.y, self.width, self.height))


class PpmFormatError(RaytracerError, ValueError):
    """Malformed P3 text image."""

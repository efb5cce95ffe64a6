#
# PROJECT: raytracer-core
# MODULE: raytracer_core/ppm.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import logging
from dataclasses import replace
from typing import Iterable, Optional

from .color import Color
from .config import PpmConfig
from .errors import PpmFormatError

logger = logging.getLogger(__name__)

MAGIC = "P3"


class PpmColor:
    """An 8-bit Color as it appears in the text image: "R G B"."""
    __slots__ = ('color',)

    def __init__(self, color: Color):
        self.color = color

    def __str__(self):
        return f"{self.color.r} {self.color.g} {self.color.b}"

    def __repr__(self):
        return f"PpmColor({self})"

    def __eq__(self, other):
        if not isinstance(other, PpmColor):
            return NotImplemented
        return self.color == other.color

    __hash__ = None


class PpmCanvas:
    """
    Canvas of 8-bit colors with its P3 text encoding.

    Build it from a floating Canvas with from_canvas(), which quantizes to
    0..config.max_value, or directly from colors already quantized to that
    range, in row-major order.
    """
    __slots__ = ('width', 'height', '_pixels', 'config')

    def __init__(self, width: int, height: int, pixels: Iterable,
                 config: Optional[PpmConfig] = None):
        self.width = width
        self.height = height
        self.config = config or PpmConfig()
        self._pixels = [p if isinstance(p, PpmColor) else PpmColor(p) for p in pixels]
        if len(self._pixels) != width * height:
            raise ValueError(
                f"Expected {width * height} pixels for {width} x {height}, "
                f"got {len(self._pixels)}")

    @classmethod
    def from_canvas(cls, canvas, config: Optional[PpmConfig] = None) -> 'PpmCanvas':
        config = config or PpmConfig()
        return cls(canvas.width, canvas.height,
                   [p.to_u8(config.max_value) for p in canvas.pixels()], config)

    def pixels(self) -> list:
        """Rows of PpmColor, top to bottom."""
        w = self.width
        return [tuple(self._pixels[y * w:(y + 1) * w]) for y in range(self.height)]

    def header(self) -> str:
        return f"{MAGIC}\n{self.width} {self.height}\n{self.config.max_value}\n"

    def encode(self) -> str:
        """
        Render the text image.

        Pixels are packed greedily across row boundaries. With
        `expect = line_length + len(token)`:
          - threshold <= expect < limit: emit token and a newline
          - expect >= limit: newline first, then token and a space
          - otherwise: token and a space
        so no line gets longer than max_line_length.
        """
        limit = self.config.max_line_length
        threshold = self.config.wrap_threshold
        parts = []
        line_length = 0
        for pixel in self._pixels:
            token = str(pixel)
            expect_length = line_length + len(token)
            if threshold <= expect_length < limit:
                parts.append(f"{token}\n")
                line_length = 0
            elif expect_length >= limit:
                parts.append(f"\n{token} ")
                line_length = len(token) + 1
            else:
                parts.append(f"{token} ")
                line_length += len(token) + 1
        logger.debug("Encoded %d x %d canvas as %s", self.width, self.height, MAGIC)
        return f"{self.header()}{''.join(parts)}\n"

    def __str__(self):
        return self.encode()


def _parse_int(token: str, what: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise PpmFormatError(f"Invalid {what}: {token!r}") from None


def decode_ppm(text: str, config: Optional[PpmConfig] = None) -> PpmCanvas:
    """Parse a P3 text image back into a PpmCanvas."""
    tokens = text.split()
    if len(tokens) < 4 or tokens[0] != MAGIC:
        raise PpmFormatError(f"Missing {MAGIC} header")
    width = _parse_int(tokens[1], "width")
    height = _parse_int(tokens[2], "height")
    max_value = _parse_int(tokens[3], "max value")
    if width < 0 or height < 0 or max_value <= 0:
        raise PpmFormatError(f"Invalid header: {width} {height} {max_value}")

    channels = tokens[4:]
    if len(channels) != width * height * 3:
        raise PpmFormatError(
            f"Expected {width * height * 3} channel values, got {len(channels)}")

    values = [_parse_int(t, "channel value") for t in channels]
    for v in values:
        if not 0 <= v <= max_value:
            raise PpmFormatError(f"Channel value {v} outside 0..{max_value}")

    pixels = [Color(*values[i:i + 3]) for i in range(0, len(values), 3)]
    logger.debug("Decoded %d x %d canvas", width, height)
    return PpmCanvas(width, height, pixels,
                     replace(config or PpmConfig(), max_value=max_value))

#
# PROJECT: raytracer-core
# MODULE: raytracer_core/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import os
from dataclasses import dataclass

# Default tolerance when comparing floating results
EPSILON = 0.0001


@dataclass(frozen=True)
class PpmConfig:
    """Layout settings for the P3 text encoder."""
    max_line_length: int = 70
    # A line is closed once it reaches this length: the widest pixel
    # token ("255 255 255") plus a separator must still fit afterwards.
    wrap_threshold: int = 63
    max_value: int = 255

    def __post_init__(self):
        if self.max_line_length <= 0 or self.max_value <= 0:
            raise ValueError("max_line_length and max_value must be positive")
        if not 0 < self.wrap_threshold < self.max_line_length:
            raise ValueError(
                f"wrap_threshold must lie in (0, {self.max_line_length}), "
                f"got {self.wrap_threshold}")

    @classmethod
    def from_environment(cls) -> 'PpmConfig':
        """
        Build a config, letting RAYTRACER_PPM_LINE_LENGTH and
        RAYTRACER_PPM_WRAP_THRESHOLD override the defaults.
        """
        defaults = cls()
        line_length = os.environ.get('RAYTRACER_PPM_LINE_LENGTH')
        threshold = os.environ.get('RAYTRACER_PPM_WRAP_THRESHOLD')
        return cls(
            max_line_length=int(line_length) if line_length else defaults.max_line_length,
            wrap_threshold=int(threshold) if threshold else defaults.wrap_threshold,
        )

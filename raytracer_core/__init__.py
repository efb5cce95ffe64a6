#
# PROJECT: raytracer-core
# MODULE: raytracer_core/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from .tuple import Tuple, View4, RgbView
from .vector import Vector
from .point import Point
from .color import Color
from .canvas import Canvas
from .ppm import PpmColor, PpmCanvas, decode_ppm
from .config import PpmConfig, EPSILON
from .errors import RaytracerError, CanvasIndexError, PpmFormatError
from .logging_config import setup_logging

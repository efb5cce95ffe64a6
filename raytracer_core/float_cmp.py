#
# PROJECT: raytracer-core
# MODULE: raytracer_core/float_cmp.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import math
import struct
import sys

# IEEE double machine epsilon, the default tolerance for every comparison.
DEFAULT_EPSILON = sys.float_info.epsilon
DEFAULT_MAX_RELATIVE = sys.float_info.epsilon
DEFAULT_MAX_ULPS = 4


def abs_diff_eq(a, b, epsilon: float = DEFAULT_EPSILON) -> bool:
    """True when |a - b| <= epsilon."""
    if a == b:
        return True
    return abs(a - b) <= epsilon


def relative_eq(a, b, epsilon: float = DEFAULT_EPSILON,
                max_relative: float = DEFAULT_MAX_RELATIVE) -> bool:
    """
    Relative comparison: values close to zero are compared absolutely with
    `epsilon`, everything else against `max_relative` scaled by the larger
    magnitude.
    """
    if a == b:
        return True
    if math.isinf(a) or math.isinf(b):
        return False
    diff = abs(a - b)
    if diff <= epsilon:
        return True
    largest = max(abs(a), abs(b))
    return diff <= largest * max_relative


def _ordered_bits(value: float) -> int:
    bits = struct.unpack('<q', struct.pack('<d', float(value)))[0]
    # Map sign-magnitude onto a monotonic integer line
    return bits if bits >= 0 else -(bits & 0x7FFFFFFFFFFFFFFF)


def ulps_distance(a, b) -> int:
    """Number of representable doubles between a and b."""
    return abs(_ordered_bits(a) - _ordered_bits(b))


def ulps_eq(a, b, epsilon: float = DEFAULT_EPSILON,
            max_ulps: int = DEFAULT_MAX_ULPS) -> bool:
    if abs_diff_eq(a, b, epsilon):
        return True
    if math.isnan(a) or math.isnan(b):
        return False
    if (a < 0) != (b < 0):
        return False
    return ulps_distance(a, b) <= max_ulps

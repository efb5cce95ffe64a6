"""
Shared fixtures for the raytracer_core test suite.
"""

import pytest

from raytracer_core import Canvas, Color


@pytest.fixture
def canvas_10x20():
    return Canvas(10, 20)


@pytest.fixture
def filled_10x2():
    """10 x 2 canvas filled with Color(1.0, 0.8, 0.6)."""
    canvas = Canvas(10, 2)
    for x in range(10):
        for y in range(2):
            canvas.write_pixel(x, y, Color(1.0, 0.8, 0.6))
    return canvas

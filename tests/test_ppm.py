"""
PPM Tests - P3 text encoding, line wrapping and decoding
========================================================
"""

import random

import pytest

from raytracer_core import (
    Canvas, Color, PpmCanvas, PpmColor, PpmConfig, PpmFormatError, decode_ppm,
)


TOKEN = "255 204 153"


def _lines(text):
    return text.split("\n")


# =============================================================================
# Conversion
# =============================================================================

def test_canvas_to_ppm_quantizes_every_pixel(filled_10x2):
    ppm = filled_10x2.to_ppm()
    rows = ppm.pixels()
    assert len(rows) == 2
    for row in rows:
        assert len(row) == 10
        for p in row:
            assert p == PpmColor(Color(255, 204, 153))


def test_ppm_color_text():
    assert str(PpmColor(Color(255, 0, 7))) == "255 0 7"


def test_pixel_count_must_match_size():
    with pytest.raises(ValueError):
        PpmCanvas(2, 2, [Color(0, 0, 0)] * 3)


# =============================================================================
# Encoding
# =============================================================================

def test_header():
    text = Canvas(5, 3).to_ppm().encode()
    assert text.startswith("P3\n5 3\n255\n")


def test_ten_by_two_wraps_every_five_pixels(filled_10x2):
    line = " ".join([TOKEN] * 5) + " "
    expected = "P3\n10 2\n255\n" + "\n".join([line] * 4) + "\n"
    text = str(filled_10x2.to_ppm())
    assert text == expected
    assert all(len(l) <= 70 for l in _lines(text))


def test_line_closed_between_threshold_and_limit():
    # "0 0 0" tokens: the eleventh lands at 65, inside [63, 70)
    text = Canvas(11, 1).to_ppm().encode()
    expected = "P3\n11 1\n255\n" + "0 0 0 " * 10 + "0 0 0\n" + "\n"
    assert text == expected


def test_wrap_ignores_row_boundaries():
    text = Canvas(4, 3).to_ppm().encode()
    body = _lines(text)[3:]
    # Rows of 4 pixels; the first line still takes 11 of them
    assert body[0] == "0 0 0 " * 10 + "0 0 0"
    assert body[1] == "0 0 0 "


def test_custom_line_length():
    config = PpmConfig(max_line_length=20, wrap_threshold=15)
    text = Canvas(3, 1).to_ppm(config).encode()
    assert text == "P3\n3 1\n255\n0 0 0 0 0 0 0 0 0\n\n"


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
def test_no_line_exceeds_seventy_characters(seed):
    rng = random.Random(seed)
    width, height = 17, 9
    pixels = [Color(rng.randint(0, 255), rng.randint(0, 255), rng.randint(0, 255))
              for _ in range(width * height)]
    text = PpmCanvas(width, height, pixels).encode()
    assert text.endswith("\n")
    assert max(len(l) for l in _lines(text)) <= 70


# =============================================================================
# Decoding
# =============================================================================

def test_round_trip_reproduces_quantized_pixels():
    rng = random.Random(42)
    canvas = Canvas(13, 7)
    for y in range(canvas.height):
        for x in range(canvas.width):
            canvas.write_pixel(x, y, Color(rng.random() * 1.5, rng.random(), rng.random()))

    ppm = canvas.to_ppm()
    decoded = decode_ppm(ppm.encode())
    assert (decoded.width, decoded.height) == (13, 7)
    assert decoded.pixels() == ppm.pixels()
    assert decoded.encode() == ppm.encode()


@pytest.mark.parametrize("text", [
    "",
    "P6\n1 1\n255\n0 0 0\n",
    "P3\n1 1\n255\n0 0\n",
    "P3\n1 1\n255\n0 0 0 0\n",
    "P3\n1 1\n255\n0 0 256\n",
    "P3\n1 1\n255\n0 0 -1\n",
    "P3\nx 1\n255\n0 0 0\n",
    "P3\n1 1\n255\n0 zero 0\n",
])
def test_malformed_input_is_rejected(text):
    with pytest.raises(PpmFormatError):
        decode_ppm(text)


def test_decode_keeps_max_value():
    decoded = decode_ppm("P3\n1 1\n15\n15 0 7\n")
    assert decoded.config.max_value == 15
    assert decoded.pixels()[0][0] == PpmColor(Color(15, 0, 7))
    assert decoded.header() == "P3\n1 1\n15\n"


def test_custom_max_value_scales_channels_and_round_trips():
    canvas = Canvas(2, 1)
    canvas.write_pixel(0, 0, Color(1.0, 1.0, 1.0))
    canvas.write_pixel(1, 0, Color(0.5, 0.0, 1.3))

    text = canvas.to_ppm(PpmConfig(max_value=100)).encode()
    assert text == "P3\n2 1\n100\n100 100 100 50 0 100 \n"

    decoded = decode_ppm(text)
    assert decoded.config.max_value == 100
    assert decoded.pixels() == [(PpmColor(Color(100, 100, 100)), PpmColor(Color(50, 0, 100)))]
    assert decoded.encode() == text

import itertools

import pytest

from theme_grab.color import (
    HSL,
    RGB,
    color_distance,
    contrast_ratio,
    format_hsl,
    hex_to_rgb,
    hsl_to_rgb,
    is_light,
    parse_color,
    relative_luminance,
    rgb_to_hex,
    rgb_to_hsl,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("#1a73e8", RGB(26, 115, 232)),
        ("#1A73E8", RGB(26, 115, 232)),
        ("  #abc ", RGB(170, 187, 204)),
        ("rgb(10, 20, 30)", RGB(10, 20, 30)),
        ("rgba(10,20,30,0.5)", RGB(10, 20, 30)),
        ("rgb(300, 0, 0)", RGB(255, 0, 0)),
        ("hsl(210, 50%, 40%)", RGB(51, 102, 153)),
        ("hsla(0, 0%, 100%, 0.2)", RGB(255, 255, 255)),
        ("Red", RGB(255, 0, 0)),
        ("grey", RGB(128, 128, 128)),
        ("orange", RGB(255, 165, 0)),
    ],
)
def test_parse_color_formats(text, expected):
    assert parse_color(text) == expected


@pytest.mark.parametrize("text", ["", "transparent", "#12", "#12345", "#gggggg", "currentColor", "var(--x)"])
def test_parse_color_rejects_unknown(text):
    assert parse_color(text) is None


def test_hex_helpers():
    assert hex_to_rgb("ffffff") == RGB(255, 255, 255)
    assert hex_to_rgb("#00000000") is None
    assert rgb_to_hex((26, 115, 232)) == "#1a73e8"
    assert rgb_to_hex((300, -4, 15.7)) == "#ff000f"


def test_rgb_to_hsl_rounds_to_one_decimal():
    assert rgb_to_hsl(RGB(26, 115, 232)) == HSL(214.1, 81.7, 50.6)
    assert rgb_to_hsl(RGB(9, 9, 11)) == HSL(240, 10, 3.9)


def test_rgb_to_hsl_achromatic():
    h, s, l = rgb_to_hsl(RGB(128, 128, 128))
    assert h == 0
    assert s == 0
    assert l == 50.2


def test_hsl_round_trip_within_one():
    steps = range(0, 256, 17)
    for rgb in itertools.product(steps, steps, steps):
        back = hsl_to_rgb(rgb_to_hsl(rgb))
        assert all(abs(a - b) <= 1 for a, b in zip(rgb, back)), (rgb, back)


def test_luminance_and_contrast():
    white = RGB(255, 255, 255)
    black = RGB(0, 0, 0)
    assert relative_luminance(white) == pytest.approx(1.0)
    assert relative_luminance(black) == 0
    assert contrast_ratio(white, black) == pytest.approx(21.0)
    assert contrast_ratio(black, white) == contrast_ratio(white, black)
    assert contrast_ratio(white, white) == pytest.approx(1.0)


def test_is_light():
    assert is_light(RGB(255, 255, 255))
    assert is_light(RGB(255, 255, 0))
    assert not is_light(RGB(26, 115, 232))
    assert not is_light(RGB(0, 0, 0))


def test_color_distance():
    assert color_distance(RGB(0, 0, 0), RGB(255, 255, 255)) == pytest.approx(441.67, abs=0.01)
    assert color_distance(RGB(1, 2, 3), RGB(1, 2, 3)) == 0


def test_format_hsl():
    assert format_hsl(HSL(0, 0, 100)) == "0 0% 100%"
    assert format_hsl(HSL(214.1, 24.51, 96)) == "214.1 24.5% 96%"
    assert format_hsl(HSL(225, 5.9 * 0.3, 13.3)) == "225 1.8% 13.3%"


def test_format_hsl_clamps():
    assert format_hsl(HSL(360, 120, -5)) == "0 100% 0%"

import math
import re
from collections import namedtuple
from types import MappingProxyType

RGB = namedtuple("RGB", ["r", "g", "b"])
HSL = namedtuple("HSL", ["h", "s", "l"])

HEX_RE = re.compile(r"^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$", re.IGNORECASE)
SHORT_HEX_RE = re.compile(r"^#?([a-f\d])([a-f\d])([a-f\d])$", re.IGNORECASE)
RGB_RE = re.compile(r"rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)")
HSL_RE = re.compile(
    r"hsla?\(\s*(\d+(?:\.\d+)?)\s*,\s*(\d+(?:\.\d+)?)%?\s*,\s*(\d+(?:\.\d+)?)%?"
)

# Common CSS keywords; "transparent" has nothing to sample
NAMED_COLORS = MappingProxyType(
    {
        "white": "#ffffff",
        "black": "#000000",
        "red": "#ff0000",
        "green": "#00ff00",
        "blue": "#0000ff",
        "yellow": "#ffff00",
        "cyan": "#00ffff",
        "magenta": "#ff00ff",
        "gray": "#808080",
        "grey": "#808080",
        "orange": "#ffa500",
        "purple": "#800080",
        "pink": "#ffc0cb",
        "transparent": None,
    }
)


def round_half_up(value, digits=0):
    """Round like JavaScript's Math.round (ties go up, not to even)."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def _clamp(value, low, high):
    return max(low, min(high, value))


def rgb_to_hex(rgb):
    """Encode RGB as ``#rrggbb``; channels outside 0-255 are clamped."""
    r, g, b = (int(_clamp(c, 0, 255)) for c in rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_rgb(hex_color):
    """Parse ``#rrggbb`` or ``#rgb`` (leading ``#`` optional). Returns None if invalid."""
    hex_color = hex_color.strip()
    match = HEX_RE.match(hex_color)
    if match:
        return RGB(*(int(part, 16) for part in match.groups()))

    match = SHORT_HEX_RE.match(hex_color)
    if match:
        return RGB(*(int(part * 2, 16) for part in match.groups()))

    return None


def parse_color(text):
    """Parse a CSS color literal into RGB.

    Supports hex, rgb()/rgba(), hsl()/hsla() and a small table of named
    colors. Alpha components are ignored.

    Args:
        text: Raw color literal as found in CSS

    Returns:
        RGB, or None when the text is not a color we understand
    """
    text = text.strip().lower()

    if text.startswith("#"):
        return hex_to_rgb(text)

    match = RGB_RE.search(text)
    if match:
        return RGB(*(_clamp(int(part), 0, 255) for part in match.groups()))

    match = HSL_RE.search(text)
    if match:
        h, s, l = (float(part) for part in match.groups())
        return hsl_to_rgb(HSL(h % 360, _clamp(s, 0, 100), _clamp(l, 0, 100)))

    named = NAMED_COLORS.get(text)
    if named is not None:
        return hex_to_rgb(named)

    return None


def rgb_to_hsl(rgb):
    """Convert RGB to HSL with each component rounded to one decimal."""
    r, g, b = (c / 255 for c in rgb)
    high = max(r, g, b)
    low = min(r, g, b)
    h = s = 0.0
    l = (high + low) / 2

    if high != low:
        d = high - low
        s = d / (2 - high - low) if l > 0.5 else d / (high + low)
        if high == r:
            h = ((g - b) / d + (6 if g < b else 0)) / 6
        elif high == g:
            h = ((b - r) / d + 2) / 6
        else:
            h = ((r - g) / d + 4) / 6

    return HSL(
        round_half_up(h * 360, 1) % 360,
        round_half_up(s * 100, 1),
        round_half_up(l * 100, 1),
    )


def _hue_to_channel(p, q, t):
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(hsl):
    h, s, l = hsl
    h, s, l = (h % 360) / 360, _clamp(s, 0, 100) / 100, _clamp(l, 0, 100) / 100

    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)

    return RGB(*(int(_clamp(round_half_up(c * 255), 0, 255)) for c in (r, g, b)))


def relative_luminance(rgb):
    """Calculate relative luminance per WCAG 2.0"""

    def channel(c):
        c = c / 255
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    r, g, b = rgb
    return 0.2126 * channel(r) + 0.7152 * channel(g) + 0.0722 * channel(b)


def contrast_ratio(rgb1, rgb2):
    """Calculate contrast ratio between two colors"""
    lum1 = relative_luminance(rgb1)
    lum2 = relative_luminance(rgb2)
    lighter = max(lum1, lum2)
    darker = min(lum1, lum2)
    return (lighter + 0.05) / (darker + 0.05)


def is_light(rgb):
    return relative_luminance(rgb) > 0.5


def color_distance(rgb1, rgb2):
    """Euclidean distance in RGB space (0-441.67).

    A rough "how different" measure, not a perceptual one.
    """
    return math.sqrt(sum((a - b) ** 2 for a, b in zip(rgb1, rgb2)))


def _format_number(value):
    text = f"{round_half_up(value, 1):.1f}"
    return text[:-2] if text.endswith(".0") else text


def format_hsl(hsl):
    """Format HSL the way shadcn theme variables expect: ``"<h> <s>% <l>%"``.

    Components are clamped and rounded half-up to one decimal, so derived
    values change here (a saturation of 1.77 is emitted as 1.8), not just
    their presentation.
    """
    h, s, l = hsl
    h = round_half_up(_clamp(h, 0, 360), 1) % 360
    s = _clamp(s, 0, 100)
    l = _clamp(l, 0, 100)
    return f"{_format_number(h)} {_format_number(s)}% {_format_number(l)}%"

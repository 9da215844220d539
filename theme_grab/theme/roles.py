"""
Semantic role selection.

Picks background, foreground, primary and accent colors out of a weighted
palette and derives the remaining roles (secondary, muted, border, ...) from
those picks by formula. The finders return None when nothing qualifies; the
theme generator substitutes the fallback constants below, so a theme can
always be produced, even from an empty palette.
"""

import math

from ..color import HSL, RGB, color_distance, is_light, relative_luminance, round_half_up

# Fallbacks when the palette has no usable candidate
DEFAULT_LIGHT = RGB(255, 255, 255)
DEFAULT_DARK = RGB(9, 9, 11)
DEFAULT_PRIMARY = RGB(24, 24, 27)

# Hue grouping for primary detection
HUE_BUCKET_SIZE = 30
MIN_BRAND_SATURATION = 15  # Grays are not brand colors
MIN_BRAND_LIGHTNESS = 15
MAX_BRAND_LIGHTNESS = 90

# Saturated red/orange is usually an error or warning accent
UI_COLOR_MIN_SATURATION = 70
UI_COLOR_PENALTY = 0.3
FREQUENCY_WEIGHT = 0.7
SATURATION_WEIGHT = 0.3

# Accent must sit this far from the primary on the hue circle
MIN_ACCENT_HUE_DISTANCE = 60
MIN_ACCENT_SATURATION = 25
ACCENT_LIGHTNESS_RANGE = (20, 80)

# Fixed role values, never derived from the palette
DESTRUCTIVE_LIGHT = "0 84.2% 60.2%"
DESTRUCTIVE_DARK = "0 62.8% 30.6%"
DESTRUCTIVE_FOREGROUND = "0 0% 98%"


def sort_by_luminance(colors):
    """Sort colors lightest first (stable)."""
    return sorted(colors, key=lambda c: relative_luminance(c.rgb), reverse=True)


def select_backgrounds(colors):
    """Pick the light-mode and dark-mode backgrounds.

    Light mode uses the lightest color of the top third by luminance, dark
    mode the darkest color of the bottom third.

    Returns:
        tuple: (light background RGB, dark background RGB)
    """
    by_lum = sort_by_luminance(colors)
    third = math.ceil(len(by_lum) / 3)
    lightest = by_lum[:third]
    darkest = by_lum[-third:] if third else []

    light_bg = lightest[0].rgb if lightest else DEFAULT_LIGHT
    dark_bg = darkest[-1].rgb if darkest else DEFAULT_DARK
    return light_bg, dark_bg


def find_foreground_color(background, colors):
    """Find the color on the opposite side of light/dark furthest from ``background``.

    Uses RGB distance rather than contrast ratio to rank candidates.

    Returns:
        WeightedColor, or None if every color is as light (or dark) as the background
    """
    bg_is_light = is_light(background)
    candidates = [c for c in colors if is_light(c.rgb) != bg_is_light]
    if not candidates:
        return None

    return max(candidates, key=lambda c: color_distance(c.rgb, background))


def hue_bucket(hue):
    """30-degree bucket for a hue. Exact halves round up (15 -> 30)."""
    return int(round_half_up(hue / HUE_BUCKET_SIZE) * HUE_BUCKET_SIZE) % 360


def group_by_hue(colors):
    """Group brand-color candidates by hue bucket, skipping grays and extremes."""
    groups = {}
    for color in colors:
        h, s, l = color.hsl
        if s < MIN_BRAND_SATURATION:
            continue
        if l < MIN_BRAND_LIGHTNESS or l > MAX_BRAND_LIGHTNESS:
            continue
        groups.setdefault(hue_bucket(h), []).append(color)

    return groups


def is_likely_ui_color(hsl):
    """Saturated red/orange hues read as error/warning colors, not branding."""
    h, s, _ = hsl
    is_red_orange = 0 <= h <= 30 or 330 <= h <= 360
    return is_red_orange and s > UI_COLOR_MIN_SATURATION


def score_hue_group(hue, group):
    total_frequency = sum(c.frequency for c in group)
    avg_saturation = sum(c.hsl.s for c in group) / len(group)
    avg_lightness = sum(c.hsl.l for c in group) / len(group)

    penalty = 1
    if is_likely_ui_color(HSL(hue, avg_saturation, avg_lightness)):
        penalty = UI_COLOR_PENALTY

    return (total_frequency * FREQUENCY_WEIGHT + avg_saturation * SATURATION_WEIGHT) * penalty


def find_primary_color(colors):
    """Find the likely brand color.

    Scores every hue bucket by frequency and saturation and takes the
    strongest color of the winning bucket. Falls back to the most frequent
    reasonably saturated color when no bucket qualifies.

    Returns:
        WeightedColor or None
    """
    groups = group_by_hue(colors)

    if not groups:
        candidates = [c for c in colors if c.hsl.s > 20 and 15 < c.hsl.l < 85]
        if not candidates:
            return None
        return max(candidates, key=lambda c: c.frequency)

    best_group = None
    best_score = None
    for hue, group in groups.items():
        score = score_hue_group(hue, group)
        if best_score is None or score > best_score:
            best_group, best_score = group, score

    return max(best_group, key=lambda c: c.frequency * 2 + c.hsl.s)


def hue_distance(h1, h2):
    diff = abs(h1 - h2)
    return min(diff, 360 - diff)


def find_accent_color(colors, primary_hue):
    """Most frequent saturated color at least 60 degrees of hue from the primary."""
    low, high = ACCENT_LIGHTNESS_RANGE
    candidates = [
        c
        for c in colors
        if c.hsl.s >= MIN_ACCENT_SATURATION
        and low <= c.hsl.l <= high
        and hue_distance(c.hsl.h, primary_hue) > MIN_ACCENT_HUE_DISTANCE
    ]
    if not candidates:
        return None

    return max(candidates, key=lambda c: c.frequency)


def complementary_hsl(primary_hsl):
    h, s, l = primary_hsl
    return HSL((h + 180) % 360, min(s, 60), l)


# === Derived roles ===


def secondary_hsl(primary_hsl, light_mode):
    h, s, _ = primary_hsl
    return HSL(h, max(s * 0.3, 10), 96 if light_mode else 17)


def mute_color(background_hsl, light_mode):
    h, s, l = background_hsl
    if light_mode:
        return HSL(h, min(s * 0.3, 15), max(l, 95))
    return HSL(h, min(s * 0.3, 15), min(l, 15))


def muted_foreground_hsl(primary_hsl, light_mode):
    if light_mode:
        return HSL(primary_hsl.h, 16, 47)
    return HSL(primary_hsl.h, 20, 65)


def border_color(background_hsl, light_mode):
    h, s, l = background_hsl
    if light_mode:
        return HSL(h, min(s + 10, 40), max(l - 10, 85))
    return HSL(h, min(s + 10, 40), min(l + 15, 25))


def primary_foreground_hsl(primary, primary_hsl):
    """Text color on the light-mode primary: dark on light primaries, light on dark."""
    h, s, _ = primary_hsl
    return HSL(h, min(s, 50), 10 if is_light(primary) else 98)


def dark_primary_foreground_hsl(primary_hsl):
    # Fixed regardless of the dark primary's lightness
    return HSL(primary_hsl.h, 50, 10)


def dark_primary_hsl(primary_hsl):
    h, s, l = primary_hsl
    return HSL(h, s, min(l + 20, 90))


def dark_accent_hsl(accent_hsl):
    h, s, l = accent_hsl
    return HSL(h, s, min(l + 10, 80))


def dark_ring_hsl(primary_hsl):
    # Fixed desaturated tone, not the dark primary
    return HSL(primary_hsl.h, 27, 84)

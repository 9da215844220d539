from collections import namedtuple

from ..color import format_hsl, rgb_to_hex, rgb_to_hsl, round_half_up
from ..palette import reduce_colors
from . import roles

# Field order is the CSS variable order
ThemeColors = namedtuple(
    "ThemeColors",
    [
        "background",
        "foreground",
        "card",
        "card_foreground",
        "popover",
        "popover_foreground",
        "primary",
        "primary_foreground",
        "secondary",
        "secondary_foreground",
        "muted",
        "muted_foreground",
        "accent",
        "accent_foreground",
        "destructive",
        "destructive_foreground",
        "border",
        "input",
        "ring",
    ],
)

ExtractedTheme = namedtuple(
    "ExtractedTheme", ["light", "dark", "source_colors", "color_details"]
)

ColorDetail = namedtuple("ColorDetail", ["hex", "frequency", "hue"])

MAX_SOURCE_COLORS = 12


def _is_structural_gray(color):
    """Low-saturation near-black or near-white: page chrome, not branding."""
    _, s, l = color.hsl
    return s <= 10 and (l <= 5 or l >= 95)


def summarize_colors(colors):
    """Most frequent non-gray colors for display, highest frequency first."""
    kept = [c for c in colors if not _is_structural_gray(c)]
    kept.sort(key=lambda c: c.frequency, reverse=True)
    return kept[:MAX_SOURCE_COLORS]


def _build_theme_colors(
    background,
    foreground,
    primary,
    primary_foreground,
    secondary,
    muted,
    muted_foreground,
    accent,
    destructive,
    border,
    ring,
    emphasis,
):
    """Assemble one mode. ``emphasis`` colors text on secondary and accent surfaces."""
    background = format_hsl(background)
    foreground = format_hsl(foreground)
    border = format_hsl(border)
    emphasis = format_hsl(emphasis)

    return ThemeColors(
        background=background,
        foreground=foreground,
        card=background,
        card_foreground=foreground,
        popover=background,
        popover_foreground=foreground,
        primary=format_hsl(primary),
        primary_foreground=format_hsl(primary_foreground),
        secondary=format_hsl(secondary),
        secondary_foreground=emphasis,
        muted=format_hsl(muted),
        muted_foreground=format_hsl(muted_foreground),
        accent=format_hsl(accent),
        accent_foreground=emphasis,
        destructive=destructive,
        destructive_foreground=roles.DESTRUCTIVE_FOREGROUND,
        border=border,
        input=border,
        ring=format_hsl(ring),
    )


def generate_theme(colors):
    """Generate light and dark themes from raw color literals.

    Args:
        colors: Sequence of color strings (hex, rgb(), hsl() or named)

    Returns:
        ExtractedTheme. Never fails: an empty or unusable input yields the
        fallback theme.
    """
    # Hex order makes every tie-break independent of input order
    palette = sorted(reduce_colors(colors), key=lambda c: c.hex)

    # === BACKGROUNDS & FOREGROUNDS ===
    light_bg, dark_bg = roles.select_backgrounds(palette)

    light_fg = roles.find_foreground_color(light_bg, palette)
    light_fg = light_fg.rgb if light_fg else roles.DEFAULT_DARK
    dark_fg = roles.find_foreground_color(dark_bg, palette)
    dark_fg = dark_fg.rgb if dark_fg else roles.DEFAULT_LIGHT

    light_bg_hsl = rgb_to_hsl(light_bg)
    dark_bg_hsl = rgb_to_hsl(dark_bg)

    # === PRIMARY ===
    primary = roles.find_primary_color(palette)
    primary = primary.rgb if primary else roles.DEFAULT_PRIMARY
    primary_hsl = rgb_to_hsl(primary)
    dark_primary_hsl = roles.dark_primary_hsl(primary_hsl)

    # === ACCENT ===
    accent = roles.find_accent_color(palette, primary_hsl.h)
    accent_hsl = accent.hsl if accent else roles.complementary_hsl(primary_hsl)

    light = _build_theme_colors(
        background=light_bg_hsl,
        foreground=rgb_to_hsl(light_fg),
        primary=primary_hsl,
        primary_foreground=roles.primary_foreground_hsl(primary, primary_hsl),
        secondary=roles.secondary_hsl(primary_hsl, light_mode=True),
        muted=roles.mute_color(light_bg_hsl, light_mode=True),
        muted_foreground=roles.muted_foreground_hsl(primary_hsl, light_mode=True),
        accent=accent_hsl,
        destructive=roles.DESTRUCTIVE_LIGHT,
        border=roles.border_color(light_bg_hsl, light_mode=True),
        ring=primary_hsl,
        emphasis=primary_hsl,
    )

    dark = _build_theme_colors(
        background=dark_bg_hsl,
        foreground=rgb_to_hsl(dark_fg),
        primary=dark_primary_hsl,
        primary_foreground=roles.dark_primary_foreground_hsl(primary_hsl),
        secondary=roles.secondary_hsl(primary_hsl, light_mode=False),
        muted=roles.mute_color(dark_bg_hsl, light_mode=False),
        muted_foreground=roles.muted_foreground_hsl(primary_hsl, light_mode=False),
        accent=roles.dark_accent_hsl(accent_hsl),
        destructive=roles.DESTRUCTIVE_DARK,
        border=roles.border_color(dark_bg_hsl, light_mode=False),
        ring=roles.dark_ring_hsl(primary_hsl),
        emphasis=dark_primary_hsl,
    )

    summary = summarize_colors(palette)

    return ExtractedTheme(
        light=light,
        dark=dark,
        source_colors=[c.hex for c in summary],
        color_details=[
            ColorDetail(hex=c.hex, frequency=c.frequency, hue=int(round_half_up(c.hsl.h)))
            for c in summary
        ],
    )


def generate_theme_from_rgb(colors):
    """Generate a theme from RGB swatches (the image path)."""
    return generate_theme([rgb_to_hex(c) for c in colors])

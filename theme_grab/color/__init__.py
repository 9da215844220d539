from .convert import (
    HSL,
    NAMED_COLORS,
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
    round_half_up,
)

__all__ = [
    "HSL",
    "NAMED_COLORS",
    "RGB",
    "color_distance",
    "contrast_ratio",
    "format_hsl",
    "hex_to_rgb",
    "hsl_to_rgb",
    "is_light",
    "parse_color",
    "relative_luminance",
    "rgb_to_hex",
    "rgb_to_hsl",
    "round_half_up",
]

from .generator import (
    ColorDetail,
    ExtractedTheme,
    ThemeColors,
    generate_theme,
    generate_theme_from_rgb,
)

__all__ = [
    "ColorDetail",
    "ExtractedTheme",
    "ThemeColors",
    "generate_theme",
    "generate_theme_from_rgb",
]

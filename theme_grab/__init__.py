"""Extract a brand palette from a website or screenshot and map it onto shadcn theme roles."""

from .export import generate_css_output
from .theme import ExtractedTheme, ThemeColors, generate_theme, generate_theme_from_rgb

__all__ = [
    "ExtractedTheme",
    "ThemeColors",
    "generate_css_output",
    "generate_theme",
    "generate_theme_from_rgb",
]

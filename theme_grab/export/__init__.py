from .css_export import export_css, generate_css_output
from .json_export import export_json, theme_to_dict
from .report import print_theme

__all__ = [
    "export_css",
    "export_json",
    "generate_css_output",
    "print_theme",
    "theme_to_dict",
]

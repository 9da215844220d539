from .image import extract_colors_from_image, sample_image
from .web import (
    ExtractionError,
    extract_colors_from_css,
    extract_colors_from_url,
    fetch_page_css,
)

__all__ = [
    "ExtractionError",
    "extract_colors_from_css",
    "extract_colors_from_image",
    "extract_colors_from_url",
    "fetch_page_css",
    "sample_image",
]

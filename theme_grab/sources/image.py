import logging
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from ..palette import QUANTIZERS

MAX_IMAGE_SIZE = 400
DEFAULT_SAMPLE_RATE = 10
DEFAULT_SWATCHES = 16

MIN_ALPHA = 128
# Near-black and near-white pixels are usually page background
MIN_PIXEL_LUMINANCE = 0.05
MAX_PIXEL_LUMINANCE = 0.95


def sample_image(image_path, max_size=MAX_IMAGE_SIZE, sample_rate=DEFAULT_SAMPLE_RATE):
    """Sample opaque, mid-luminance pixels from an image.

    The image is downscaled to fit ``max_size`` and every
    ``sample_rate``-th pixel is considered.

    Returns:
        (N, 3) integer array of RGB pixels, possibly empty
    """
    path = Path(image_path)
    if not path.exists():
        raise FileNotFoundError(f"Image not found: {path}")

    try:
        img = Image.open(path).convert("RGBA")
    except UnidentifiedImageError as exc:
        raise ValueError(f"Not a readable image: {path}") from exc
    img.thumbnail((max_size, max_size))
    pixels = np.array(img).reshape(-1, 4)[:: max(1, sample_rate)].astype(np.int64)

    rgb = pixels[:, :3]
    luminance = (0.299 * rgb[:, 0] + 0.587 * rgb[:, 1] + 0.114 * rgb[:, 2]) / 255
    mask = (
        (pixels[:, 3] >= MIN_ALPHA)
        & (luminance >= MIN_PIXEL_LUMINANCE)
        & (luminance <= MAX_PIXEL_LUMINANCE)
    )
    return rgb[mask]


def extract_colors_from_image(
    image_path,
    n_colors=DEFAULT_SWATCHES,
    method="median-cut",
    sample_rate=DEFAULT_SAMPLE_RATE,
):
    """Extract representative swatches from an image.

    Args:
        image_path: Path to a screenshot or other raster image
        n_colors: Maximum number of swatches
        method: "median-cut" or "kmeans"
        sample_rate: Keep every n-th pixel

    Returns:
        list of RGB swatches (empty when nothing survives filtering)
    """
    if method not in QUANTIZERS:
        raise ValueError(f"Unknown quantizer: {method}")

    pixels = sample_image(image_path, sample_rate=sample_rate)
    logging.debug("Sampled %d pixels from %s, quantizing with %s", len(pixels), image_path, method)
    return QUANTIZERS[method](pixels, n_colors)

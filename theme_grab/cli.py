import argparse
import logging
import os
from urllib.parse import urlparse

from .export import export_css, export_json, print_theme
from .palette import QUANTIZERS, load_colors_from_json
from .sources import ExtractionError, extract_colors_from_image, extract_colors_from_url
from .sources.image import DEFAULT_SAMPLE_RATE, DEFAULT_SWATCHES
from .sources.web import DEFAULT_TIMEOUT
from .theme import generate_theme, generate_theme_from_rgb


def build_parser():
    parser = argparse.ArgumentParser(
        prog="theme-grab",
        description="Generate shadcn light/dark themes from a website, a screenshot or a colors JSON file",
    )
    parser.add_argument(
        "image_path",
        nargs="?",
        default=None,
        help="Path to a screenshot or other source image",
    )
    parser.add_argument(
        "--url",
        help="Extract colors from this page's HTML and linked stylesheets",
    )
    parser.add_argument(
        "--from-colors",
        metavar="JSON",
        help="Load color literals from a JSON array or {\"colors\": [...]} file",
    )
    parser.add_argument(
        "--output", "-o",
        metavar="DIR",
        default=None,
        help="Output directory (default: same as input file, or the current directory for URLs)",
    )
    parser.add_argument(
        "--name",
        help="Theme name used for output files (default: derived from the source)",
    )
    parser.add_argument(
        "--colors",
        type=int,
        default=DEFAULT_SWATCHES,
        help=f"Number of swatches to extract from an image (default: {DEFAULT_SWATCHES})",
    )
    parser.add_argument(
        "--sample-rate",
        type=int,
        default=DEFAULT_SAMPLE_RATE,
        help=f"Sample every n-th image pixel (default: {DEFAULT_SAMPLE_RATE})",
    )
    parser.add_argument(
        "--quantizer",
        choices=sorted(QUANTIZERS),
        default="median-cut",
        help="Image color quantizer (default: median-cut)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help=f"HTTP timeout in seconds for --url (default: {DEFAULT_TIMEOUT})",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log skipped stylesheets and sampling details",
    )
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s:%(message)s",
    )

    # Validate arguments
    sources = [s for s in (args.image_path, args.url, args.from_colors) if s]
    if len(sources) > 1:
        parser.error("Use only one of image_path, --url or --from-colors")
    if not sources:
        parser.error("One of image_path, --url or --from-colors is required")
    if args.colors < 1:
        parser.error("--colors must be at least 1")
    if args.sample_rate < 1:
        parser.error("--sample-rate must be at least 1")

    try:
        if args.url:
            theme, source, output_dir, theme_name = _run_from_url(args)
        elif args.from_colors:
            theme, source, output_dir, theme_name = _run_from_colors(args)
        else:
            theme, source, output_dir, theme_name = _run_from_image(args)
    except (ExtractionError, FileNotFoundError, ValueError) as exc:
        parser.exit(1, f"Error: {exc}\n")

    _export(theme, source, output_dir, theme_name)


def _run_from_url(args):
    """Generate a theme from the colors used on a web page."""
    url = args.url
    print(f"Fetching: {url}")

    colors = extract_colors_from_url(url, timeout=args.timeout)
    if not colors:
        raise ExtractionError(
            "No colors found on this page. Try uploading a screenshot instead."
        )
    print(f"Found {len(colors)} color values")

    theme_name = args.name or urlparse(url).hostname or "theme"
    return generate_theme(colors), url, args.output or ".", theme_name


def _run_from_colors(args):
    """Generate a theme from a saved list of color literals."""
    colors_path = args.from_colors
    print(f"Loading colors: {colors_path}")

    colors = load_colors_from_json(colors_path)
    if not colors:
        raise ValueError(f"No colors in {colors_path}")

    output_dir = args.output or os.path.dirname(colors_path) or "."
    theme_name = args.name or os.path.splitext(os.path.basename(colors_path))[0]
    return generate_theme(colors), os.path.basename(colors_path), output_dir, theme_name


def _run_from_image(args):
    """Generate a theme from the dominant colors of an image."""
    image_path = args.image_path
    print(f"Analyzing: {image_path}")

    swatches = extract_colors_from_image(
        image_path,
        n_colors=args.colors,
        method=args.quantizer,
        sample_rate=args.sample_rate,
    )
    if not swatches:
        raise ExtractionError("No colors could be extracted from the image")

    output_dir = args.output or os.path.dirname(image_path) or "."
    theme_name = args.name or os.path.splitext(os.path.basename(image_path))[0]
    return generate_theme_from_rgb(swatches), os.path.basename(image_path), output_dir, theme_name


def _export(theme, source, output_dir, theme_name):
    os.makedirs(output_dir, exist_ok=True)

    print_theme(theme)

    css_path = os.path.join(output_dir, f"{theme_name}.css")
    json_path = os.path.join(output_dir, f"{theme_name}.json")

    export_css(theme, css_path)
    export_json(theme, json_path, source=source, theme_name=theme_name)

    print("\n" + "=" * 60)
    print("Exported:")
    print(f"  - {css_path}")
    print(f"  - {json_path}")
    print("=" * 60)


if __name__ == "__main__":
    main()

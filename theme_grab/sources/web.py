import logging
import re
from urllib.parse import urljoin, urlparse

import requests

USER_AGENT = "Mozilla/5.0 (compatible; ThemeGrab/1.0)"
DEFAULT_TIMEOUT = 10

COLOR_PATTERNS = [
    re.compile(r"#[a-fA-F0-9]{6}\b"),
    re.compile(r"#[a-fA-F0-9]{3}\b"),
    re.compile(r"rgba?\(\s*\d+\s*,\s*\d+\s*,\s*\d+\s*(?:,\s*[\d.]+\s*)?\)", re.IGNORECASE),
    re.compile(
        r"hsla?\(\s*[\d.]+\s*,\s*[\d.]+%?\s*,\s*[\d.]+%?\s*(?:,\s*[\d.]+\s*)?\)",
        re.IGNORECASE,
    ),
]

STYLESHEET_RE = re.compile(
    r"""<link[^>]+rel=["']stylesheet["'][^>]+href=["']([^"']+)["']""", re.IGNORECASE
)


class ExtractionError(Exception):
    """A color source could not be read."""


def extract_colors_from_css(text):
    """Find every color literal in CSS or HTML text.

    Duplicates are kept; how often a color appears is what the reducer
    weighs.

    Returns:
        list of lower-cased color strings, grouped by literal kind
    """
    colors = []
    for pattern in COLOR_PATTERNS:
        colors.extend(match.lower() for match in pattern.findall(text))
    return colors


def _get(url, timeout, accept=None):
    headers = {"User-Agent": USER_AGENT}
    if accept:
        headers["Accept"] = accept
    response = requests.get(url, headers=headers, timeout=timeout)
    response.raise_for_status()
    return response.text


def fetch_page_css(url, timeout=DEFAULT_TIMEOUT):
    """Fetch a page and the stylesheets it links to.

    Args:
        url: http(s) page URL
        timeout: Per-request timeout in seconds

    Returns:
        The page HTML followed by each stylesheet that could be fetched,
        joined with newlines

    Raises:
        ExtractionError: The URL is not http(s) or the page itself failed
    """
    if urlparse(url).scheme not in ("http", "https"):
        raise ExtractionError(f"Invalid URL protocol: {url}")

    try:
        html = _get(url, timeout, accept="text/html,text/css,*/*")
    except requests.RequestException as exc:
        raise ExtractionError(f"Failed to fetch {url}: {exc}") from exc

    contents = [html]
    for href in STYLESHEET_RE.findall(html):
        css_url = urljoin(url, href)
        try:
            contents.append(_get(css_url, timeout))
        except requests.RequestException as exc:
            logging.debug("Skip stylesheet %s: %s", css_url, exc)

    return "\n".join(contents)


def extract_colors_from_url(url, timeout=DEFAULT_TIMEOUT):
    return extract_colors_from_css(fetch_page_css(url, timeout=timeout))

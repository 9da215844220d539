from collections import Counter, namedtuple

from ..color import parse_color, rgb_to_hex, rgb_to_hsl

WeightedColor = namedtuple("WeightedColor", ["hex", "rgb", "hsl", "frequency"])


def reduce_colors(colors):
    """Parse raw color literals and merge duplicates into weighted colors.

    Unparseable entries are skipped. Two literals that normalize to the same
    hex (``#FF0000``, ``#f00``, ``red``) count as one color.

    Args:
        colors: Iterable of color literal strings

    Returns:
        list of WeightedColor in first-seen order
    """
    counts = Counter()
    parsed = {}

    for text in colors:
        rgb = parse_color(text)
        if rgb is None:
            continue
        hex_color = rgb_to_hex(rgb)
        counts[hex_color] += 1
        parsed.setdefault(hex_color, rgb)

    return [
        WeightedColor(
            hex=hex_color,
            rgb=rgb,
            hsl=rgb_to_hsl(rgb),
            frequency=counts[hex_color],
        )
        for hex_color, rgb in parsed.items()
    ]

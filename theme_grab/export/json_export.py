import json


def _camel_case(role):
    head, *rest = role.split("_")
    return head + "".join(part.title() for part in rest)


def theme_to_dict(theme):
    """Plain dict of a theme, using the camelCase keys web front ends expect."""
    return {
        "light": {_camel_case(k): v for k, v in theme.light._asdict().items()},
        "dark": {_camel_case(k): v for k, v in theme.dark._asdict().items()},
        "sourceColors": list(theme.source_colors),
        "colorDetails": [detail._asdict() for detail in theme.color_details],
    }


def export_json(theme, filepath, source=None, theme_name=None):
    """Export a theme as JSON with both modes and the source color summary.

    Args:
        theme: The ExtractedTheme
        filepath: Output file path
        source: URL or filename the colors came from, for metadata
        theme_name: Theme name for metadata
    """
    data = theme_to_dict(theme)

    if source:
        data["_source"] = source

    if theme_name:
        data["_theme_name"] = theme_name

    with open(filepath, "w") as f:
        json.dump(data, f, indent=2)

import json


def load_colors_from_json(json_path):
    """Load a list of color literals from a JSON file.

    Accepts either a bare array (``["#1a73e8", "rgb(32, 33, 36)"]``) or the
    object written by the URL extractor (``{"colors": [...]}``). Non-string
    entries are dropped; parsing the literals themselves is left to the
    reducer.

    Args:
        json_path: Path to the colors JSON file

    Returns:
        list of color strings
    """
    with open(json_path) as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = data.get("colors")

    if not isinstance(data, list):
        raise ValueError(
            f"{json_path}: expected a JSON array of colors or an object with a 'colors' array"
        )

    return [value for value in data if isinstance(value, str)]

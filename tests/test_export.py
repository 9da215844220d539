import json
import re

from theme_grab.export import export_css, export_json, generate_css_output, print_theme
from theme_grab.theme import generate_theme

ROLE_ORDER = [
    "background",
    "foreground",
    "card",
    "card-foreground",
    "popover",
    "popover-foreground",
    "primary",
    "primary-foreground",
    "secondary",
    "secondary-foreground",
    "muted",
    "muted-foreground",
    "accent",
    "accent-foreground",
    "destructive",
    "destructive-foreground",
    "border",
    "input",
    "ring",
]

VAR_RE = re.compile(r"^\s+--([a-z-]+): (.+);$")


def _block(css, selector):
    start = css.index(selector + " {")
    end = css.index("}", start)
    return [line for line in css[start:end].splitlines()[1:] if line.strip()]


def test_css_output_shape():
    theme = generate_theme(["#1a73e8", "#1a73e8", "#ffffff", "#202124"])
    css = generate_css_output(theme)

    assert css.startswith("@layer base {\n")
    assert css.endswith("\n}")
    assert css.count(":root {") == 1
    assert css.count(".dark {") == 1
    assert css.count("--radius: 0.5rem;") == 1

    root = [VAR_RE.match(line).groups() for line in _block(css, ":root")]
    dark = [VAR_RE.match(line).groups() for line in _block(css, ".dark")]

    assert [name for name, _ in root] == ROLE_ORDER + ["radius"]
    assert [name for name, _ in dark] == ROLE_ORDER
    assert dict(root)["primary"] == theme.light.primary
    assert dict(dark)["ring"] == theme.dark.ring


def test_css_blocks_nest_declarations():
    css = generate_css_output(generate_theme([]))
    lines = css.splitlines()
    assert "  :root {" in lines
    assert "  .dark {" in lines
    assert "    --background: 0 0% 100%;" in lines
    assert "    --background: 240 10% 3.9%;" in lines
    assert "    --radius: 0.5rem;" in lines


def test_export_css_writes_file(tmp_path):
    theme = generate_theme(["#6366f1", "#f8fafc", "#0f172a"])
    path = tmp_path / "theme.css"
    export_css(theme, path)
    assert path.read_text() == generate_css_output(theme) + "\n"


def test_export_json_uses_camel_case(tmp_path):
    theme = generate_theme(["#1a73e8", "#1a73e8", "#ffffff", "#202124"])
    path = tmp_path / "theme.json"
    export_json(theme, path, source="https://example.com", theme_name="example")

    data = json.loads(path.read_text())
    assert len(data["light"]) == 19
    assert data["light"]["cardForeground"] == theme.light.card_foreground
    assert data["dark"]["destructiveForeground"] == "0 0% 98%"
    assert data["sourceColors"] == ["#1a73e8", "#202124"]
    assert data["colorDetails"][0] == {"hex": "#1a73e8", "frequency": 2, "hue": 214}
    assert data["_source"] == "https://example.com"
    assert data["_theme_name"] == "example"


def test_print_theme(capsys):
    print_theme(generate_theme(["#1a73e8", "#ffffff"]))
    out = capsys.readouterr().out
    assert "#1a73e8" in out
    assert "primary_foreground" in out
    assert "LIGHT:" in out and "DARK:" in out

RADIUS = "0.5rem"
INDENT = "  "


def css_variable_name(role):
    """``card_foreground`` -> ``--card-foreground``"""
    return "--" + role.replace("_", "-")


def _format_block(selector, theme_colors, extra=None):
    lines = [f"{INDENT}{selector} {{"]
    for role, value in theme_colors._asdict().items():
        lines.append(f"{INDENT * 2}{css_variable_name(role)}: {value};")
    for name, value in (extra or {}).items():
        lines.append(f"{INDENT * 2}--{name}: {value};")
    lines.append(f"{INDENT}}}")
    return lines


def generate_css_output(theme):
    """Serialize a theme as a shadcn ``@layer base`` block.

    Args:
        theme: ExtractedTheme

    Returns:
        CSS text with a ``:root`` block (light, plus ``--radius``) and a
        ``.dark`` block
    """
    lines = ["@layer base {"]
    lines += _format_block(":root", theme.light, extra={"radius": RADIUS})
    lines.append("")
    lines += _format_block(".dark", theme.dark)
    lines.append("}")
    return "\n".join(lines)


def export_css(theme, filepath):
    with open(filepath, "w") as f:
        f.write(generate_css_output(theme))
        f.write("\n")

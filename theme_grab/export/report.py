def print_theme(theme):
    """Print theme info"""
    print("\n" + "=" * 60)
    print("EXTRACTED THEME")
    print("=" * 60)

    print("\nSOURCE COLORS:")
    if not theme.color_details:
        print("  (none, only grays were found)")
    for detail in theme.color_details:
        print(f"  {detail.hex}  (hue: {detail.hue:3d}, count: {detail.frequency})")

    for mode, colors in (("LIGHT", theme.light), ("DARK", theme.dark)):
        print(f"\n{mode}:")
        for role, value in colors._asdict().items():
            print(f"  {role:24} {value}")

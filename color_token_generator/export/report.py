from ..contrast import contrast_ratio
from ..semantic.resolver import TEXT_ON_PRIMARY_CONTRAST
from ..semantic.roles import SemanticRole, role_path

R = SemanticRole


def _categories(compliance):
    text = compliance.text_contrast
    outline = compliance.outline_contrast
    # (title, roles, background role, required contrast or None for informational rows)
    return [
        ("TEXT", [R.TEXT_PRIMARY, R.TEXT_SECONDARY, R.TEXT_TERTIARY], R.SURFACE_VARIANT, text),
        (
            "TEXT (inverse)",
            [R.TEXT_PRIMARY_INVERSE, R.TEXT_SECONDARY_INVERSE, R.TEXT_TERTIARY_INVERSE],
            R.SURFACE_INVERTED_VARIANT,
            text,
        ),
        ("OUTLINE", [R.OUTLINE_DEFAULT], R.SURFACE_VARIANT, outline),
        ("OUTLINE (inverse)", [R.OUTLINE_DEFAULT_INVERSE], R.SURFACE_INVERTED_VARIANT, outline),
        (
            "OUTLINE (derived)",
            [R.OUTLINE_SUBTLE, R.OUTLINE_INTENSE, R.OUTLINE_PRIMARY_SUBTLE, R.OUTLINE_PRIMARY_INTENSE],
            R.SURFACE_VARIANT,
            None,
        ),
        ("TEXT ON PRIMARY", [R.TEXT_ON_PRIMARY], R.SURFACE_PRIMARY, TEXT_ON_PRIMARY_CONTRAST),
    ]


def generate_readability_report(generation):
    """Generate a detailed readability report for inspection

    Returns:
        tuple: (report text, list of (theme, role key, hex, achieved, required) failures)
    """
    compliance = generation.compliance

    report = []
    report.append("=" * 70)
    report.append("READABILITY REPORT")
    report.append("=" * 70)
    report.append(f"Seed:       {generation.primary_hex}")
    report.append(f"Neutral:    {generation.neutral_hex}")
    report.append(
        f"Compliance: {compliance.value} (text {compliance.text_contrast}:1, "
        f"outline {compliance.outline_contrast}:1)"
    )

    issues = []
    for theme, assignment in (("light", generation.light), ("dark", generation.dark)):
        report.append(f"\n{theme.upper()} THEME")
        for cat_name, roles, background_role, min_contrast in _categories(compliance):
            background = assignment[background_role].color.hex
            label = f"min: {min_contrast}:1" if min_contrast else "informational"
            report.append(f"\n{cat_name} on {background} ({label})")
            report.append("-" * 50)
            for role in roles:
                key = role_path(role, generation.role_paths)
                c = assignment[role].color
                achieved = contrast_ratio(c.hex, background)
                if min_contrast is None:
                    status = ""
                elif achieved >= min_contrast:
                    status = "✓"
                else:
                    status = "✗ FAIL"
                    issues.append((theme, key, c.hex, achieved, min_contrast))
                report.append(f"  {key:34} {c.hex}  {achieved:5.2f}:1  {status}".rstrip())

    report.append("\n" + "=" * 70)
    if issues:
        report.append(f"ISSUES FOUND: {len(issues)}")
        for theme, key, hex_val, achieved, required in issues:
            report.append(
                f"  - {theme} {key}: {hex_val} has {achieved:.2f}:1, needs {required}:1"
            )
    else:
        report.append("ALL ROLES PASS CONTRAST REQUIREMENTS ✓")
    report.append("=" * 70)

    return "\n".join(report), issues

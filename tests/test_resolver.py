import pytest

from color_token_generator.color import color_from_hex, rgb_to_hex
from color_token_generator.contrast import ComplianceMode, ContrastCache, contrast_ratio
from color_token_generator.palette.generator import (
    SCALE_LABELS,
    ScaleStep,
    generate_neutral_scale,
    generate_primary_scale,
    generate_scale,
    seed_index,
)
from color_token_generator.semantic import SemanticRole, mirror_assignment, resolve_roles
from color_token_generator.semantic.roles import MIRRORED_ROLES

R = SemanticRole

SEEDS = ["#3366FF", "#FFCC00", "#0A0A0A", "#F5F5F5", "#808080", "#E91E63"]

TEXT_ROLES = (R.TEXT_PRIMARY, R.TEXT_SECONDARY, R.TEXT_TERTIARY)
INVERSE_TEXT_ROLES = (R.TEXT_PRIMARY_INVERSE, R.TEXT_SECONDARY_INVERSE, R.TEXT_TERTIARY_INVERSE)
OUTLINE_ROLES = (R.OUTLINE_SUBTLE, R.OUTLINE_DEFAULT, R.OUTLINE_INTENSE)
INVERSE_OUTLINE_ROLES = (
    R.OUTLINE_SUBTLE_INVERSE,
    R.OUTLINE_DEFAULT_INVERSE,
    R.OUTLINE_INTENSE_INVERSE,
)


def resolve(seed="#3366FF", saturation=14, compliance="AA"):
    _, neutral = generate_neutral_scale(seed, saturation)
    return neutral, resolve_roles(
        neutral, compliance, primary_scale=generate_primary_scale(seed)
    )


def grey_scale(values, seed=4):
    return [
        ScaleStep(color_from_hex(rgb_to_hex(v, v, v)), label, i == seed)
        for i, (v, label) in enumerate(zip(values, SCALE_LABELS))
    ]


def label_index(assignment):
    label = assignment.reference.strip("{}").split(".")[-1]
    return SCALE_LABELS.index(label)


def ratio(roles, role, background_role):
    return contrast_ratio(roles[role].color.hex, roles[background_role].color.hex)


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("compliance", ["AA", "AAA"])
def test_every_role_resolves(seed, compliance):
    _, roles = resolve(seed, compliance=compliance)

    assert list(roles) == list(SemanticRole)
    for role, assignment in roles.items():
        assert assignment.color is not None, role
        assert assignment.reference.startswith(("{palettes.", "{seed.")), role


def test_surfaces_hug_white_and_black():
    neutral, roles = resolve()
    hexes = [step.color.hex for step in neutral]

    surface = min(range(10), key=lambda i: contrast_ratio(hexes[i], "#FFFFFF"))
    inverted = min(range(10), key=lambda i: contrast_ratio(hexes[i], "#000000"))
    assert roles[R.SURFACE].color.hex == hexes[surface]
    assert roles[R.SURFACE_VARIANT].color.hex == hexes[surface + 1]
    assert roles[R.SURFACE_INVERTED].color.hex == hexes[inverted]
    assert roles[R.SURFACE_INVERTED_VARIANT].color.hex == hexes[inverted - 1]
    assert roles[R.SURFACE_BASE].reference == "{seed.white}"


@pytest.mark.parametrize("compliance", ["AA", "AAA"])
def test_text_meets_threshold(compliance):
    _, roles = resolve(compliance=compliance)
    threshold = ComplianceMode.parse(compliance).text_contrast

    for role in TEXT_ROLES:
        assert ratio(roles, role, R.SURFACE_VARIANT) >= threshold
    for role in INVERSE_TEXT_ROLES:
        assert ratio(roles, role, R.SURFACE_INVERTED_VARIANT) >= threshold


def test_text_hierarchy_order():
    _, roles = resolve()
    primary = label_index(roles[R.TEXT_PRIMARY])
    secondary = label_index(roles[R.TEXT_SECONDARY])
    tertiary = label_index(roles[R.TEXT_TERTIARY])
    assert tertiary <= secondary <= primary

    primary = label_index(roles[R.TEXT_PRIMARY_INVERSE])
    secondary = label_index(roles[R.TEXT_SECONDARY_INVERSE])
    tertiary = label_index(roles[R.TEXT_TERTIARY_INVERSE])
    assert primary <= secondary <= tertiary


def test_outline_default_meets_threshold_and_offsets():
    _, roles = resolve()

    assert ratio(roles, R.OUTLINE_DEFAULT, R.SURFACE_VARIANT) >= 3.0
    anchor = label_index(roles[R.OUTLINE_DEFAULT])
    assert label_index(roles[R.OUTLINE_SUBTLE]) == max(anchor - 2, 0)
    assert label_index(roles[R.OUTLINE_INTENSE]) == min(anchor + 2, 9)

    assert ratio(roles, R.OUTLINE_DEFAULT_INVERSE, R.SURFACE_INVERTED_VARIANT) >= 3.0
    anchor = label_index(roles[R.OUTLINE_DEFAULT_INVERSE])
    assert label_index(roles[R.OUTLINE_SUBTLE_INVERSE]) == min(anchor + 2, 9)
    assert label_index(roles[R.OUTLINE_INTENSE_INVERSE]) == max(anchor - 2, 0)


def test_outline_neighbours_clamp_at_scale_end():
    # Dark navy pushes the AAA inverse outline next to the lightest step
    _, roles = resolve("#000066", saturation=14, compliance="AAA")

    anchor = label_index(roles[R.OUTLINE_DEFAULT_INVERSE])
    assert anchor < 2
    assert roles[R.OUTLINE_INTENSE_INVERSE].reference == "{palettes.neutral.50}"


@pytest.mark.parametrize(
    "seed, saturation",
    [(seed, 14) for seed in SEEDS]
    + [("#000066", 14), ("#000066", 0), ("#000066", 30), ("#FFFF00", 30), ("#660000", 0)],
)
def test_aaa_never_lowers_text_or_outline_contrast(seed, saturation):
    _, aa = resolve(seed, saturation, compliance="AA")
    _, aaa = resolve(seed, saturation, compliance="AAA")

    checks = [(role, R.SURFACE_VARIANT) for role in TEXT_ROLES + OUTLINE_ROLES]
    checks += [
        (role, R.SURFACE_INVERTED_VARIANT)
        for role in INVERSE_TEXT_ROLES + INVERSE_OUTLINE_ROLES
    ]
    for role, background in checks:
        assert ratio(aaa, role, background) >= ratio(aa, role, background) - 1e-9, role


def test_primary_roles():
    _, roles = resolve()
    primary_scale = generate_primary_scale("#3366FF")
    seed = seed_index(primary_scale)

    assert roles[R.SURFACE_PRIMARY].reference == "{seed.primary}"
    assert roles[R.SURFACE_PRIMARY].color.hex == "#3366FF"
    assert roles[R.OUTLINE_PRIMARY] == roles[R.SURFACE_PRIMARY]
    assert label_index(roles[R.SURFACE_PRIMARY_SUBTLE]) == max(seed - 2, 0)
    assert label_index(roles[R.SURFACE_PRIMARY_INTENSE]) == min(seed + 2, 9)
    assert roles[R.SURFACE_PRIMARY_SUBTLE].reference.startswith("{palettes.primary.")


def test_primary_outlines_move_off_a_failing_seed():
    _, neutral = generate_neutral_scale("#3366FF", 14)
    primary_scale = generate_scale("#F0F0FF")
    roles = resolve_roles(neutral, "AA", primary_scale=primary_scale)

    background = roles[R.SURFACE_VARIANT].color.hex
    hexes = [step.color.hex for step in primary_scale]
    assert contrast_ratio(hexes[0], background) < 3.0
    anchor = next(i for i in range(1, 10) if contrast_ratio(hexes[i], background) >= 3.0)

    assert label_index(roles[R.OUTLINE_PRIMARY_SUBTLE]) == max(anchor - 3, 0)
    assert label_index(roles[R.OUTLINE_PRIMARY_INTENSE]) == min(anchor + 3, 9)


def test_text_on_primary_falls_back_to_white():
    _, roles = resolve("#3366FF")
    assert contrast_ratio("#3366FF", roles[R.TEXT_PRIMARY].color.hex) < 4.5
    assert roles[R.TEXT_ON_PRIMARY].reference == "{seed.white}"


def test_text_on_primary_reuses_text_primary():
    _, roles = resolve("#FFCC00", saturation=8)
    assert roles[R.TEXT_ON_PRIMARY] == roles[R.TEXT_PRIMARY]


def test_two_matches_duplicate_the_lighter():
    scale = grey_scale([255, 245, 235, 225, 215, 205, 195, 185, 40, 20])
    roles = resolve_roles(scale, "AA")

    assert roles[R.TEXT_TERTIARY].reference == "{palettes.neutral.900}"
    assert roles[R.TEXT_SECONDARY].reference == "{palettes.neutral.900}"
    assert roles[R.TEXT_PRIMARY].reference == "{palettes.neutral.950}"


def test_single_match_fills_every_level():
    scale = grey_scale([255, 245, 235, 225, 215, 205, 195, 185, 170, 20])
    roles = resolve_roles(scale, "AA")

    for role in TEXT_ROLES:
        assert roles[role].reference == "{palettes.neutral.950}"


def test_two_inverse_matches_duplicate_the_darker():
    scale = grey_scale([250, 235, 60, 55, 50, 45, 40, 35, 30, 0])
    roles = resolve_roles(scale, "AA")

    assert roles[R.SURFACE_INVERTED].reference == "{palettes.neutral.950}"
    assert roles[R.TEXT_PRIMARY_INVERSE].reference == "{palettes.neutral.50}"
    assert roles[R.TEXT_SECONDARY_INVERSE].reference == "{palettes.neutral.100}"
    assert roles[R.TEXT_TERTIARY_INVERSE].reference == "{palettes.neutral.100}"


def test_low_contrast_scale_falls_back_to_best_effort():
    scale = grey_scale([255 - 3 * i for i in range(10)])
    roles = resolve_roles(scale, "AA")

    for role in TEXT_ROLES:
        assert roles[role].reference == "{palettes.neutral.950}"
    for role in INVERSE_TEXT_ROLES:
        assert roles[role].reference == "{palettes.neutral.50}"

    assert roles[R.OUTLINE_DEFAULT].reference == "{palettes.neutral.950}"
    assert roles[R.OUTLINE_SUBTLE].reference == "{palettes.neutral.800}"
    assert roles[R.OUTLINE_INTENSE].reference == "{palettes.neutral.950}"
    assert roles[R.OUTLINE_DEFAULT_INVERSE].reference == "{palettes.neutral.50}"
    assert roles[R.OUTLINE_SUBTLE_INVERSE].reference == "{palettes.neutral.200}"
    assert roles[R.OUTLINE_INTENSE_INVERSE].reference == "{palettes.neutral.50}"


def test_neutral_scale_stands_in_for_primary():
    scale = grey_scale([255 - 3 * i for i in range(10)])
    roles = resolve_roles(scale, "AA")

    assert roles[R.SURFACE_PRIMARY].reference == "{seed.neutral}"
    assert roles[R.SURFACE_PRIMARY].color == scale[4].color
    assert roles[R.OUTLINE_PRIMARY_SUBTLE].reference == "{palettes.neutral.700}"
    assert roles[R.OUTLINE_PRIMARY_INTENSE].reference == "{palettes.neutral.950}"


@pytest.mark.parametrize("scale", [None, [], [("#FFFFFF", "50")], [ScaleStep(None, "50", True)]])
def test_malformed_scale_resolves_nothing(scale):
    assert resolve_roles(scale, "AA") is None


def test_unknown_compliance_behaves_like_aa():
    _, neutral = generate_neutral_scale("#3366FF", 14)
    assert resolve_roles(neutral, "bogus") == resolve_roles(neutral, ComplianceMode.AA)


def test_shared_cache_is_filled():
    _, neutral = generate_neutral_scale("#3366FF", 14)
    cache = ContrastCache()
    resolve_roles(neutral, "AA", cache=cache)
    assert len(cache) > 0


def test_dark_theme_mirrors_light():
    _, light = resolve()
    dark = mirror_assignment(light)

    for role, twin in MIRRORED_ROLES.items():
        assert dark[role] == light[twin]
    assert dark[R.SURFACE_BASE].reference == "{seed.black}"
    for role in (R.SURFACE_PRIMARY, R.OUTLINE_PRIMARY_INTENSE, R.TEXT_ON_PRIMARY):
        assert dark[role] == light[role]
    assert mirror_assignment(dark) == light


def test_mirror_of_nothing():
    assert mirror_assignment(None) is None

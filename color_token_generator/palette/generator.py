import logging
from collections import namedtuple

from ..color import clamp, color_from_hex, color_from_hsl

logger = logging.getLogger(__name__)

ScaleStep = namedtuple("ScaleStep", ["color", "label", "is_seed"])

SCALE_LABELS = ("50", "100", "200", "300", "500", "600", "700", "800", "900", "950")

# Seed lightness breakpoints for the lighten/darken split
LIGHT_SEED_THRESHOLD = 0.6  # above: seed is near-white, only darken
DARK_SEED_THRESHOLD = 0.2  # below: seed is near-black, only lighten
DEFAULT_LIGHTEN_STEPS = 4
DEFAULT_DARKEN_STEPS = 5

MAX_NEUTRAL_SATURATION = 0.30

HARMONY_HUE_SHIFTS = {
    "primary": 0,
    "analogous-plus": 30,
    "analogous-minus": -30,
    "triadic-plus": 120,
    "triadic-minus": -120,
    "split-complementary-plus": 150,
    "split-complementary-minus": 210,
    "tetradic-60": 60,
    "tetradic-240": 240,
    "warm-shift": 45,
    "cool-shift": -45,
}


def hue_shift(harmony):
    """Hue offset in degrees for a harmony mode. Unknown modes don't shift."""
    return HARMONY_HUE_SHIFTS.get(harmony, 0)


def saturation_ratio(saturation_percent):
    """Convert a 0-30 percent saturation input to a clamped 0-0.30 ratio."""
    try:
        ratio = float(saturation_percent) / 100
    except (TypeError, ValueError):
        ratio = 0.0
    return clamp(ratio, 0, MAX_NEUTRAL_SATURATION)


def derive_neutral_seed(primary_hex, saturation_percent, harmony="primary"):
    """Derive the tinted grey that seeds the neutral scale.

    Keeps the primary color's lightness, takes its hue (shifted for the harmony
    mode) and replaces its saturation with the clamped tint amount.

    Returns:
        Color, or None if primary_hex is not a valid color
    """
    primary = color_from_hex(primary_hex)
    if primary is None:
        return None
    h, _, l = primary.hsl
    hue = (h + hue_shift(harmony) + 360) % 360
    return color_from_hsl(hue, saturation_ratio(saturation_percent), l)


def _step_counts(lightness):
    if lightness > LIGHT_SEED_THRESHOLD:
        return 0, len(SCALE_LABELS) - 1
    if lightness < DARK_SEED_THRESHOLD:
        return len(SCALE_LABELS) - 1, 0
    return DEFAULT_LIGHTEN_STEPS, DEFAULT_DARKEN_STEPS


def generate_scale(seed_hex, saturation=None, hue=None, lightness=None):
    """Build a 10-step scale around a seed, ordered lightest to darkest.

    Near-white seeds (lightness > 0.6) only get darker steps and near-black seeds
    (lightness < 0.2) only get lighter ones, so the scale never collapses into
    duplicates at the extremes. Every other seed gets 4 lighter and 5 darker steps.

    Args:
        seed_hex: The seed color, kept verbatim as the seed step
        saturation: Saturation (0-1) for generated steps, default: the seed's own
        hue: Hue for generated steps, default: the seed's own
        lightness: Lightness the steps interpolate from, default: the seed's own

    Returns:
        list of ScaleStep, or None if seed_hex is not a valid color
    """
    seed = color_from_hex(seed_hex)
    if seed is None:
        return None

    seed_h, seed_s, seed_l = seed.hsl
    h = seed_h if hue is None else hue
    s = seed_s if saturation is None else clamp(saturation, 0, 1)
    seed_l = seed_l if lightness is None else clamp(lightness, 0, 1)
    lighter_steps, darker_steps = _step_counts(seed_l)

    lighten = []
    for i in range(1, lighter_steps + 1):
        ratio = i / (lighter_steps + 1)
        lighten.append(color_from_hsl(h, s, clamp(seed_l + (1 - seed_l) * ratio, 0, 1)))

    darken = []
    for i in range(1, darker_steps + 1):
        ratio = i / (darker_steps + 1)
        darken.append(color_from_hsl(h, s, clamp(seed_l - seed_l * ratio, 0, 1)))

    ordered = [(c, False) for c in reversed(lighten)]
    ordered.append((seed, True))
    ordered.extend((c, False) for c in darken)

    return [
        ScaleStep(color=color, label=label, is_seed=is_seed)
        for (color, is_seed), label in zip(ordered, SCALE_LABELS)
    ]


def generate_neutral_scale(primary_hex, saturation_percent, harmony="primary"):
    """Generate the tinted neutral scale for a primary color.

    Returns:
        tuple: (neutral seed Color, list of ScaleStep), or (None, None) if invalid
    """
    neutral_seed = derive_neutral_seed(primary_hex, saturation_percent, harmony)
    if neutral_seed is None:
        logger.debug("Cannot derive neutral seed from %r", primary_hex)
        return None, None
    # Steps use the exact tint, hue and lightness, not the values re-read from the rounded seed
    h, _, l = color_from_hex(primary_hex).hsl
    scale = generate_scale(
        neutral_seed.hex,
        saturation=saturation_ratio(saturation_percent),
        hue=(h + hue_shift(harmony) + 360) % 360,
        lightness=l,
    )
    return neutral_seed, scale


def generate_primary_scale(primary_hex):
    """Generate the brand scale at the seed's full saturation."""
    return generate_scale(primary_hex)


def seed_index(scale):
    for index, step in enumerate(scale):
        if step.is_seed:
            return index
    return None

import logging
from collections import namedtuple

from ..color import BLACK, WHITE
from ..contrast import ComplianceMode, contrast_ratio
from ..palette.generator import ScaleStep, seed_index
from .roles import MIRRORED_ROLES, SemanticRole

logger = logging.getLogger(__name__)

RoleAssignment = namedtuple("RoleAssignment", ["color", "reference"])

WHITE_REFERENCE = "{seed.white}"
BLACK_REFERENCE = "{seed.black}"

TEXT_ON_PRIMARY_CONTRAST = 4.5
TEXT_LEVELS = 3

# Positional offsets from a validated anchor; neighbours are not re-checked
NEUTRAL_OUTLINE_OFFSET = 2
PRIMARY_SURFACE_OFFSET = 2
PRIMARY_OUTLINE_OFFSET = 3


def palette_reference(palette, label):
    return f"{{palettes.{palette}.{label}}}"


class _ScaleView:
    """A scale plus the palette name its references point into."""

    def __init__(self, steps, palette, cache):
        self.steps = steps
        self.palette = palette
        self.cache = cache

    def __len__(self):
        return len(self.steps)

    def last(self):
        return len(self.steps) - 1

    def clamp(self, index):
        return max(0, min(self.last(), index))

    def hex(self, index):
        return self.steps[index].color.hex

    def assign(self, index):
        step = self.steps[index]
        return RoleAssignment(step.color, palette_reference(self.palette, step.label))

    def contrast(self, index, background_hex):
        return contrast_ratio(self.hex(index), background_hex, self.cache) or 1.0

    def least_contrast_index(self, background_hex):
        """Index of the entry closest to the background; the first entry wins ties."""
        best_index = 0
        best_ratio = None
        for index in range(len(self)):
            ratio = self.contrast(index, background_hex)
            if best_ratio is None or ratio < best_ratio:
                best_index, best_ratio = index, ratio
        return best_index

    def most_contrast_index(self, background_hex):
        best_index = 0
        best_ratio = None
        for index in range(len(self)):
            ratio = self.contrast(index, background_hex)
            if best_ratio is None or ratio > best_ratio:
                best_index, best_ratio = index, ratio
        return best_index

    def passing(self, background_hex, threshold, limit):
        """Indices, lightest first, whose contrast against the background meets the threshold."""
        found = []
        for index in range(len(self)):
            if self.contrast(index, background_hex) >= threshold:
                found.append(index)
                if len(found) == limit:
                    break
        return found

    def first_passing(self, background_hex, threshold, indices):
        for index in indices:
            if self.contrast(index, background_hex) >= threshold:
                return index
        return None


def _is_valid_scale(scale):
    if not scale:
        return False
    return all(
        isinstance(step, ScaleStep) and step.color is not None and step.label
        for step in scale
    )


def _text_matches(view, background_hex, threshold):
    matches = view.passing(background_hex, threshold, TEXT_LEVELS)
    if not matches:
        best = view.most_contrast_index(background_hex)
        logger.debug(
            "No %s entry reaches %.1f:1 against %s, using best effort %s",
            view.palette, threshold, background_hex, view.hex(best),
        )
        matches = [best]
    elif len(matches) < TEXT_LEVELS:
        logger.debug(
            "Only %d text candidates reach %.1f:1 against %s, duplicating",
            len(matches), threshold, background_hex,
        )
    return matches


def _resolve_text(view, background_hex, threshold):
    """Text hierarchy for a light background: primary is the darkest collected match."""
    matches = _text_matches(view, background_hex, threshold)
    if len(matches) == 1:
        tertiary = secondary = primary = matches[0]
    elif len(matches) == 2:
        tertiary = secondary = matches[0]
        primary = matches[1]
    else:
        tertiary, secondary, primary = matches
    return {
        SemanticRole.TEXT_PRIMARY: view.assign(primary),
        SemanticRole.TEXT_SECONDARY: view.assign(secondary),
        SemanticRole.TEXT_TERTIARY: view.assign(tertiary),
    }


def _resolve_inverse_text(view, background_hex, threshold):
    """Text hierarchy for a dark background: primary is the lightest collected match."""
    matches = _text_matches(view, background_hex, threshold)
    if len(matches) == 1:
        primary = secondary = tertiary = matches[0]
    elif len(matches) == 2:
        primary = matches[0]
        secondary = tertiary = matches[1]
    else:
        primary, secondary, tertiary = matches
    return {
        SemanticRole.TEXT_PRIMARY_INVERSE: view.assign(primary),
        SemanticRole.TEXT_SECONDARY_INVERSE: view.assign(secondary),
        SemanticRole.TEXT_TERTIARY_INVERSE: view.assign(tertiary),
    }


def _resolve_outlines(view, variant_index, threshold):
    background_hex = view.hex(variant_index)
    anchor = view.first_passing(
        background_hex, threshold, range(variant_index + 1, len(view))
    )
    if anchor is None:
        anchor = view.last()
        logger.debug("No outline reaches %.1f:1, falling back to darkest entry", threshold)
    return {
        SemanticRole.OUTLINE_SUBTLE: view.assign(
            view.clamp(anchor - NEUTRAL_OUTLINE_OFFSET)
        ),
        SemanticRole.OUTLINE_DEFAULT: view.assign(anchor),
        SemanticRole.OUTLINE_INTENSE: view.assign(
            view.clamp(anchor + NEUTRAL_OUTLINE_OFFSET)
        ),
    }


def _resolve_inverse_outlines(view, variant_index, threshold):
    background_hex = view.hex(variant_index)
    anchor = view.first_passing(
        background_hex, threshold, range(variant_index - 1, -1, -1)
    )
    if anchor is None:
        anchor = 0
        logger.debug(
            "No inverse outline reaches %.1f:1, falling back to lightest entry", threshold
        )
    # On a dark background "subtle" sits closer to the background, i.e. darker
    return {
        SemanticRole.OUTLINE_SUBTLE_INVERSE: view.assign(
            view.clamp(anchor + NEUTRAL_OUTLINE_OFFSET)
        ),
        SemanticRole.OUTLINE_DEFAULT_INVERSE: view.assign(anchor),
        SemanticRole.OUTLINE_INTENSE_INVERSE: view.assign(
            view.clamp(anchor - NEUTRAL_OUTLINE_OFFSET)
        ),
    }


def _resolve_primary(view, seed_reference, surface_variant_hex, threshold):
    seed = seed_index(view.steps)
    if seed is None:
        seed = view.clamp(len(view) // 2)
    seed_role = RoleAssignment(view.steps[seed].color, seed_reference)

    if view.contrast(seed, surface_variant_hex) >= threshold:
        anchor = seed
    else:
        anchor = view.first_passing(
            surface_variant_hex, threshold, range(seed + 1, len(view))
        )
        if anchor is None:
            anchor = view.last()
        logger.debug(
            "Primary seed %s fails %.1f:1 outline contrast, anchoring outlines on %s",
            view.hex(seed), threshold, view.hex(anchor),
        )

    return {
        SemanticRole.SURFACE_PRIMARY: seed_role,
        SemanticRole.SURFACE_PRIMARY_SUBTLE: view.assign(
            view.clamp(seed - PRIMARY_SURFACE_OFFSET)
        ),
        SemanticRole.SURFACE_PRIMARY_INTENSE: view.assign(
            view.clamp(seed + PRIMARY_SURFACE_OFFSET)
        ),
        SemanticRole.OUTLINE_PRIMARY: seed_role,
        SemanticRole.OUTLINE_PRIMARY_SUBTLE: view.assign(
            view.clamp(anchor - PRIMARY_OUTLINE_OFFSET)
        ),
        SemanticRole.OUTLINE_PRIMARY_INTENSE: view.assign(
            view.clamp(anchor + PRIMARY_OUTLINE_OFFSET)
        ),
    }


def _resolve_text_on_primary(primary_seed, text_primary, cache):
    ratio = contrast_ratio(primary_seed.color.hex, text_primary.color.hex, cache)
    if ratio is not None and ratio >= TEXT_ON_PRIMARY_CONTRAST:
        return text_primary
    logger.debug(
        "Primary text %s has %.2f:1 on %s, using white",
        text_primary.color.hex, ratio or 0, primary_seed.color.hex,
    )
    return RoleAssignment(WHITE, WHITE_REFERENCE)


def resolve_roles(neutral_scale, compliance, primary_scale=None, cache=None):
    """Assign a scale entry to every semantic role of the light theme.

    Surfaces are picked by contrast against pure white / black, text and
    outlines by scanning the scale for the first entries that meet the
    compliance thresholds against the variant surfaces. Shortages are filled
    by duplicating the matches that were found, so every role always resolves.

    Args:
        neutral_scale: list of ScaleStep, lightest to darkest
        compliance: ComplianceMode or 'AA' / 'AAA'
        primary_scale: Brand scale for the primary roles; the neutral scale
            stands in when omitted
        cache: Optional ContrastCache shared across the computation

    Returns:
        dict of SemanticRole -> RoleAssignment, or None for a malformed scale
    """
    if not _is_valid_scale(neutral_scale):
        logger.debug("Cannot resolve roles for an empty or malformed scale")
        return None
    if primary_scale is not None and not _is_valid_scale(primary_scale):
        logger.debug("Cannot resolve roles for a malformed primary scale")
        return None

    mode = ComplianceMode.parse(compliance)
    if mode is None:
        logger.debug("Unknown compliance mode %r, using AA", compliance)
        mode = ComplianceMode.AA

    neutral = _ScaleView(neutral_scale, "neutral", cache)
    if primary_scale is not None:
        primary = _ScaleView(primary_scale, "primary", cache)
        primary_seed_reference = "{seed.primary}"
    else:
        primary = neutral
        primary_seed_reference = "{seed.neutral}"

    surface = neutral.least_contrast_index(WHITE.hex)
    surface_variant = neutral.clamp(surface + 1)
    surface_inverted = neutral.least_contrast_index(BLACK.hex)
    surface_inverted_variant = neutral.clamp(surface_inverted - 1)

    roles = {
        SemanticRole.SURFACE_BASE: RoleAssignment(WHITE, WHITE_REFERENCE),
        SemanticRole.SURFACE: neutral.assign(surface),
        SemanticRole.SURFACE_VARIANT: neutral.assign(surface_variant),
        SemanticRole.SURFACE_INVERTED: neutral.assign(surface_inverted),
        SemanticRole.SURFACE_INVERTED_VARIANT: neutral.assign(surface_inverted_variant),
    }
    roles.update(
        _resolve_text(neutral, neutral.hex(surface_variant), mode.text_contrast)
    )
    roles.update(
        _resolve_inverse_text(
            neutral, neutral.hex(surface_inverted_variant), mode.text_contrast
        )
    )
    roles.update(_resolve_outlines(neutral, surface_variant, mode.outline_contrast))
    roles.update(
        _resolve_inverse_outlines(neutral, surface_inverted_variant, mode.outline_contrast)
    )
    roles.update(
        _resolve_primary(
            primary,
            primary_seed_reference,
            neutral.hex(surface_variant),
            mode.outline_contrast,
        )
    )
    roles[SemanticRole.TEXT_ON_PRIMARY] = _resolve_text_on_primary(
        roles[SemanticRole.SURFACE_PRIMARY], roles[SemanticRole.TEXT_PRIMARY], cache
    )

    return {role: roles[role] for role in SemanticRole}


def mirror_assignment(light):
    """Derive the dark theme by swapping each role with its inverted twin.

    The white/black base anchor swaps too. Primary roles and text-on-primary
    carry over unchanged.
    """
    if light is None:
        return None
    dark = dict(light)
    for role, twin in MIRRORED_ROLES.items():
        dark[role] = light[twin]

    base = light[SemanticRole.SURFACE_BASE]
    if base.reference == WHITE_REFERENCE:
        dark[SemanticRole.SURFACE_BASE] = RoleAssignment(BLACK, BLACK_REFERENCE)
    elif base.reference == BLACK_REFERENCE:
        dark[SemanticRole.SURFACE_BASE] = RoleAssignment(WHITE, WHITE_REFERENCE)
    return dark

import logging
from collections import namedtuple

from .color import normalize_hex
from .contrast import ComplianceMode, ContrastCache
from .palette.generator import generate_neutral_scale, generate_primary_scale
from .semantic.resolver import mirror_assignment, resolve_roles
from .tokens.builder import build_token_tree

logger = logging.getLogger(__name__)

DEFAULT_SATURATION = 8

Generation = namedtuple(
    "Generation",
    [
        "primary_hex",
        "neutral_hex",
        "neutral_scale",
        "primary_scale",
        "compliance",
        "light",
        "dark",
        "tree",
        "role_paths",
    ],
)


def generate_tokens(
    primary_hex,
    saturation=DEFAULT_SATURATION,
    compliance=ComplianceMode.AA,
    overrides=None,
    prefix=None,
    harmony="primary",
    role_paths=None,
    cache=None,
):
    """Run the whole derivation: scales, role resolution, dark mirror and token tree.

    Each call is independent. A fresh contrast cache is used unless one is
    passed in, so results never depend on an earlier seed or saturation.

    Args:
        primary_hex: Brand seed color (3 or 6 hex digits, '#' optional)
        saturation: Neutral tint amount in percent, clamped to 0-30
        compliance: ComplianceMode or 'AA' / 'AAA'
        overrides: Optional dict of role key -> reference string
        prefix: Optional root key for the serialized tree
        harmony: Harmony mode shifting the neutral scale's hue
        role_paths: Optional dict of SemanticRole -> dotted role key
        cache: Optional ContrastCache

    Returns:
        Generation, or None if the seed color is invalid
    """
    primary = normalize_hex(primary_hex)
    if primary is None:
        logger.debug("Invalid primary color %r", primary_hex)
        return None

    mode = ComplianceMode.parse(compliance)
    if mode is None:
        logger.debug("Unknown compliance mode %r, using AA", compliance)
        mode = ComplianceMode.AA

    if cache is None:
        cache = ContrastCache()

    neutral_seed, neutral_scale = generate_neutral_scale(primary, saturation, harmony)
    primary_scale = generate_primary_scale(primary)
    if not neutral_scale or not primary_scale:
        return None

    light = resolve_roles(neutral_scale, mode, primary_scale=primary_scale, cache=cache)
    if light is None:
        return None
    dark = mirror_assignment(light)

    tree = build_token_tree(
        primary,
        neutral_seed.hex,
        neutral_scale,
        primary_scale,
        light,
        dark,
        overrides=overrides,
        role_paths=role_paths,
        prefix=prefix,
    )
    logger.debug(
        "Generated %d tokens for %s (%s, tint %s%%)",
        len(tree.nodes), primary, mode.value, saturation,
    )
    return Generation(
        primary_hex=primary,
        neutral_hex=neutral_seed.hex,
        neutral_scale=neutral_scale,
        primary_scale=primary_scale,
        compliance=mode,
        light=light,
        dark=dark,
        tree=tree,
        role_paths=role_paths,
    )

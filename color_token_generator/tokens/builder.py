import logging
import re
from collections import OrderedDict, namedtuple

from ..color import BLACK, WHITE, normalize_hex
from ..semantic.roles import SemanticRole, role_description, role_from_path, role_path

logger = logging.getLogger(__name__)

TokenNode = namedtuple(
    "TokenNode", ["value", "type", "description"], defaults=("color", None)
)

TokenTree = namedtuple("TokenTree", ["root", "nodes"])

DEFAULT_ROOT = "color"
THEMES = ("light", "dark")

_REFERENCE = re.compile(r"^\{([^{}]+)\}$")


def sanitize_prefix(prefix):
    """Lowercase, keep [a-z0-9.-], collapse dot runs and strip surrounding dots.

    Empty means 'color'.
    """
    cleaned = re.sub(r"[^a-z0-9.-]", "", (prefix or "").strip().lower())
    cleaned = re.sub(r"\.{2,}", ".", cleaned).strip(".")
    return cleaned or DEFAULT_ROOT


def reference_path(value):
    """Return the dotted path inside a '{...}' reference, or None for literals."""
    if not isinstance(value, str):
        return None
    match = _REFERENCE.match(value.strip())
    return match.group(1) if match else None


def resolve_reference(tree, path):
    """Follow a node's reference chain down to a literal hex.

    Returns None if the path is unknown, a reference is broken, or the chain loops.
    """
    seen = set()
    while path not in seen:
        seen.add(path)
        node = tree.nodes.get(path)
        if node is None:
            return None
        target = reference_path(node.value)
        if target is None:
            return normalize_hex(node.value)
        path = target
    logger.warning("Reference cycle through %s", path)
    return None


def _seed_nodes(primary_hex, neutral_hex):
    return [
        ("seed.primary", TokenNode(primary_hex, description="Brand seed color")),
        ("seed.neutral", TokenNode(neutral_hex, description="Tinted neutral seed color")),
        ("seed.white", TokenNode(WHITE.hex)),
        ("seed.black", TokenNode(BLACK.hex)),
    ]


def _palette_nodes(palette, scale):
    nodes = []
    for step in scale:
        value = f"{{seed.{palette}}}" if step.is_seed else step.color.hex
        nodes.append((f"palettes.{palette}.{step.label}", TokenNode(value)))
    return nodes


def _override_key(key):
    """Split an override key into (theme or None, role key)."""
    if key.startswith("semantic."):
        key = key[len("semantic."):]
    theme, _, rest = key.partition(".")
    if theme in THEMES:
        return theme, rest
    return None, key


def collect_overrides(overrides, nodes, role_paths=None):
    """Turn a user override map into per-theme role -> reference lookups.

    Role keys apply to both themes; theme-qualified keys ('dark.<role key>') apply
    to one theme and win over the plain role key. Keys that name no role and
    values that are not references to seed or palette nodes are skipped.

    Returns:
        dict of theme -> {SemanticRole: reference}
    """
    shared = {}
    per_theme = {theme: {} for theme in THEMES}

    for key, value in (overrides or {}).items():
        theme, key_path = _override_key(key)
        role = role_from_path(key_path, role_paths)
        if role is None:
            logger.warning("Ignoring override for unknown role %r", key)
            continue

        target = reference_path(value)
        if target is None or not target.startswith(("seed.", "palettes.")):
            logger.warning(
                "Ignoring override %r=%r: value must be a seed or palette reference",
                key, value,
            )
            continue
        if target not in nodes:
            logger.warning("Ignoring override %r: %s does not exist", key, value)
            continue

        if theme is None:
            shared[role] = f"{{{target}}}"
        else:
            per_theme[theme][role] = f"{{{target}}}"

    return {theme: {**shared, **per_theme[theme]} for theme in THEMES}


def _semantic_nodes(theme, assignment, overrides, role_paths):
    nodes = []
    for role in SemanticRole:
        reference = overrides.get(role, assignment[role].reference)
        path = f"semantic.{theme}.{role_path(role, role_paths)}"
        nodes.append((path, TokenNode(reference, description=role_description(role))))
    return nodes


def build_token_tree(
    primary_hex,
    neutral_hex,
    neutral_scale,
    primary_scale,
    light,
    dark,
    overrides=None,
    role_paths=None,
    prefix=None,
):
    """Assemble seed, palette and semantic tokens into one reference graph.

    Palette entries that are the seed point at the seed node, and every
    semantic token points into a palette or seed, so the only literal colors
    in the tree are the seeds, white, black and non-seed palette steps.

    Overrides replace the derived reference before a node is emitted; they are
    not checked for contrast.

    Args:
        primary_hex: Brand seed color
        neutral_hex: Tinted neutral seed color
        neutral_scale: list of ScaleStep
        primary_scale: list of ScaleStep
        light: Light theme role assignment
        dark: Dark theme role assignment
        overrides: Optional dict of role key -> reference string
        role_paths: Optional dict of SemanticRole -> dotted role key
        prefix: Optional root key replacing 'color'

    Returns:
        TokenTree
    """
    nodes = OrderedDict(_seed_nodes(primary_hex, neutral_hex))
    nodes.update(_palette_nodes("neutral", neutral_scale))
    nodes.update(_palette_nodes("primary", primary_scale))

    theme_overrides = collect_overrides(overrides, nodes, role_paths)
    for theme, assignment in (("light", light), ("dark", dark)):
        nodes.update(
            _semantic_nodes(theme, assignment, theme_overrides[theme], role_paths)
        )

    return TokenTree(root=sanitize_prefix(prefix), nodes=nodes)

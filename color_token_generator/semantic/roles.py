from collections import namedtuple
from enum import Enum


class SemanticRole(Enum):
    SURFACE_BASE = "surfaceBase"
    SURFACE = "surface"
    SURFACE_VARIANT = "surfaceVariant"
    SURFACE_INVERTED = "surfaceInverted"
    SURFACE_INVERTED_VARIANT = "surfaceInvertedVariant"

    TEXT_PRIMARY = "text.primary"
    TEXT_SECONDARY = "text.secondary"
    TEXT_TERTIARY = "text.tertiary"
    TEXT_PRIMARY_INVERSE = "text.primaryInverse"
    TEXT_SECONDARY_INVERSE = "text.secondaryInverse"
    TEXT_TERTIARY_INVERSE = "text.tertiaryInverse"

    OUTLINE_SUBTLE = "outline.subtle"
    OUTLINE_DEFAULT = "outline.default"
    OUTLINE_INTENSE = "outline.intense"
    OUTLINE_SUBTLE_INVERSE = "outline.subtleInverse"
    OUTLINE_DEFAULT_INVERSE = "outline.defaultInverse"
    OUTLINE_INTENSE_INVERSE = "outline.intenseInverse"

    SURFACE_PRIMARY = "surfacePrimary"
    SURFACE_PRIMARY_SUBTLE = "surfacePrimarySubtle"
    SURFACE_PRIMARY_INTENSE = "surfacePrimaryIntense"
    OUTLINE_PRIMARY = "outlinePrimary"
    OUTLINE_PRIMARY_SUBTLE = "outlinePrimarySubtle"
    OUTLINE_PRIMARY_INTENSE = "outlinePrimaryIntense"
    TEXT_ON_PRIMARY = "textOnPrimary"


RoleInfo = namedtuple("RoleInfo", ["token_type", "semantic_value", "token_name", "description"])

# Default naming schema: semantic.{theme}.{token_type}.{semantic_value}.{token_name}
ROLE_INFO = {
    SemanticRole.SURFACE_BASE: RoleInfo("surface", "neutral", "surfaceBase", "Foundational surface color"),
    SemanticRole.SURFACE: RoleInfo("surface", "neutral", "surfaceDefault", "Primary surface color"),
    SemanticRole.SURFACE_VARIANT: RoleInfo("surface", "neutral", "surfaceVariant", "Alternative surface color"),
    SemanticRole.SURFACE_INVERTED: RoleInfo("surface", "neutral", "surfaceInverted", "Inverted surface color for contrast"),
    SemanticRole.SURFACE_INVERTED_VARIANT: RoleInfo("surface", "neutral", "surfaceInvertedVariant", "Inverted variant surface color"),
    SemanticRole.SURFACE_PRIMARY: RoleInfo("surface", "primary", "surfacePrimary", "Primary brand surface"),
    SemanticRole.SURFACE_PRIMARY_SUBTLE: RoleInfo("surface", "primary", "surfacePrimarySubtle", "Subtle primary surface"),
    SemanticRole.SURFACE_PRIMARY_INTENSE: RoleInfo("surface", "primary", "surfacePrimaryIntense", "Intense primary surface"),
    SemanticRole.TEXT_PRIMARY: RoleInfo("text", "neutral", "textPrimary", "Primary text color"),
    SemanticRole.TEXT_SECONDARY: RoleInfo("text", "neutral", "textSecondary", "Secondary text color"),
    SemanticRole.TEXT_TERTIARY: RoleInfo("text", "neutral", "textTertiary", "Tertiary text color"),
    SemanticRole.TEXT_PRIMARY_INVERSE: RoleInfo("text", "neutral", "textPrimaryInverse", "Inverted primary text color"),
    SemanticRole.TEXT_SECONDARY_INVERSE: RoleInfo("text", "neutral", "textSecondaryInverse", "Inverted secondary text color"),
    SemanticRole.TEXT_TERTIARY_INVERSE: RoleInfo("text", "neutral", "textTertiaryInverse", "Inverted tertiary text color"),
    SemanticRole.TEXT_ON_PRIMARY: RoleInfo("text", "primary", "textDefault", "Text color on primary surfaces"),
    SemanticRole.OUTLINE_SUBTLE: RoleInfo("outline", "neutral", "outlineSubtle", "Subtle outline color"),
    SemanticRole.OUTLINE_DEFAULT: RoleInfo("outline", "neutral", "outlineDefault", "Default outline color"),
    SemanticRole.OUTLINE_INTENSE: RoleInfo("outline", "neutral", "outlineIntense", "Intense outline color"),
    SemanticRole.OUTLINE_SUBTLE_INVERSE: RoleInfo("outline", "neutral", "outlineInverseSubtle", "Inverted subtle outline color"),
    SemanticRole.OUTLINE_DEFAULT_INVERSE: RoleInfo("outline", "neutral", "outlineInverse", "Inverted outline color"),
    SemanticRole.OUTLINE_INTENSE_INVERSE: RoleInfo("outline", "neutral", "outlineInverseIntense", "Inverted intense outline color"),
    SemanticRole.OUTLINE_PRIMARY: RoleInfo("outline", "primary", "outlinePrimary", "Primary brand outline"),
    SemanticRole.OUTLINE_PRIMARY_SUBTLE: RoleInfo("outline", "primary", "outlinePrimarySubtle", "Subtle primary outline"),
    SemanticRole.OUTLINE_PRIMARY_INTENSE: RoleInfo("outline", "primary", "outlinePrimaryIntense", "Intense primary outline"),
}

# Light role -> role it takes its value from in the dark theme (symmetric)
MIRROR_PAIRS = (
    (SemanticRole.SURFACE, SemanticRole.SURFACE_INVERTED),
    (SemanticRole.SURFACE_VARIANT, SemanticRole.SURFACE_INVERTED_VARIANT),
    (SemanticRole.TEXT_PRIMARY, SemanticRole.TEXT_PRIMARY_INVERSE),
    (SemanticRole.TEXT_SECONDARY, SemanticRole.TEXT_SECONDARY_INVERSE),
    (SemanticRole.TEXT_TERTIARY, SemanticRole.TEXT_TERTIARY_INVERSE),
    (SemanticRole.OUTLINE_SUBTLE, SemanticRole.OUTLINE_SUBTLE_INVERSE),
    (SemanticRole.OUTLINE_DEFAULT, SemanticRole.OUTLINE_DEFAULT_INVERSE),
    (SemanticRole.OUTLINE_INTENSE, SemanticRole.OUTLINE_INTENSE_INVERSE),
)

MIRRORED_ROLES = {}
for _light, _dark in MIRROR_PAIRS:
    MIRRORED_ROLES[_light] = _dark
    MIRRORED_ROLES[_dark] = _light


def role_path(role, role_paths=None):
    """Dotted role key for a role, e.g. 'text.neutral.textPrimary'.

    role_paths optionally renames roles; roles it doesn't mention keep the
    default key.
    """
    if role_paths and role in role_paths:
        return role_paths[role]
    info = ROLE_INFO[role]
    return f"{info.token_type}.{info.semantic_value}.{info.token_name}"


def role_from_path(path, role_paths=None):
    """Inverse of role_path. Returns None for unknown keys."""
    for role in SemanticRole:
        if role_path(role, role_paths) == path:
            return role
    return None


def role_description(role):
    return ROLE_INFO[role].description

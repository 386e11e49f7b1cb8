import json

from ..semantic.roles import SemanticRole, role_from_path, role_path


def load_overrides(json_path):
    """Load an override map from JSON.

    The file holds a flat object of role key -> reference string, e.g.
    {"surface.neutral.surfaceBase": "{seed.black}"}. Keys starting with "_" are
    metadata and skipped, like in exported palette files.

    Returns:
        dict of role key -> reference string
    """
    with open(json_path) as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"{json_path}: overrides must be a JSON object")

    overrides = {}
    for key, value in data.items():
        if key.startswith("_"):
            continue
        if not isinstance(value, str):
            raise ValueError(f"{json_path}: override for {key!r} must be a string")
        overrides[key] = value
    return overrides


def load_role_paths(json_path):
    """Load an alternate role naming schema from JSON.

    The file maps a role, by its canonical key (e.g. "text.neutral.textPrimary")
    or its enum value (e.g. "text.primary"), to the dotted role key to emit
    instead. Roles not mentioned keep their default key. Every role must end up
    with its own key.

    Returns:
        dict of SemanticRole -> dotted role key
    """
    with open(json_path) as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"{json_path}: role mapping must be a JSON object")

    role_paths = {}
    for key, value in data.items():
        if key.startswith("_"):
            continue
        role = _lookup_role(key)
        if role is None:
            raise ValueError(f"{json_path}: unknown semantic role {key!r}")
        if not isinstance(value, str) or len(value.split(".")) != 3:
            raise ValueError(
                f"{json_path}: role key for {key!r} must look like 'type.group.name'"
            )
        role_paths[role] = value

    used = {}
    for role in SemanticRole:
        path = role_path(role, role_paths)
        if path in used:
            raise ValueError(
                f"{json_path}: {used[path].value!r} and {role.value!r} both map to {path!r}"
            )
        used[path] = role
    return role_paths


def _lookup_role(key):
    try:
        return SemanticRole(key)
    except ValueError:
        return role_from_path(key)

from .resolver import RoleAssignment, mirror_assignment, resolve_roles
from .roles import SemanticRole, role_from_path, role_path

__all__ = [
    "RoleAssignment",
    "SemanticRole",
    "mirror_assignment",
    "resolve_roles",
    "role_from_path",
    "role_path",
]

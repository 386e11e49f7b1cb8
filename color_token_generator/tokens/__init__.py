from .builder import (
    TokenNode,
    TokenTree,
    build_token_tree,
    resolve_reference,
    sanitize_prefix,
)

__all__ = [
    "TokenNode",
    "TokenTree",
    "build_token_tree",
    "resolve_reference",
    "sanitize_prefix",
]

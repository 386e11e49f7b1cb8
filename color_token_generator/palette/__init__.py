from .generator import (
    SCALE_LABELS,
    ScaleStep,
    derive_neutral_seed,
    generate_neutral_scale,
    generate_primary_scale,
    generate_scale,
)
from .loader import load_overrides, load_role_paths

__all__ = [
    "SCALE_LABELS",
    "ScaleStep",
    "derive_neutral_seed",
    "generate_neutral_scale",
    "generate_primary_scale",
    "generate_scale",
    "load_overrides",
    "load_role_paths",
]

from .color import Color, normalize_hex
from .contrast import ComplianceMode, ContrastCache, contrast_ratio
from .generator import Generation, generate_tokens
from .semantic import SemanticRole

__all__ = [
    "Color",
    "ComplianceMode",
    "ContrastCache",
    "Generation",
    "SemanticRole",
    "contrast_ratio",
    "generate_tokens",
    "normalize_hex",
]

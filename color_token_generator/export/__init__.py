from .css_export import export_css, format_css
from .json_export import export_json, format_json, tokens_to_dict
from .report import generate_readability_report

__all__ = [
    "export_css",
    "export_json",
    "format_css",
    "format_json",
    "generate_readability_report",
    "tokens_to_dict",
]

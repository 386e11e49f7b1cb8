import logging

from ..tokens.builder import resolve_reference

logger = logging.getLogger(__name__)


def css_variable_name(root, path):
    return "--" + "-".join([*root.split("."), *path.split(".")])


def format_css(tree):
    """Flatten a token tree into custom properties inside one :root block.

    References are resolved to their literal hex; nodes whose reference cannot
    be resolved are left out.
    """
    lines = []
    for path in tree.nodes:
        value = resolve_reference(tree, path)
        if value is None:
            logger.warning("Skipping %s: unresolvable reference", path)
            continue
        lines.append(f"  {css_variable_name(tree.root, path)}: {value};")
    return ":root {\n" + "\n".join(lines) + "\n}"


def export_css(tree, filepath):
    with open(filepath, "w") as f:
        f.write(format_css(tree))
        f.write("\n")

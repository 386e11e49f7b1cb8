import json


def tokens_to_dict(tree, include_descriptions=True):
    """Nest a token tree's dotted paths into design-token JSON objects.

    Leaves look like {"$value": ..., "$type": "color"}; references stay as
    "{dotted.path}" strings for consumers to resolve.
    """
    data = {}
    for path, node in tree.nodes.items():
        current = data
        *parents, leaf = [*tree.root.split("."), *path.split(".")]
        for part in parents:
            current = current.setdefault(part, {})
        token = {"$value": node.value, "$type": node.type}
        if include_descriptions and node.description:
            token["$description"] = node.description
        current[leaf] = token
    return data


def format_json(tree, include_descriptions=True, metadata=None):
    data = tokens_to_dict(tree, include_descriptions=include_descriptions)
    if metadata:
        data["$extensions"] = {"color-token-generator": metadata}
    return json.dumps(data, indent=2)


def export_json(tree, filepath, include_descriptions=True, metadata=None):
    """Export a token tree as design-token JSON.

    Args:
        tree: The TokenTree to write
        filepath: Output file path
        include_descriptions: Whether to emit "$description" for semantic tokens
        metadata: Optional dict (seed, tint, compliance...) stored under "$extensions"
    """
    with open(filepath, "w") as f:
        f.write(format_json(tree, include_descriptions, metadata))
        f.write("\n")

"""Resolve name - find the declaration a name denotes from a given scope."""

from ..parser import RunContext, entity_to_dict, language_for_filename, parse_file
from ..resolver import get_object_name


def resolve_name(
    content: str,
    filename: str,
    name: str,
    scope: str = "",
    directory: str = "",
    verbosity: int = 0
) -> dict:
    """Look name up outward from a container, closest declaration first.

    Args:
        content: Source text of the file
        filename: File name (e.g., 'main.py')
        name: Name to resolve
        scope: Qualified name of the starting container; the file when empty
        directory: Directory relative to the documentation root
        verbosity: Run verbosity

    Returns:
        Dict with "found" and, when found, the resolved entity
    """
    if not language_for_filename(filename):
        return {"error": f"Unsupported file type: {filename}"}

    tree = parse_file(content, filename, directory, RunContext(verbosity=verbosity))

    start = tree.file if not scope else tree.find_container(scope)
    if start is None:
        return {"error": f"Scope not found: {scope}"}

    entity = get_object_name(tree, start, name)
    result = {
        "name": name,
        "scope": tree.qualified_name(start),
        "found": entity is not None,
    }
    if entity is not None:
        result["entity"] = entity_to_dict(tree, entity, recursive=False)
    return result

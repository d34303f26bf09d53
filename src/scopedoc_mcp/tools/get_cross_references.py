"""Get cross references - objects, calls and variables used by every variable group."""

from ..parser import RunContext, language_for_filename, parse_file, walk_containers
from ..resolver import cross_references


def get_cross_references(
    content: str,
    filename: str,
    directory: str = "",
    verbosity: int = 0
) -> dict:
    """Compute per-container cross references for a source file.

    Args:
        content: Source text of the file
        filename: File name (e.g., 'main.py')
        directory: Directory relative to the documentation root
        verbosity: Run verbosity

    Returns:
        Dict with one entry per variable-name group of every container
    """
    if not language_for_filename(filename):
        return {"error": f"Unsupported file type: {filename}"}

    tree = parse_file(content, filename, directory, RunContext(verbosity=verbosity))

    def _ref(entity) -> dict:
        return {
            "name": entity.name,
            "kind": entity.kind,
            "qualified_name": tree.qualified_name(entity),
        }

    references = []
    for container in walk_containers(tree.file):
        for ref in cross_references(tree, container):
            references.append({
                "scope": tree.qualified_name(container),
                "name": ref.name,
                "values": ref.values,
                "objects": [_ref(e) for e in ref.objects],
                "calls": [_ref(e) for e in ref.calls],
                "variables": [_ref(e) for e in ref.variables],
            })

    return {
        "file": tree.file.filename,
        "qualified_name": tree.qualified_name(tree.file),
        "references": references,
    }

"""Get file outline - the nested scope tree of one source file."""

from ..parser import RunContext, entity_to_dict, iter_children, language_for_filename, parse_file


def get_file_outline(
    content: str,
    filename: str,
    directory: str = "",
    verbosity: int = 0
) -> dict:
    """Parse source text and return its entities with hierarchical structure.

    Args:
        content: Source text of the file
        filename: File name (e.g., 'main.py'), used for identity and language
        directory: Directory relative to the documentation root
        verbosity: Run verbosity; 2 or more logs a per-file summary

    Returns:
        Dict with the file identity, its own comments and its entities
    """
    language = language_for_filename(filename)
    if not language:
        return {"error": f"Unsupported file type: {filename}"}

    ctx = RunContext(verbosity=verbosity)
    tree = parse_file(content, filename, directory, ctx)

    return {
        "file": tree.file.filename,
        "directory": tree.file.directory,
        "path": tree.file.path,
        "language": language,
        "qualified_name": tree.qualified_name(tree.file),
        "comments": [c.text for c in tree.file.comments],
        "symbols": [entity_to_dict(tree, c) for c in iter_children(tree.file)],
        "stats": dict(ctx.counters),
    }

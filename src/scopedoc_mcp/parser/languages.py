"""Language registry with the LanguageSpec used by the line scanner."""

from dataclasses import dataclass


@dataclass
class LanguageSpec:
    """Constants the recognizers and the balance tracker depend on."""
    # Short language name
    name: str

    # Block keywords that open a Logic container
    logic_keywords: tuple[str, ...]

    # Keywords captured as the "name" of a value statement
    # e.g. "return x" -> Variable(name="return", assignment="x")
    value_keywords: tuple[str, ...]

    # Operators recognized between a variable name and its assignment
    assignment_operators: tuple[str, ...]

    # Trailing characters that continue a statement on the next line
    dangling_chars: str

    # Sequences that open/close a block comment
    block_comment_quotes: tuple[str, ...]

    # Whole statements that never produce an entity
    inert_statements: tuple[str, ...]


# File extension to language mapping
LANGUAGE_EXTENSIONS = {
    ".py": "python",
    ".pyw": "python",
}


PYTHON_SPEC = LanguageSpec(
    name="python",
    logic_keywords=("for", "if", "try", "except"),
    value_keywords=("yield", "return", "assert"),
    assignment_operators=("+=", "-=", "*=", "/=", "%=", "&=", "|=", "="),
    dangling_chars=",.+-&|*/\\",
    block_comment_quotes=('"""', "'''"),
    inert_statements=("pass", "break", "continue", "else:", "finally:", "..."),
)


LANGUAGE_REGISTRY = {
    "python": PYTHON_SPEC,
}


def language_for_filename(filename: str) -> str:
    """Return the registered language for a file name, or "" if unsupported."""
    dot = filename.rfind(".")
    if dot == -1:
        return ""
    return LANGUAGE_EXTENSIONS.get(filename[dot:].lower(), "")

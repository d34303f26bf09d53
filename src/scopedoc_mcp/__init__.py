"""scopedoc-mcp - Scope-aware source parsing and cross-referencing for documentation."""

__version__ = "0.1.0"

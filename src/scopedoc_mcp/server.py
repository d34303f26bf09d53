"""MCP server for scopedoc-mcp."""

import asyncio
import json
import logging
import os
import sys

from mcp.server import Server
from mcp.types import Tool, TextContent

from .tools.get_file_outline import get_file_outline
from .tools.resolve_name import resolve_name
from .tools.get_cross_references import get_cross_references


logger = logging.getLogger("scopedoc.server")

# Create server
server = Server("scopedoc-mcp")


def _verbosity() -> int:
    """Read SCOPEDOC_VERBOSITY; anything unparsable counts as 0."""
    value = os.environ.get("SCOPEDOC_VERBOSITY", "0")
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Ignoring invalid SCOPEDOC_VERBOSITY: {value}")
        return 0


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List all available tools."""
    return [
        Tool(
            name="get_file_outline",
            description="Parse a source file and return its nested classes, methods, logic blocks, variables and imports with qualified names, parameters, assignments and comments.",
            inputSchema={
                "type": "object",
                "properties": {
                    "content": {
                        "type": "string",
                        "description": "Source text of the file"
                    },
                    "filename": {
                        "type": "string",
                        "description": "File name (e.g., 'main.py'); the extension selects the language"
                    },
                    "directory": {
                        "type": "string",
                        "description": "Directory of the file relative to the documentation root (e.g., 'src/utils')",
                        "default": ""
                    }
                },
                "required": ["content", "filename"]
            }
        ),
        Tool(
            name="resolve_name",
            description="Resolve a name to its declaration, searching outward from a scope. The closest declaration wins.",
            inputSchema={
                "type": "object",
                "properties": {
                    "content": {
                        "type": "string",
                        "description": "Source text of the file"
                    },
                    "filename": {
                        "type": "string",
                        "description": "File name (e.g., 'main.py')"
                    },
                    "name": {
                        "type": "string",
                        "description": "Name to resolve"
                    },
                    "scope": {
                        "type": "string",
                        "description": "Qualified name of the starting container from get_file_outline; the file when empty",
                        "default": ""
                    },
                    "directory": {
                        "type": "string",
                        "description": "Directory of the file relative to the documentation root",
                        "default": ""
                    }
                },
                "required": ["content", "filename", "name"]
            }
        ),
        Tool(
            name="get_cross_references",
            description="For every variable group in every scope, list the classes referenced, the calls made and the variables referenced.",
            inputSchema={
                "type": "object",
                "properties": {
                    "content": {
                        "type": "string",
                        "description": "Source text of the file"
                    },
                    "filename": {
                        "type": "string",
                        "description": "File name (e.g., 'main.py')"
                    },
                    "directory": {
                        "type": "string",
                        "description": "Directory of the file relative to the documentation root",
                        "default": ""
                    }
                },
                "required": ["content", "filename"]
            }
        ),
    ]


@server.call_tool()
async def call_tool(name: str, arguments: dict) -> list[TextContent]:
    """Handle tool calls."""
    verbosity = _verbosity()

    try:
        if name == "get_file_outline":
            result = get_file_outline(
                content=arguments["content"],
                filename=arguments["filename"],
                directory=arguments.get("directory", ""),
                verbosity=verbosity
            )
        elif name == "resolve_name":
            result = resolve_name(
                content=arguments["content"],
                filename=arguments["filename"],
                name=arguments["name"],
                scope=arguments.get("scope", ""),
                directory=arguments.get("directory", ""),
                verbosity=verbosity
            )
        elif name == "get_cross_references":
            result = get_cross_references(
                content=arguments["content"],
                filename=arguments["filename"],
                directory=arguments.get("directory", ""),
                verbosity=verbosity
            )
        else:
            result = {"error": f"Unknown tool: {name}"}

        return [TextContent(type="text", text=json.dumps(result, indent=2))]

    except Exception as e:
        logger.exception(f"Tool {name} failed")
        return [TextContent(type="text", text=json.dumps({"error": str(e)}, indent=2))]


def configure_logging():
    """Send logs to stderr at SCOPEDOC_LOG_LEVEL; stdout carries the MCP stream."""
    level_name = os.environ.get("SCOPEDOC_LOG_LEVEL", "WARNING").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        stream=sys.stderr,
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


async def run_server():
    """Run the MCP server."""
    from mcp.server.stdio import stdio_server

    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options()
        )


def main():
    """Main entry point."""
    configure_logging()
    asyncio.run(run_server())


if __name__ == "__main__":
    main()

"""MCP tool definitions for the Svelte docs server.

This module contains the tool definitions returned by the tools/list
method. Each definition includes the JSON schema of its input.
"""

from ..models.enums import ToolName

SERVER_NAME = "svelte-docs-server"
SERVER_DESCRIPTION = "Provides access to Svelte documentation"
PROTOCOL_VERSION = "2024-11-05"

CAPABILITIES: dict = {
    "resources": {"listChanged": False},
    "tools": {"listChanged": False},
}

TOOL_DEFINITIONS: list[dict] = [
    {
        "name": ToolName.SEARCH_DOCS.value,
        "description": "Search Svelte documentation",
        "inputSchema": {
            "type": "object",
            "properties": {
                "query": {"type": "string", "description": "Search query"},
                "limit": {
                    "type": "integer",
                    "minimum": 1,
                    "maximum": 20,
                    "description": "Maximum number of matching lines (default: 3)",
                },
            },
            "required": ["query"],
        },
    },
]

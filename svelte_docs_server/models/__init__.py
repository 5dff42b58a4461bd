"""Pydantic models for the Svelte docs MCP server.

This module re-exports all models. Import from submodules directly for
cleaner imports:

    from svelte_docs_server.models.enums import ToolName, SearchStatus
"""

# ============ ENUMS ============
from .enums import ResourcePart, SearchStatus, ToolName

# ============ REQUEST MODELS ============
from .requests import CallToolParams, ReadResourceParams, SearchDocsParams

# ============ RESPONSE MODELS ============
from .responses import (
    HealthResponse,
    ListResourcesResult,
    ReadResourceResult,
    ReadyResponse,
    ResourceContents,
    ResourceInfo,
    TextContent,
    ToolResult,
)

__all__ = [
    # Enums
    "ResourcePart",
    "SearchStatus",
    "ToolName",
    # Requests
    "CallToolParams",
    "ReadResourceParams",
    "SearchDocsParams",
    # Responses
    "HealthResponse",
    "ListResourcesResult",
    "ReadResourceResult",
    "ReadyResponse",
    "ResourceContents",
    "ResourceInfo",
    "TextContent",
    "ToolResult",
]

"""Enumeration types for the Svelte docs MCP server."""

from enum import StrEnum


class ToolName(StrEnum):
    """Available MCP tools."""

    SEARCH_DOCS = "search_docs"


class SearchStatus(StrEnum):
    """Outcome of a documentation search."""

    OK = "ok"
    NO_MATCHES = "no_matches"  # Search ran, nothing matched
    INVALID_QUERY = "invalid_query"  # No usable tokens, nothing was scored


class ResourcePart(StrEnum):
    """Which part of a section a resource URI addresses."""

    HEADER = "header"
    CONTENT = "content"

"""Request models (Pydantic *Params classes) for the Svelte docs MCP server."""

from pydantic import BaseModel, Field


class SearchDocsParams(BaseModel):
    """Parameters for the search_docs tool."""

    query: str = Field(..., description="Search query")
    limit: int | None = Field(
        default=None,
        ge=1,
        le=20,
        description="Maximum number of matching lines (server default when omitted)",
    )


class ReadResourceParams(BaseModel):
    """Parameters for resources/read."""

    uri: str = Field(..., description="Resource URI, e.g. svelte:///section/<id>/content")


class CallToolParams(BaseModel):
    """Parameters for tools/call."""

    name: str = Field(..., description="Tool name")
    arguments: dict = Field(default_factory=dict, description="Tool arguments")

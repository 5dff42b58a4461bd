"""Response models for the Svelte docs MCP server."""

from datetime import datetime

from pydantic import BaseModel, Field

# ============ MCP CONTENT MODELS ============


class TextContent(BaseModel):
    """A text content item in a tools/call result."""

    type: str = "text"
    text: str


class ToolResult(BaseModel):
    """Result of a tool handler, serialized as the tools/call result."""

    content: list[TextContent] = Field(default_factory=list)
    isError: bool = Field(default=False, description="Whether the tool reported an error")

    @classmethod
    def from_lines(cls, lines: list[str]) -> "ToolResult":
        return cls(content=[TextContent(text=line) for line in lines])


class ResourceInfo(BaseModel):
    """An entry of resources/list."""

    uri: str
    mimeType: str = "text/plain"
    name: str
    description: str


class ResourceContents(BaseModel):
    """A single item of a resources/read result."""

    uri: str
    mimeType: str = "text/plain"
    text: str


class ListResourcesResult(BaseModel):
    resources: list[ResourceInfo] = Field(default_factory=list)


class ReadResourceResult(BaseModel):
    contents: list[ResourceContents] = Field(default_factory=list)


# ============ HEALTH MODELS ============


class HealthResponse(BaseModel):
    """Liveness check response."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Server version")
    timestamp: datetime = Field(..., description="Current server time")


class ReadyResponse(BaseModel):
    """Readiness check response."""

    status: str = Field(..., description="ready or not_ready")
    version: str = Field(..., description="Server version")
    checks: dict[str, bool] = Field(default_factory=dict, description="Individual check results")
    sections: int = Field(default=0, ge=0, description="Number of loaded sections")
    loaded_at: datetime | None = Field(default=None, description="When documentation was last loaded")

"""Tool and resource handlers for the documentation engine.

Each handler is a standalone async function that takes:
- params: dict[str, Any] - Parameters from the MCP request
- ctx: HandlerContext - Published index and request defaults

And returns a pydantic result model.
"""

from .base import HandlerContext, HandlerFunc
from .resources import (
    handle_list_resources,
    handle_read_resource,
    parse_section_uri,
    section_uri,
)
from .search import handle_search_docs

__all__ = [
    # Base
    "HandlerContext",
    "HandlerFunc",
    # Resource handlers
    "handle_list_resources",
    "handle_read_resource",
    "parse_section_uri",
    "section_uri",
    # Tool handlers
    "handle_search_docs",
]

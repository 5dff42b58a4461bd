"""MCP (Model Context Protocol) transport module.

This module contains components for the MCP transports:
- Tool definitions and server capabilities
- JSON-RPC 2.0 framing and error codes

The dispatcher lives in .transport and the stdio loop in .stdio; import
them directly, they depend on the engine and services.
"""

from ..engine.errors import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
)
from .jsonrpc import (
    JsonRpcRequest,
    error_response,
    parse_request,
    success_response,
)
from .tool_defs import TOOL_DEFINITIONS

__all__ = [
    # Tool definitions
    "TOOL_DEFINITIONS",
    # JSON-RPC framing
    "JsonRpcRequest",
    "parse_request",
    "success_response",
    "error_response",
    "PARSE_ERROR",
    "INVALID_REQUEST",
    "METHOD_NOT_FOUND",
    "INVALID_PARAMS",
    "INTERNAL_ERROR",
]

"""MCP JSON-RPC dispatcher shared by the stdio and HTTP transports."""

import logging
from typing import Any

from pydantic import ValidationError

from .. import __version__
from ..engine.errors import (
    DocsServerError,
    InvalidParams,
    InvalidRequest,
    MethodNotFound,
    UnknownTool,
)
from ..engine.handlers import (
    HandlerFunc,
    handle_list_resources,
    handle_read_resource,
    handle_search_docs,
)
from ..models import CallToolParams, ToolName
from ..services import DocumentationStore
from .jsonrpc import error_response, parse_request, request_id, success_response
from .tool_defs import (
    CAPABILITIES,
    PROTOCOL_VERSION,
    SERVER_DESCRIPTION,
    SERVER_NAME,
    TOOL_DEFINITIONS,
)

logger = logging.getLogger(__name__)

TOOL_HANDLERS: dict[ToolName, HandlerFunc] = {
    ToolName.SEARCH_DOCS: handle_search_docs,
}


# ============ METHOD HANDLERS ============


async def _initialize(params: dict[str, Any], store: DocumentationStore) -> dict:
    client_info = params.get("clientInfo", {})
    logger.info(f"Initializing MCP session with client: {client_info.get('name', 'unknown')}")
    return {
        "protocolVersion": PROTOCOL_VERSION,
        "capabilities": CAPABILITIES,
        "serverInfo": {
            "name": SERVER_NAME,
            "version": __version__,
            "description": SERVER_DESCRIPTION,
        },
    }


async def _ping(params: dict[str, Any], store: DocumentationStore) -> dict:
    return {}


async def _list_resources(params: dict[str, Any], store: DocumentationStore) -> dict:
    result = await handle_list_resources(params, store.context())
    return result.model_dump()


async def _read_resource(params: dict[str, Any], store: DocumentationStore) -> dict:
    result = await handle_read_resource(params, store.context())
    return result.model_dump()


async def _list_tools(params: dict[str, Any], store: DocumentationStore) -> dict:
    return {"tools": TOOL_DEFINITIONS}


async def _call_tool(params: dict[str, Any], store: DocumentationStore) -> dict:
    call = CallToolParams.model_validate(params)
    try:
        handler = TOOL_HANDLERS[ToolName(call.name)]
    except ValueError:
        raise UnknownTool(call.name) from None
    result = await handler(call.arguments, store.context())
    return result.model_dump()


METHODS = {
    "initialize": _initialize,
    "ping": _ping,
    "resources/list": _list_resources,
    "resources/read": _read_resource,
    "tools/list": _list_tools,
    "tools/call": _call_tool,
}


# ============ DISPATCH ============


async def handle_message(body: Any, store: DocumentationStore) -> dict | None:
    """Handle a single JSON-RPC message.

    Args:
        body: Decoded JSON-RPC message
        store: Documentation store serving the request

    Returns:
        Response dict, or None for notifications
    """
    try:
        request = parse_request(body)
    except DocsServerError as e:
        return error_response(request_id(body), e)

    method = request.method
    if request.is_notification:
        logger.debug(f"Received notification: {method}")
        return None

    handler = METHODS.get(method)
    if handler is None:
        return error_response(request.id, MethodNotFound(method))

    try:
        return success_response(request.id, await handler(request.params, store))
    except DocsServerError as e:
        logger.info(f"{method} failed: {e}")
        return error_response(request.id, e)
    except ValidationError as e:
        error = InvalidParams(f"Invalid parameter: {e.errors()[0]['msg']}")
        return error_response(request.id, error)
    except Exception as e:
        logger.error(f"[MCP Error] {method}: {e}", exc_info=True)
        return error_response(request.id, DocsServerError("An internal server error occurred"))


async def handle_payload(body: Any, store: DocumentationStore) -> dict | list[dict] | None:
    """Handle a single message or a batch.

    Returns:
        A response, a list of responses for a batch, or None when nothing
        needs to be sent back
    """
    if isinstance(body, list):
        if not body:
            return error_response(None, InvalidRequest("Invalid request: empty batch"))
        responses = []
        for message in body:
            response = await handle_message(message, store)
            if response:  # Skip notifications
                responses.append(response)
        return responses or None
    return await handle_message(body, store)

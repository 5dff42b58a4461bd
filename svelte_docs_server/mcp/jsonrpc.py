"""JSON-RPC 2.0 framing for the MCP transports.

Incoming messages are checked into a ``JsonRpcRequest`` before dispatch.
Outgoing errors are always built from a ``DocsServerError``, whose
``code`` is the JSON-RPC error code the client sees.
"""

from dataclasses import dataclass, field
from typing import Any

from ..engine.errors import DocsServerError, InvalidParams, InvalidRequest

JSONRPC_VERSION = "2.0"


@dataclass
class JsonRpcRequest:
    """A well-formed request, or a notification when ``id`` is None."""

    method: str
    id: Any = None
    params: dict[str, Any] = field(default_factory=dict)

    @property
    def is_notification(self) -> bool:
        return self.id is None


def request_id(body: Any) -> Any:
    """Best-effort id of a message, for error responses."""
    return body.get("id") if isinstance(body, dict) else None


def parse_request(body: Any) -> JsonRpcRequest:
    """Check the envelope of a decoded message.

    Args:
        body: Decoded JSON value of one message

    Returns:
        The request, with ``params`` defaulting to an empty object

    Raises:
        InvalidRequest: If the message is not an object with a string method
        InvalidParams: If params is present but is not an object
    """
    if not isinstance(body, dict) or not isinstance(body.get("method"), str):
        raise InvalidRequest()

    params = body.get("params")
    if params is None:
        params = {}
    elif not isinstance(params, dict):
        # Positional params are not used by any MCP method
        raise InvalidParams("Invalid parameter: params must be an object")

    return JsonRpcRequest(method=body["method"], id=body.get("id"), params=params)


def success_response(id: Any, result: Any) -> dict:
    return {"jsonrpc": JSONRPC_VERSION, "id": id, "result": result}


def error_response(id: Any, error: DocsServerError) -> dict:
    """Render a server error as a JSON-RPC error response.

    Args:
        id: Request id (None when it could not be read)
        error: The error to report; its code and message are sent as-is

    Returns:
        JSON-RPC 2.0 error response dict
    """
    return {
        "jsonrpc": JSONRPC_VERSION,
        "id": id,
        "error": {"code": error.code, "message": str(error)},
    }

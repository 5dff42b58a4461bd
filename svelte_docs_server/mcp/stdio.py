"""MCP over stdio: newline-delimited JSON-RPC on stdin/stdout."""

import asyncio
import json
import logging
import sys
from typing import TextIO

from ..engine.errors import ParseError
from ..services import DocumentationStore
from .jsonrpc import error_response
from .transport import handle_payload

logger = logging.getLogger(__name__)


def _write(stream: TextIO, payload: dict | list) -> None:
    stream.write(json.dumps(payload) + "\n")
    stream.flush()


async def serve_stdio(
    store: DocumentationStore,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> None:
    """Serve JSON-RPC requests until stdin is closed."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    logger.info("Starting MCP server in stdio mode")

    while True:
        line = await asyncio.to_thread(stdin.readline)
        if not line:
            break
        if not line.strip():
            continue

        try:
            body = json.loads(line)
        except json.JSONDecodeError as e:
            _write(stdout, error_response(None, ParseError(f"Parse error: {e}")))
            continue

        response = await handle_payload(body, store)
        if response:  # Don't send responses for notifications
            _write(stdout, response)

    logger.info("stdin closed, stopping MCP server")

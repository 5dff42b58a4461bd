import io
import json

import pytest

from svelte_docs_server.mcp import PARSE_ERROR
from svelte_docs_server.mcp.stdio import serve_stdio


@pytest.mark.asyncio
async def test_serve_stdio_round_trip(store):
    requests = [
        json.dumps({"jsonrpc": "2.0", "id": 1, "method": "initialize", "params": {}}),
        json.dumps({"jsonrpc": "2.0", "method": "notifications/initialized"}),
        "",
        "{broken",
        json.dumps(
            {
                "jsonrpc": "2.0",
                "id": 2,
                "method": "resources/read",
                "params": {"uri": "svelte:///section/stores/content"},
            }
        ),
    ]
    stdin = io.StringIO("\n".join(requests) + "\n")
    stdout = io.StringIO()

    await serve_stdio(store, stdin=stdin, stdout=stdout)

    responses = [json.loads(line) for line in stdout.getvalue().splitlines()]
    assert len(responses) == 3
    assert responses[0]["result"]["serverInfo"]["name"] == "svelte-docs-server"
    assert responses[1]["id"] is None
    assert responses[1]["error"]["code"] == PARSE_ERROR
    assert responses[2]["result"]["contents"][0]["text"] == "A store holds state outside components."

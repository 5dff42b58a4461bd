import pytest
from fastapi.testclient import TestClient

from svelte_docs_server.config import Settings
from svelte_docs_server.mcp import PARSE_ERROR
from svelte_docs_server.server import create_app
from svelte_docs_server.services import DocumentationStore


@pytest.fixture
def client(store):
    with TestClient(create_app(store)) as client:
        yield client


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "healthy"
    assert "x-request-id" in r.headers


def test_ready_reports_sections(client, store):
    r = client.get("/ready")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ready"
    assert body["sections"] == len(store.index)
    assert body["checks"] == {"documentation": True}


def test_ready_before_load():
    # No lifespan: the store is never loaded
    client = TestClient(create_app(DocumentationStore(Settings())))
    r = client.get("/ready")
    assert r.status_code == 503
    assert r.json()["status"] == "not_ready"


def test_mcp_tools_call(client):
    r = client.post(
        "/mcp",
        json={
            "jsonrpc": "2.0",
            "id": 1,
            "method": "tools/call",
            "params": {"name": "search_docs", "arguments": {"query": "router"}},
        },
    )
    assert r.status_code == 200
    assert r.json()["result"]["content"] == [{"type": "text", "text": "[# Routing] Use a router."}]


def test_mcp_batch(client):
    r = client.post(
        "/mcp",
        json=[
            {"jsonrpc": "2.0", "id": 1, "method": "ping"},
            {"jsonrpc": "2.0", "id": 2, "method": "resources/list"},
        ],
    )
    assert r.status_code == 200
    assert [item["id"] for item in r.json()] == [1, 2]


def test_mcp_notification_returns_204(client):
    r = client.post("/mcp", json={"jsonrpc": "2.0", "method": "notifications/initialized"})
    assert r.status_code == 204


def test_mcp_parse_error(client):
    r = client.post("/mcp", content=b"{not json", headers={"content-type": "application/json"})
    assert r.status_code == 400
    assert r.json()["error"]["code"] == PARSE_ERROR

import httpx
import pytest

from svelte_docs_server.engine.errors import EmptyDocument, FetchExhausted
from svelte_docs_server.services import fetch_documentation

URL = "https://docs.example.test/llms-small.txt"
DOC = "# Routing\nUse a router."


def _transport(responses: list) -> tuple[httpx.MockTransport, list]:
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        outcome = responses[min(len(calls), len(responses)) - 1]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    return httpx.MockTransport(handler), calls


@pytest.mark.asyncio
async def test_fetch_success():
    transport, calls = _transport([httpx.Response(200, text=DOC)])
    index = await fetch_documentation(URL, retry_delay=0, transport=transport)
    assert len(calls) == 1
    assert str(calls[0].url) == URL
    assert index.source_url == URL
    assert index.get("routing").content == ["Use a router."]


@pytest.mark.asyncio
async def test_fetch_retries_transient_failures():
    transport, calls = _transport(
        [
            httpx.Response(503),
            httpx.ConnectTimeout("timed out"),
            httpx.Response(200, text=DOC),
        ]
    )
    index = await fetch_documentation(URL, max_attempts=3, retry_delay=0, transport=transport)
    assert len(calls) == 3
    assert len(index) == 2


@pytest.mark.asyncio
async def test_fetch_exhausted_after_max_attempts():
    transport, calls = _transport([httpx.Response(500)])
    with pytest.raises(FetchExhausted) as exc_info:
        await fetch_documentation(URL, max_attempts=3, retry_delay=0, transport=transport)
    assert len(calls) == 3
    assert exc_info.value.attempts == 3
    assert isinstance(exc_info.value.last_error, httpx.HTTPStatusError)


@pytest.mark.asyncio
async def test_fetch_empty_body_fails_attempt():
    transport, calls = _transport([httpx.Response(200, text="")])
    with pytest.raises(FetchExhausted) as exc_info:
        await fetch_documentation(URL, max_attempts=2, retry_delay=0, transport=transport)
    assert len(calls) == 2
    assert isinstance(exc_info.value.last_error, EmptyDocument)


@pytest.mark.asyncio
async def test_fetch_whitespace_body_fails_segmentation():
    transport, _ = _transport([httpx.Response(200, text="\n  \n")])
    with pytest.raises(FetchExhausted) as exc_info:
        await fetch_documentation(URL, max_attempts=1, retry_delay=0, transport=transport)
    assert isinstance(exc_info.value.last_error, EmptyDocument)

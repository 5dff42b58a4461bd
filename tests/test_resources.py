import pytest

from svelte_docs_server.engine.errors import (
    InvalidResourceUri,
    SectionContentEmpty,
    SectionNotFound,
)
from svelte_docs_server.engine.handlers import (
    HandlerContext,
    handle_list_resources,
    handle_read_resource,
    parse_section_uri,
)
from svelte_docs_server.models import ResourcePart


@pytest.fixture
def ctx(index) -> HandlerContext:
    return HandlerContext(index=index, resource_scheme="svelte")


def test_parse_section_uri():
    assert parse_section_uri("svelte:///section/routing", "svelte") == ("routing", ResourcePart.HEADER)
    assert parse_section_uri("svelte:///section/routing/content", "svelte") == (
        "routing",
        ResourcePart.CONTENT,
    )


@pytest.mark.parametrize(
    "uri",
    [
        "svelte:///routing",
        "svelte:///section/",
        "svelte:///section/routing/header",
        "other:///section/routing",
    ],
)
def test_parse_section_uri_rejects_other_forms(uri):
    with pytest.raises(InvalidResourceUri):
        parse_section_uri(uri, "svelte")


@pytest.mark.asyncio
async def test_list_resources_has_header_and_content_entries(ctx, index):
    result = await handle_list_resources({}, ctx)
    assert len(result.resources) == 2 * len(index)
    first, second = result.resources[:2]
    assert first.uri == "svelte:///section/start-of-svelte-documentation"
    assert first.name == "# Start of Svelte documentation"
    assert first.description == "Documentation section: # Start of Svelte documentation"
    assert second.uri == "svelte:///section/start-of-svelte-documentation/content"
    assert second.name == "# Start of Svelte documentation Content"
    assert second.mimeType == "text/plain"


@pytest.mark.asyncio
async def test_read_resource_header_and_content(ctx):
    header = await handle_read_resource({"uri": "svelte:///section/routing"}, ctx)
    assert header.contents[0].text == "# Routing"

    content = await handle_read_resource({"uri": "svelte:///section/routing/content"}, ctx)
    assert content.contents[0].uri == "svelte:///section/routing/content"
    assert content.contents[0].text == "Use a router.\nRoutes live in src/routes."


@pytest.mark.asyncio
async def test_read_resource_unknown_section(ctx):
    with pytest.raises(SectionNotFound, match="missing"):
        await handle_read_resource({"uri": "svelte:///section/missing"}, ctx)


@pytest.mark.asyncio
async def test_read_resource_empty_content(ctx):
    header = await handle_read_resource({"uri": "svelte:///section/empty"}, ctx)
    assert header.contents[0].text == "# Empty"

    with pytest.raises(SectionContentEmpty):
        await handle_read_resource({"uri": "svelte:///section/empty/content"}, ctx)

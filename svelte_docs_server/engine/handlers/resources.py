"""Resource handlers for documentation sections.

Handles:
- resources/list: Two resources per section (header and content)
- resources/read: Resolve a section URI to its header or joined content

URI format: ``<scheme>:///section/<id>`` for the header and
``<scheme>:///section/<id>/content`` for the content lines.
"""

import re
from typing import Any

from ...models import (
    ListResourcesResult,
    ReadResourceParams,
    ReadResourceResult,
    ResourceContents,
    ResourceInfo,
    ResourcePart,
)
from ..errors import InvalidResourceUri, SectionContentEmpty, SectionNotFound
from .base import HandlerContext


def section_uri(scheme: str, section_id: str, part: ResourcePart = ResourcePart.HEADER) -> str:
    uri = f"{scheme}:///section/{section_id}"
    return f"{uri}/content" if part == ResourcePart.CONTENT else uri


def parse_section_uri(uri: str, scheme: str) -> tuple[str, ResourcePart]:
    """Split a section URI into (section id, addressed part).

    Raises:
        InvalidResourceUri: If the URI does not have the section form
    """
    pattern = rf"^{re.escape(scheme)}:///section/([^/]+)(/content)?$"
    match = re.match(pattern, uri)
    if not match:
        raise InvalidResourceUri(uri)
    part = ResourcePart.CONTENT if match.group(2) else ResourcePart.HEADER
    return match.group(1), part


async def handle_list_resources(
    params: dict[str, Any],
    ctx: HandlerContext,
) -> ListResourcesResult:
    """List every section as a header resource and a content resource."""
    resources: list[ResourceInfo] = []
    for section in ctx.index.sections:
        resources.append(
            ResourceInfo(
                uri=section_uri(ctx.resource_scheme, section.id),
                name=section.header,
                description=f"Documentation section: {section.header}",
            )
        )
        resources.append(
            ResourceInfo(
                uri=section_uri(ctx.resource_scheme, section.id, ResourcePart.CONTENT),
                name=f"{section.header} Content",
                description=f"Content for section: {section.header}",
            )
        )
    return ListResourcesResult(resources=resources)


async def handle_read_resource(
    params: dict[str, Any],
    ctx: HandlerContext,
) -> ReadResourceResult:
    """Read a section header or its content.

    Args:
        params: Dict containing:
            - uri: Section resource URI

    Returns:
        ReadResourceResult with a single text item

    Raises:
        InvalidResourceUri: Unrecognized URI form
        SectionNotFound: Unknown section id
        SectionContentEmpty: Content read of a section without lines
    """
    args = ReadResourceParams.model_validate(params)
    section_id, part = parse_section_uri(args.uri, ctx.resource_scheme)

    section = ctx.index.get(section_id)
    if section is None:
        raise SectionNotFound(section_id)

    if part == ResourcePart.CONTENT:
        if not section.content:
            raise SectionContentEmpty(section.id, section.header)
        text = section.text
    else:
        text = section.header

    return ReadResourceResult(contents=[ResourceContents(uri=args.uri, text=text)])

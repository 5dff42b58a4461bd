"""Search tool handler.

Handles:
- search_docs: Keyword search over documentation lines
"""

import logging
from typing import Any

from ...models import SearchDocsParams, ToolResult
from ..scoring import search
from .base import HandlerContext

logger = logging.getLogger(__name__)


async def handle_search_docs(
    params: dict[str, Any],
    ctx: HandlerContext,
) -> ToolResult:
    """Search the documentation.

    Args:
        params: Dict containing:
            - query: Free-text search query
            - limit: Optional maximum number of lines

    Returns:
        ToolResult with one text item per matching line, or a single
        prompt / no-matches message

    Raises:
        pydantic.ValidationError: If the arguments are malformed
    """
    args = SearchDocsParams.model_validate(params)
    limit = args.limit or ctx.search_limit

    outcome = search(ctx.index.sections, args.query, limit=limit)
    logger.info(f"search_docs query='{args.query}' status={outcome.status} hits={len(outcome.hits)}")

    return ToolResult.from_lines(outcome.messages)

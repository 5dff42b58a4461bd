"""Documentation search.

Ranks content lines against a free-text query in two passes and merges
them:

1. Exact-match pass: every line with a positive exact score (the better
   of its header score and its own score), best first.
2. Per-token pass: for each query token, the lines containing it,
   weighted by occurrence count (boosted when the owning header contains
   the token), at most ``RESULTS_PER_TOKEN`` per token.

The concatenation is deduplicated by line text (first occurrence wins)
and truncated to ``limit``. Sorting is stable, so ties keep document
order.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from ...models.enums import SearchStatus
from ..core.document import Section
from .constants import (
    DEFAULT_RESULT_LIMIT,
    INVALID_QUERY_MESSAGE,
    NO_MATCHES_MESSAGE,
    RESULTS_PER_TOKEN,
)
from .keyword_scorer import exact_score, token_weight, tokenize_query

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchHit:
    """A matching content line and the header of its section."""

    header: str
    text: str

    def render(self) -> str:
        return f"[{self.header}] {self.text}"


@dataclass
class SearchOutcome:
    """Result of a search.

    Attributes:
        status: OK, NO_MATCHES or INVALID_QUERY
        hits: Ranked hits (empty unless status is OK)
    """

    status: SearchStatus
    hits: list[SearchHit] = field(default_factory=list)

    @property
    def messages(self) -> list[str]:
        """User-facing text lines; never empty."""
        if self.status == SearchStatus.INVALID_QUERY:
            return [INVALID_QUERY_MESSAGE]
        if self.status == SearchStatus.NO_MATCHES:
            return [NO_MATCHES_MESSAGE]
        return [hit.render() for hit in self.hits]


def _iter_lines(sections: Sequence[Section]):
    for section in sections:
        for text in section.content:
            yield section.header, text


def _ranked(scored) -> list[tuple[int, str, str]]:
    # sorted() is stable: equal scores keep document order
    return sorted((item for item in scored if item[0] > 0), key=lambda item: item[0], reverse=True)


def search(
    sections: Sequence[Section],
    query: str,
    limit: int = DEFAULT_RESULT_LIMIT,
) -> SearchOutcome:
    """Find the content lines most relevant to a query.

    Args:
        sections: Segmented documentation, in document order.
        query: Free-text query.
        limit: Maximum number of hits to return.

    Returns:
        SearchOutcome with INVALID_QUERY for a blank query, NO_MATCHES
        when nothing matched, otherwise OK with at most ``limit`` hits.
    """
    if limit < 1:
        raise ValueError(f"limit must be positive, got {limit}")

    query_words = tokenize_query(query)
    if not query_words:
        return SearchOutcome(status=SearchStatus.INVALID_QUERY)

    normalized = query.strip().lower()
    lines = list(_iter_lines(sections))

    # Exact-match pass
    exact = _ranked(
        (exact_score(header, text, normalized, query_words), header, text) for header, text in lines
    )
    candidates = [SearchHit(header, text) for _, header, text in exact]

    # Per-token pass
    for word in query_words:
        matching = _ranked((token_weight(header, text, word), header, text) for header, text in lines)
        candidates.extend(
            SearchHit(header, text) for _, header, text in matching[:RESULTS_PER_TOKEN]
        )

    hits: list[SearchHit] = []
    seen: set[str] = set()
    for hit in candidates:
        if hit.text in seen:
            continue
        seen.add(hit.text)
        hits.append(hit)
        if len(hits) >= limit:
            break

    logger.debug(f"Search '{query}': {len(exact)} exact matches, returning {len(hits)}")

    if not hits:
        return SearchOutcome(status=SearchStatus.NO_MATCHES)
    return SearchOutcome(status=SearchStatus.OK, hits=hits)

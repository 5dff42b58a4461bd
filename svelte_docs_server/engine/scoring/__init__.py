"""Scoring engine for documentation search.

This package provides the lexical relevance rules and the two-pass
search assembly:
- Phrase and token-overlap scoring for headers and content lines
- Per-token occurrence weighting
- Result merging, deduplication and truncation

Usage:
    from svelte_docs_server.engine.scoring import search

    outcome = search(index.sections, "reactive state", limit=3)
"""

from .constants import (
    DEFAULT_RESULT_LIMIT,
    HEADER_PHRASE_SCORE,
    HEADER_TOKEN_OCCURRENCE_WEIGHT,
    HEADER_TOKEN_SCORE,
    INVALID_QUERY_MESSAGE,
    LINE_PHRASE_SCORE,
    LINE_TOKEN_OCCURRENCE_WEIGHT,
    LINE_TOKEN_SCORE,
    NO_MATCHES_MESSAGE,
    RESULTS_PER_TOKEN,
)
from .keyword_scorer import (
    count_occurrences,
    exact_score,
    score_text,
    token_weight,
    tokenize_query,
)
from .search import SearchHit, SearchOutcome, search

__all__ = [
    # Constants
    "DEFAULT_RESULT_LIMIT",
    "HEADER_PHRASE_SCORE",
    "HEADER_TOKEN_OCCURRENCE_WEIGHT",
    "HEADER_TOKEN_SCORE",
    "INVALID_QUERY_MESSAGE",
    "LINE_PHRASE_SCORE",
    "LINE_TOKEN_OCCURRENCE_WEIGHT",
    "LINE_TOKEN_SCORE",
    "NO_MATCHES_MESSAGE",
    "RESULTS_PER_TOKEN",
    # Keyword scorer
    "count_occurrences",
    "exact_score",
    "score_text",
    "token_weight",
    "tokenize_query",
    # Search
    "SearchHit",
    "SearchOutcome",
    "search",
]

"""Keyword scoring for documentation search.

This module provides the lexical relevance rules used by search:
- Query tokenization on whitespace
- Verbatim phrase and token-overlap scoring for headers and lines
- Per-token occurrence counting
"""

from .constants import (
    HEADER_PHRASE_SCORE,
    HEADER_TOKEN_OCCURRENCE_WEIGHT,
    HEADER_TOKEN_SCORE,
    LINE_PHRASE_SCORE,
    LINE_TOKEN_OCCURRENCE_WEIGHT,
    LINE_TOKEN_SCORE,
    MIN_TOKEN_MATCHES,
)


def tokenize_query(query: str) -> list[str]:
    """Split a query into lowercase tokens.

    Duplicate tokens are dropped, keeping the first occurrence.

    Args:
        query: The raw search query.

    Returns:
        Distinct lowercase tokens in query order (empty for a blank query).
    """
    tokens: list[str] = []
    for word in query.lower().split():
        if word not in tokens:
            tokens.append(word)
    return tokens


def score_text(text: str, query: str, query_words: list[str], is_header: bool) -> int:
    """Score one header or content line against a query.

    Single-token queries only score a substring match. Multi-token
    queries score a verbatim phrase match, or else the number of
    distinct matching tokens when at least two match.

    Args:
        text: Header or line text.
        query: Normalized (stripped, lowercase) query.
        query_words: Distinct query tokens.
        is_header: Whether ``text`` is a section header.

    Returns:
        Relevance score, 0 when the text does not match.
    """
    text = text.lower()
    phrase_score = HEADER_PHRASE_SCORE if is_header else LINE_PHRASE_SCORE

    if query in text:
        return phrase_score
    if len(query_words) <= 1:
        return 0

    matches = sum(1 for word in query_words if word in text)
    if matches < MIN_TOKEN_MATCHES:
        return 0
    return matches * (HEADER_TOKEN_SCORE if is_header else LINE_TOKEN_SCORE)


def exact_score(header: str, text: str, query: str, query_words: list[str]) -> int:
    """Effective exact-match score of a line: the better of its header and itself."""
    return max(
        score_text(header, query, query_words, is_header=True),
        score_text(text, query, query_words, is_header=False),
    )


def count_occurrences(text: str, word: str) -> int:
    """Case-insensitive, non-overlapping substring count."""
    return text.lower().count(word.lower())


def token_weight(header: str, text: str, word: str) -> int:
    """Per-token weight of a line: occurrences, boosted when the header has the token."""
    occurrences = count_occurrences(text, word)
    if word.lower() in header.lower():
        return occurrences * HEADER_TOKEN_OCCURRENCE_WEIGHT
    return occurrences * LINE_TOKEN_OCCURRENCE_WEIGHT

"""Scoring constants for documentation search.

The weights are lexical heuristics. Header matches outrank line matches
so that every line of a section whose header matches the query comes
first.
"""

# ---------------------------------------------------------------------------
# Exact-match pass
# ---------------------------------------------------------------------------
# Full query contained verbatim in the text
HEADER_PHRASE_SCORE = 10000
LINE_PHRASE_SCORE = 1000

# Multi-token query without a verbatim match: per matching token,
# only when at least MIN_TOKEN_MATCHES distinct tokens match
HEADER_TOKEN_SCORE = 800
LINE_TOKEN_SCORE = 400
MIN_TOKEN_MATCHES = 2

# ---------------------------------------------------------------------------
# Per-token pass
# ---------------------------------------------------------------------------
# Occurrence count multiplier when the owning header contains the token
HEADER_TOKEN_OCCURRENCE_WEIGHT = 100
LINE_TOKEN_OCCURRENCE_WEIGHT = 1
RESULTS_PER_TOKEN = 3

DEFAULT_RESULT_LIMIT = 3

# ---------------------------------------------------------------------------
# User-facing messages
# ---------------------------------------------------------------------------
INVALID_QUERY_MESSAGE = "Please provide a valid search query"
NO_MATCHES_MESSAGE = "No matches found"

import pytest

from svelte_docs_server.engine.core import segment
from svelte_docs_server.engine.scoring import search
from svelte_docs_server.models import SearchStatus


def test_search_single_token_line_match():
    sections = segment("# Start of Svelte documentation\nHello world\n# Routing\nUse a router.")
    outcome = search(sections, "router")
    assert outcome.status == SearchStatus.OK
    assert outcome.messages == ["[# Routing] Use a router."]


@pytest.mark.parametrize("query", ["", "   ", "\t\n"])
def test_search_blank_query_is_invalid(index, query):
    outcome = search(index.sections, query)
    assert outcome.status == SearchStatus.INVALID_QUERY
    assert outcome.hits == []
    assert outcome.messages == ["Please provide a valid search query"]


def test_search_no_matches(index):
    outcome = search(index.sections, "zzzznotfound")
    assert outcome.status == SearchStatus.NO_MATCHES
    assert outcome.hits == []
    assert outcome.messages == ["No matches found"]


def test_search_header_matches_rank_first(index):
    outcome = search(index.sections, "state")
    assert [hit.text for hit in outcome.hits] == [
        "Use $state to declare reactive state.",
        "State updates are reactive.",
        "A store holds state outside components.",
    ]
    assert outcome.hits[0].header == "# Reactive state"


def test_search_appends_per_token_results_after_exact_matches(index):
    outcome = search(index.sections, "use declare")
    assert [hit.text for hit in outcome.hits] == [
        "Use $state to declare reactive state.",
        "Use a router.",
    ]


def test_search_deduplicates_by_line_text(index):
    outcome = search(index.sections, "reactive state", limit=10)
    texts = [hit.text for hit in outcome.hits]
    assert len(texts) == len(set(texts))
    assert texts[:2] == ["Use $state to declare reactive state.", "State updates are reactive."]
    assert "A store holds state outside components." in texts


def test_search_respects_limit(index):
    assert len(search(index.sections, "e").hits) == 3
    assert len(search(index.sections, "e", limit=2).hits) == 2
    assert len(search(index.sections, "e", limit=20).hits) <= 20


def test_search_ties_keep_document_order():
    sections = segment("# A\nalpha one\n# B\nalpha two")
    outcome = search(sections, "alpha")
    assert [hit.text for hit in outcome.hits] == ["alpha one", "alpha two"]


def test_search_rejects_non_positive_limit(index):
    with pytest.raises(ValueError):
        search(index.sections, "state", limit=0)

import pytest
from shakesearch import Direction, Searcher, ValidationError

CORPUS = "".join(chr(ord("a") + i % 26) for i in range(120))

@pytest.fixture
def searcher() -> Searcher:
    return Searcher(CORPUS)

def test_nxt_returns_following_window(searcher):
    assert searcher.expand_context(10, "nxt") == CORPUS[10:60]

def test_prev_returns_preceding_window(searcher):
    assert searcher.expand_context(100, "prev") == CORPUS[50:100]

def test_prev_and_nxt_differ(searcher):
    assert searcher.expand_context(60, "prev") != searcher.expand_context(60, "nxt")

def test_clamps_at_both_edges(searcher):
    assert searcher.expand_context(10, "prev") == CORPUS[:10]
    assert searcher.expand_context(100, "nxt") == CORPUS[100:]
    assert searcher.expand_context(-5, "nxt") == CORPUS[:50]
    assert searcher.expand_context(-5, "prev") == ""
    assert searcher.expand_context(1000, "prev") == CORPUS[70:]
    assert searcher.expand_context(1000, "nxt") == ""

def test_accepts_string_offset_and_enum_direction(searcher):
    assert searcher.expand_context("30", Direction.NXT) == CORPUS[30:80]
    assert searcher.expand_context("-7", "nxt") == CORPUS[:50]

def test_pages_chain_back_to_the_start(searcher):
    # walking prev from the end visits every character exactly once
    pos, pages = len(CORPUS), []
    while pos > 0:
        page = searcher.expand_context(pos, "prev")
        pages.insert(0, page)
        pos -= len(page)
    assert "".join(pages) == CORPUS

@pytest.mark.parametrize("direction", ["up", "next", "", None, "PREV"])
def test_unknown_direction_is_rejected(searcher, direction):
    with pytest.raises(ValidationError):
        searcher.expand_context(10, direction)

@pytest.mark.parametrize("offset", ["ten", "", "1.5", 2.5, None, True, "+5", "1_0", " 5", "\u0665"])
def test_non_integer_offset_is_rejected(searcher, offset):
    with pytest.raises(ValidationError):
        searcher.expand_context(offset, "nxt")

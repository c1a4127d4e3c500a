from pathlib import Path
import pytest
from shakesearch import Searcher
from shakesearch.engine import Engine

HAMLET = (
    "To be, or not to be, that is the question:\n"
    "Whether 'tis nobler in the mind to suffer\n"
    "The slings and arrows of outrageous fortune,\n"
)

def _unmark(snippet: str) -> str:
    return snippet.replace("<mark>", "", 1).replace("</mark>", "", 1)

def _seed(tmp: Path) -> str:
    path = tmp / "completeworks.txt"
    path.write_text(HAMLET, encoding="utf-8")
    return str(path)

@pytest.mark.e2e
def test_to_be_is_found_twice_with_marks(tmp_path: Path):
    eng = Engine()
    try:
        eng.build(_seed(tmp_path))
        rows = eng.search("to be")
        assert [r.offset for r in rows] == [0, 14]
        assert "<mark>To be</mark>" in rows[0].snippet
        assert "<mark>to be</mark>" in rows[1].snippet
        for r in rows:
            assert r.context_start >= 0 and r.context_end <= len(HAMLET)
            assert _unmark(r.snippet) == HAMLET[r.context_start:r.context_end]
    finally:
        eng.shutdown()

def test_window_is_fifty_characters_each_side():
    s = Searcher(HAMLET)
    [r] = s.search("nobler")
    idx = HAMLET.index("nobler")
    assert (r.context_start, r.context_end) == (idx - 50, idx + 50)
    assert r.snippet == HAMLET[idx - 50:idx] + "<mark>nobler</mark>" + HAMLET[idx + 6:idx + 50]

def test_missing_query_returns_empty_list():
    assert Searcher(HAMLET).search("yorick") == []

def test_case_invariance_and_original_casing_kept():
    s = Searcher(HAMLET)
    upper = s.search("THE SLINGS")
    lower = s.search("the slings")
    swapped = s.search("tHE sLINGS")
    assert [r.offset for r in upper] == [r.offset for r in lower] == [r.offset for r in swapped]
    assert "<mark>The slings</mark>" in upper[0].snippet

def test_repeated_searches_are_identical():
    s = Searcher(HAMLET)
    assert s.search("e") == s.search("e")
    offsets = [r.offset for r in s.search("e")]
    assert offsets == sorted(offsets)

def test_iter_search_is_lazy_and_matches_search():
    s = Searcher(HAMLET)
    assert list(s.iter_search("to")) == s.search("to")

def test_matches_carry_query_length():
    s = Searcher(HAMLET)
    ms = s.matches("TO")
    assert ms and all(m.length == 2 for m in ms)
    assert all(HAMLET[m.offset:m.offset + 2].lower() == "to" for m in ms)

def test_custom_markers_and_width():
    s = Searcher("one two three", width=4, mark_open="[", mark_close="]")
    [r] = s.search("two")
    assert r.snippet == "one [two] "
    assert (r.context_start, r.context_end) == (0, 8)

def test_result_json_uses_external_field_names():
    [r] = Searcher(HAMLET).search("question")
    data = r.to_json()
    assert set(data) == {"snippet", "contextStart", "contextEnd", "offset"}
    assert data["contextStart"] == r.context_start

import json
from pathlib import Path
from frontend.__main__ import main

TEXT = "To be, or not to be: that is the question.\n"

def _seed(tmp: Path) -> str:
    path = tmp / "completeworks.txt"
    path.write_text(TEXT, encoding="utf-8")
    return str(path)

def test_cli_single_query(tmp_path: Path, capsys):
    assert main(["--corpus", _seed(tmp_path), "--q", "question"]) == 0
    out = capsys.readouterr().out
    assert "1 match(es)" in out
    assert "<mark>question</mark>" in out

def test_cli_json_rows(tmp_path: Path, capsys):
    assert main(["--corpus", _seed(tmp_path), "--q", "TO BE", "--json", "--limit", "1"]) == 0
    rows = json.loads(capsys.readouterr().out)
    assert len(rows) == 1 and rows[0]["offset"] == 0

def test_cli_no_matches(tmp_path: Path, capsys):
    assert main(["--corpus", _seed(tmp_path), "--q", "yorick"]) == 0
    assert "(no matches)" in capsys.readouterr().out

def test_cli_more_prev(tmp_path: Path, capsys):
    assert main(["--corpus", _seed(tmp_path), "--more", "9", "--type", "prev"]) == 0
    assert capsys.readouterr().out == TEXT[:9] + "\n"

def test_cli_missing_corpus_exits_1(tmp_path: Path, capsys):
    assert main(["--corpus", str(tmp_path / "none.txt"), "--q", "x"]) == 1
    assert "error:" in capsys.readouterr().out

def test_cli_empty_query_exits_2(tmp_path: Path, capsys):
    assert main(["--corpus", _seed(tmp_path), "--q", ""]) == 2

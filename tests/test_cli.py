import io
import json

import pytest

from simsearch.cli import BookSearcher, main

TITLES = ["The Old Man and the Sea", "Things Fall Apart", "James Joyce"]


@pytest.fixture
def books_file(tmp_path):
    path = tmp_path / "books.json"
    path.write_text(json.dumps(TITLES), encoding="utf-8")
    return path


def test_suggestions():
    searcher = BookSearcher(TITLES)
    assert searcher.suggestions("old man") == ["The Old Man and the Sea"]
    assert searcher.suggestions("thngs") == ["Things Fall Apart"]


def test_load(books_file):
    searcher = BookSearcher.load(books_file)
    assert searcher.suggestions("joyce") == ["James Joyce"]


def test_load_rejects_non_strings(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps(["ok", 3]), encoding="utf-8")
    with pytest.raises(ValueError):
        BookSearcher.load(path)


def test_main_prints_suggestions(books_file, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("thngs\n"))
    assert main([str(books_file)]) == 0
    out = capsys.readouterr().out
    assert "Things Fall Apart" in out
    assert "James Joyce" not in out


def test_main_page_size(books_file, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("the\n"))
    assert main([str(books_file), "--page-size", "0"]) == 0
    assert "The Old Man and the Sea" not in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.json")]) == 1
    assert "error" in capsys.readouterr().err
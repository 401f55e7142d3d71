from __future__ import annotations

from pathlib import Path

import pytest

from build_index import main, widest_keywords
from keyword_search.index_builder import make_index


def test_widest_keywords_breaks_ties_alphabetically(corpus: tuple[Path, Path]):
    docs, noise = corpus
    (docs.parent / "C").write_text("cat bird", encoding="utf-8")
    docs.write_text("A B C", encoding="utf-8")
    index = make_index(docs, noise)
    assert widest_keywords(index, 2) == ["cat", "dog"]
    assert widest_keywords(index, 10) == ["cat", "dog", "bird"]


def test_main_prints_analytics(corpus: tuple[Path, Path], capsys: pytest.CaptureFixture[str]):
    docs, noise = corpus
    code = main(["--docs", str(docs), "--noise", str(noise), "--top", "1"])
    out = capsys.readouterr().out
    assert code == 0
    assert "| Number of indexed documents | 2 |" in out
    assert "| Number of unique keywords   | 2 |" in out
    assert "| Total keyword occurrences   | 4 |" in out
    assert "cat: (B,2) (A,1)" in out


def test_main_base_dir(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    data = tmp_path / "data"
    data.mkdir()
    (data / "one.txt").write_text("river river stone", encoding="utf-8")
    docs = tmp_path / "docs.txt"
    docs.write_text("one.txt", encoding="utf-8")
    noise = tmp_path / "noise.txt"
    noise.write_text("stone", encoding="utf-8")

    code = main(["--docs", str(docs), "--noise", str(noise), "--base-dir", str(data), "--top", "1"])
    out = capsys.readouterr().out
    assert code == 0
    assert "river: (one.txt,2)" in out


def test_main_missing_input(tmp_path: Path):
    assert main(["--docs", str(tmp_path / "x"), "--noise", str(tmp_path / "y")]) == 1

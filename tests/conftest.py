from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def corpus(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> tuple[Path, Path]:
    """Two small documents, a document list and an empty noise-word list.
    Runs from tmp_path, since document names resolve against the working directory."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "A").write_text("Dog dog CAT.", encoding="utf-8")
    (tmp_path / "B").write_text("cat cat dog", encoding="utf-8")
    docs = tmp_path / "docs.txt"
    docs.write_text("A\nB\n", encoding="utf-8")
    noise = tmp_path / "noise.txt"
    noise.write_text("", encoding="utf-8")
    return docs, noise

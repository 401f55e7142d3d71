"""
Tests for binary-search occurrence insertion and the inverted index.
"""

from __future__ import annotations

import dataclasses
import random

import pytest

from keyword_search.posting import InvertedIndex, Occurrence, insert_last_occurrence


def _occs(*freqs: int) -> list[Occurrence]:
    return [Occurrence(f"doc{i}", f) for i, f in enumerate(freqs)]


def _freqs(occs: list[Occurrence]) -> list[int]:
    return [o.frequency for o in occs]


def test_single_element_returns_none_and_is_unchanged():
    occs = _occs(4)
    assert insert_last_occurrence(occs) is None
    assert occs == [Occurrence("doc0", 4)]


def test_empty_list_returns_none():
    occs: list[Occurrence] = []
    assert insert_last_occurrence(occs) is None
    assert occs == []


def test_insert_in_middle():
    occs = _occs(12, 8, 7, 5, 3, 2, 6)
    mids = insert_last_occurrence(occs)
    assert mids == [2, 4, 3]
    assert _freqs(occs) == [12, 8, 7, 6, 5, 3, 2]
    assert occs[3].document == "doc6"


def test_insert_at_tail():
    occs = _occs(5, 3, 1, 0)
    assert insert_last_occurrence(occs) == [1, 2]
    assert _freqs(occs) == [5, 3, 1, 0]
    assert occs[-1].document == "doc3"


def test_insert_at_head():
    occs = _occs(5, 3, 1, 6)
    assert insert_last_occurrence(occs) == [1, 0]
    assert _freqs(occs) == [6, 5, 3, 1]
    assert occs[0].document == "doc3"


def test_equal_frequency_stops_at_midpoint():
    occs = _occs(5, 3, 1, 3)
    assert insert_last_occurrence(occs) == [1]
    assert [o.document for o in occs] == ["doc0", "doc3", "doc1", "doc2"]


def test_two_elements():
    occs = _occs(1, 2)
    assert insert_last_occurrence(occs) == [0]
    assert _freqs(occs) == [2, 1]


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_repeated_insertion_keeps_descending_order(seed: int):
    rng = random.Random(seed)
    occs: list[Occurrence] = []
    for i in range(200):
        before = list(occs)
        occs.append(Occurrence(f"doc{i}", rng.randint(1, 20)))
        insert_last_occurrence(occs)
        freqs = _freqs(occs)
        assert freqs == sorted(freqs, reverse=True)
        # only the new element moved
        assert [o for o in occs if o.document != f"doc{i}"] == before


def test_occurrence_str_and_is_frozen():
    occ = Occurrence("A", 2)
    assert str(occ) == "(A,2)"
    with pytest.raises(dataclasses.FrozenInstanceError):
        occ.frequency = 3


def test_merge_keywords_keeps_lists_sorted():
    index = InvertedIndex()
    index.merge_keywords({"dog": Occurrence("A", 2), "cat": Occurrence("A", 1)})
    index.merge_keywords({"dog": Occurrence("B", 1), "cat": Occurrence("B", 2)})
    index.merge_keywords({"dog": Occurrence("C", 3)})

    assert index.get_occurrences("dog") == (
        Occurrence("C", 3),
        Occurrence("A", 2),
        Occurrence("B", 1),
    )
    assert index.get_occurrences("cat") == (Occurrence("B", 2), Occurrence("A", 1))
    assert index.get_occurrences("fish") is None
    assert "dog" in index
    assert len(index) == 2
    assert index.total_occurrences() == 5
    assert index.to_dict()["cat"] == [("B", 2), ("A", 1)]


def test_frozen_index_rejects_updates():
    index = InvertedIndex()
    index.merge_keywords({"dog": Occurrence("A", 2)})
    index.add_document("A")
    assert index.freeze() is index
    assert index.frozen

    with pytest.raises(RuntimeError):
        index.merge_keywords({"dog": Occurrence("B", 1)})
    with pytest.raises(RuntimeError):
        index.add_document("B")
    assert index.get_occurrences("dog") == (Occurrence("A", 2),)
    assert index.documents == ("A",)

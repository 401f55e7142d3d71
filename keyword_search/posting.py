"""
Occurrence and inverted index data structures.

An occurrence records how many times a keyword appears in one document.
Each keyword maps to a list of occurrences kept in descending order of
frequency; new occurrences are placed with a binary search.
"""

from dataclasses import dataclass
from typing import Iterator, Mapping


@dataclass(frozen=True)
class Occurrence:
    """
    A keyword's occurrence in a document.
    - document: document name, as listed in the document list
    - frequency: number of times the keyword occurs in that document
    """

    document: str
    frequency: int

    def __str__(self) -> str:
        return f"({self.document},{self.frequency})"


def insert_last_occurrence(occs: list[Occurrence]) -> list[int] | None:
    """
    Move the last occurrence of occs to its place in descending frequency order.

    occs[0..n-2] must already be sorted. Returns the midpoint indexes probed
    by the binary search, or None when the list has a single element.
    """
    if len(occs) <= 1:
        return None

    candidate = occs[-1]
    lo, hi = 0, len(occs) - 2
    mid = 0
    mids: list[int] = []
    while lo <= hi:
        mid = (lo + hi) // 2
        mids.append(mid)
        if candidate.frequency < occs[mid].frequency:
            lo = mid + 1
        elif candidate.frequency > occs[mid].frequency:
            hi = mid - 1
        else:
            break

    occs.pop()
    if candidate.frequency < occs[mid].frequency:
        occs.insert(mid + 1, candidate)
    else:
        occs.insert(mid, candidate)
    return mids


class InvertedIndex:
    """
    Inverted index: map from keyword -> occurrences, most frequent first.
    Built once with merge_keywords, then frozen for read-only querying.
    """

    def __init__(self) -> None:
        self._index: dict[str, list[Occurrence]] = {}
        self._documents: list[str] = []
        self._frozen = False

    def merge_keywords(self, kws: Mapping[str, Occurrence]) -> None:
        """Merge one document's keyword occurrences into the index."""
        if self._frozen:
            raise RuntimeError("Cannot merge keywords into a frozen index")
        for keyword, occurrence in kws.items():
            occs = self._index.get(keyword)
            if occs is None:
                self._index[keyword] = [occurrence]
            else:
                occs.append(occurrence)
                insert_last_occurrence(occs)

    def add_document(self, document: str) -> None:
        if self._frozen:
            raise RuntimeError("Cannot add documents to a frozen index")
        self._documents.append(document)

    def freeze(self) -> "InvertedIndex":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def documents(self) -> tuple[str, ...]:
        return tuple(self._documents)

    def get_occurrences(self, keyword: str) -> tuple[Occurrence, ...] | None:
        """Return the occurrences for a keyword, or None if it is not indexed."""
        occs = self._index.get(keyword)
        if occs is None:
            return None
        return tuple(occs)

    def keywords(self) -> Iterator[str]:
        """Iterate over all keywords in the index."""
        return iter(self._index)

    def total_occurrences(self) -> int:
        return sum(len(occs) for occs in self._index.values())

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, keyword: str) -> bool:
        return keyword in self._index

    def to_dict(self) -> dict:
        """Plain dict view of the index, for printing and inspection."""
        return {
            keyword: [(o.document, o.frequency) for o in occs]
            for keyword, occs in self._index.items()
        }

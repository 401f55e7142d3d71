"""
Search component for the keyword index.

Answers "kw1 OR kw2" queries: documents containing either keyword, in
descending order of frequency, at most TOP_K of them. Ties go to kw1.

Usage (from repo root):
    python -m keyword_search.search_cli \
        --docs data/docs.txt \
        --noise data/noisewords.txt \
        [--query deep world]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from .index_builder import make_index
from .posting import InvertedIndex, Occurrence
from .tokenizer import get_keyword
from .utils import get_logger

TOP_K = 5
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

logger = logging.getLogger(__name__)


def top5_search(index: InvertedIndex, kw1: str, kw2: str) -> Optional[List[str]]:
    """
    Merge the occurrence lists of kw1 and kw2 into at most TOP_K document names.

    Both lists are sorted by descending frequency, so a two-pointer merge
    yields the result in rank order. A document already in the result is
    skipped, but its pointer still advances. Returns None if neither keyword
    is indexed or nothing matched.
    """
    first = index.get_occurrences(kw1)
    second = index.get_occurrences(kw2)
    if first is None and second is None:
        return None
    first = first or ()
    second = second or ()

    result: List[str] = []

    def take(occ: Occurrence) -> None:
        if occ.document not in result:
            result.append(occ.document)

    p1 = p2 = 0
    while len(result) < TOP_K:
        if p1 >= len(first) and p2 >= len(second):
            break
        if p1 >= len(first):
            take(second[p2])
            p2 += 1
        elif p2 >= len(second):
            take(first[p1])
            p1 += 1
        elif first[p1].frequency > second[p2].frequency:
            take(first[p1])
            p1 += 1
        elif second[p2].frequency > first[p1].frequency:
            take(second[p2])
            p2 += 1
        else:
            take(first[p1])
            p1 += 1
            if len(result) < TOP_K:
                take(second[p2])
            p2 += 1

    if not result:
        return None
    return result


def normalize_query(raw_query: str) -> List[str]:
    """
    Lower-case and strip trailing punctuation from query words, using the same
    rule as indexing. Noise words are kept; they simply will not be found.
    """
    words = []
    for raw in raw_query.split():
        keyword = get_keyword(raw)
        words.append(keyword if keyword is not None else raw.lower())
    return words


def format_results(results: Optional[Sequence[str]]) -> str:
    if not results:
        return "No documents matched the query."
    lines = [f"Top {len(results)} results:"]
    for rank, document in enumerate(results, start=1):
        lines.append(f"{rank:2d}. {document}")
    return "\n".join(lines)


def run_query(index: InvertedIndex, raw_query: str) -> Optional[str]:
    """Answer one raw query line; returns the printable answer, or None for a usage error."""
    words = normalize_query(raw_query)
    if len(words) != 2:
        return None
    kw1, kw2 = words
    logger.info("Searching %r OR %r", kw1, kw2)
    return format_results(top5_search(index, kw1, kw2))


def run_search_loop(index: InvertedIndex) -> None:
    """
    Interactive command-line search loop.
    """
    print(f"Loaded index of {len(index)} keywords over {len(index.documents)} documents.")
    print("Enter two keywords per query (OR semantics). Empty line or Ctrl+C to exit.")

    while True:
        try:
            raw_query = input("query> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if not raw_query:
            break

        answer = run_query(index, raw_query)
        if answer is None:
            print("Please enter exactly two keywords.")
            continue
        print(answer)


def main(argv: Iterable[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Two-keyword OR search over a document list.")
    parser.add_argument(
        "--docs",
        type=Path,
        default=Path("data/docs.txt"),
        help="File listing the document names to index.",
    )
    parser.add_argument(
        "--noise",
        type=Path,
        default=Path("data/noisewords.txt"),
        help="File listing noise words to exclude.",
    )
    parser.add_argument(
        "--base-dir",
        type=Path,
        default=None,
        help="Directory document names are relative to (default: the working directory).",
    )
    parser.add_argument(
        "--query",
        nargs=2,
        metavar=("KW1", "KW2"),
        default=None,
        help="Run a single query and exit.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging level (default: WARNING).",
    )
    args = parser.parse_args(list(argv) if argv is not None else None)

    get_logger("keyword_search", level=args.log_level)

    try:
        index = make_index(args.docs, args.noise, base_dir=args.base_dir)
    except FileNotFoundError as e:
        logger.error("Could not build index: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.query is not None:
        answer = run_query(index, " ".join(args.query))
        if answer is None:
            print("Please enter exactly two keywords.", file=sys.stderr)
            return 2
        print(answer)
        return 0

    run_search_loop(index)
    return 0


if __name__ == "__main__":
    sys.exit(main())

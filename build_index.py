"""
Build the keyword index and print analytics about it.

Usage:
    python build_index.py --docs data/docs.txt --noise data/noisewords.txt

Output:
  - Analytics table printed to console (documents, keywords, occurrences)
  - The keywords that occur in the most documents, with their occurrence lists
"""

import argparse
import sys
from pathlib import Path

from keyword_search.index_builder import make_index
from keyword_search.posting import InvertedIndex
from keyword_search.utils import get_logger


def widest_keywords(index: InvertedIndex, top: int) -> list[str]:
    """Keywords occurring in the most documents; ties broken alphabetically."""
    return sorted(index.keywords(), key=lambda kw: (-len(index.get_occurrences(kw)), kw))[:top]


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Build keyword index and print analytics")
    parser.add_argument(
        "--docs",
        type=Path,
        default=Path("data/docs.txt"),
        help="File listing document names (default: data/docs.txt)",
    )
    parser.add_argument(
        "--noise",
        type=Path,
        default=Path("data/noisewords.txt"),
        help="File listing noise words (default: data/noisewords.txt)",
    )
    parser.add_argument(
        "--base-dir",
        type=Path,
        default=None,
        help="Directory document names are relative to (default: the working directory)",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=10,
        help="Number of most widespread keywords to list",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write build logs to this file",
    )
    args = parser.parse_args(argv)

    logger = get_logger("keyword_search", log_file=args.log_file)

    try:
        index = make_index(args.docs, args.noise, base_dir=args.base_dir)
    except FileNotFoundError as e:
        logger.error("Could not build index: %s", e)
        print(f"Error: {e}")
        return 1

    print("\n" + "=" * 50)
    print("KEYWORD INDEX ANALYTICS")
    print("=" * 50)
    print()
    print("| Metric                      | Value |")
    print("|-----------------------------|-------|")
    print(f"| Number of indexed documents | {len(index.documents)} |")
    print(f"| Number of unique keywords   | {len(index)} |")
    print(f"| Total keyword occurrences   | {index.total_occurrences()} |")
    print()
    if args.top > 0 and len(index):
        print(f"Top {min(args.top, len(index))} keywords by document count:")
        for keyword in widest_keywords(index, args.top):
            occs = " ".join(str(o) for o in index.get_occurrences(keyword))
            print(f"  {keyword}: {occs}")
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())

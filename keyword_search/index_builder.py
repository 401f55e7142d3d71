"""
Index builder: constructs the keyword index from a list of documents.
Loads noise words, counts keywords per document and merges each document's
occurrences into the index, keeping occurrence lists in descending frequency.
"""

import logging
from collections import Counter
from pathlib import Path
from typing import Iterable

from .tokenizer import get_keyword, read_document_tokens, read_stop_words, read_word_list
from .posting import InvertedIndex, Occurrence

logger = logging.getLogger(__name__)


def load_keywords(
    document: str,
    tokens: Iterable[str],
    stop_words: Iterable[str] = frozenset(),
) -> dict[str, Occurrence]:
    """
    Count the keywords in one document's raw tokens.
    Returns {keyword: Occurrence(document, count)}; non-keywords are skipped.
    """
    counts: Counter[str] = Counter()
    for token in tokens:
        keyword = get_keyword(token, stop_words)
        if keyword is None:
            logger.debug("Skipping non-keyword %r in %s", token, document)
            continue
        counts[keyword] += 1
    return {keyword: Occurrence(document, freq) for keyword, freq in counts.items()}


def _resolve_document(document: str, base_dir: Path) -> Path:
    path = Path(document)
    if path.is_absolute():
        return path
    return base_dir / path


def load_document_keywords(
    document: str,
    stop_words: Iterable[str] = frozenset(),
    *,
    base_dir: Path | None = None,
) -> dict[str, Occurrence]:
    """
    Read a document from disk and count its keywords.
    Raises FileNotFoundError if the document cannot be found.
    """
    base_dir = Path(base_dir) if base_dir is not None else Path.cwd()
    tokens = read_document_tokens(_resolve_document(document, base_dir))
    return load_keywords(document, tokens, stop_words)


def make_index(
    docs_file: Path,
    noise_words_file: Path,
    *,
    base_dir: Path | None = None,
) -> InvertedIndex:
    """
    Build the keyword index for every document named in docs_file.

    - docs_file: whitespace-separated document names.
    - noise_words_file: whitespace-separated noise (stop) words.
    - base_dir: directory relative document names are resolved against;
      defaults to the current working directory.
    Raises FileNotFoundError if either list file or any listed document is
    missing. Returns the frozen index.
    """
    docs_file = Path(docs_file)
    noise_words_file = Path(noise_words_file)
    base_dir = Path(base_dir) if base_dir is not None else Path.cwd()

    stop_words = read_stop_words(noise_words_file)
    logger.info("Loaded %d noise words from %s", len(stop_words), noise_words_file)

    documents = read_word_list(docs_file)
    index = InvertedIndex()
    seen: set[str] = set()
    for document in documents:
        if document in seen:
            logger.warning("Skipping duplicate document listing: %s", document)
            continue
        seen.add(document)
        logger.info("Indexing doc: %s", document)
        kws = load_document_keywords(document, stop_words, base_dir=base_dir)
        index.merge_keywords(kws)
        index.add_document(document)

    logger.info(
        "Indexed %d documents, %d unique keywords",
        len(index.documents),
        len(index),
    )
    return index.freeze()

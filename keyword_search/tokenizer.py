"""
Tokenizer and keyword normalizer for the keyword index.
Reads word lists and documents from disk, splits them on whitespace and turns
raw tokens into lower-case keywords. HTML documents are reduced to their
visible text first.
"""

import logging
import warnings
from pathlib import Path
from typing import Iterable

from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning, MarkupResemblesLocatorWarning
warnings.filterwarnings("ignore", category=XMLParsedAsHTMLWarning)
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)

from nltk.tokenize import WhitespaceTokenizer

logger = logging.getLogger(__name__)

_TOKENIZER = WhitespaceTokenizer()

HTML_SUFFIXES = (".html", ".htm")
ENCODINGS = ("utf-8", "latin-1", "cp1252")


def get_keyword(word: str, stop_words: Iterable[str] = frozenset()) -> str | None:
    """
    Return word as a keyword, or None if it is not one.

    Trailing non-letters are stripped; what remains must be made only of
    letters. The result is lower-cased and rejected if it is a stop word.
    A single-character word is a keyword unless it is a stop word.
    """
    if len(word) == 1:
        keyword = word.lower()
        return None if keyword in stop_words else keyword

    end = len(word)
    while end > 0 and not word[end - 1].isalpha():
        end -= 1
    prefix = word[:end]
    if not prefix or not prefix.isalpha():
        return None
    keyword = prefix.lower()
    if keyword in stop_words:
        return None
    return keyword


def tokenize(text: str) -> list[str]:
    """Split text into raw whitespace-delimited tokens."""
    if not text:
        return []
    return _TOKENIZER.tokenize(text)


def extract_text_from_html(html_content: str) -> str:
    """
    Extract visible text from HTML content, stripping tags and scripts.
    """
    soup = BeautifulSoup(html_content, "lxml")
    for element in soup(["script", "style"]):
        element.decompose()
    return soup.get_text(separator=" ", strip=True)


def read_text_file(filepath: Path) -> str:
    """
    Read file content, handling common encodings.
    Raises FileNotFoundError if the file does not exist.
    """
    filepath = Path(filepath)
    if not filepath.is_file():
        raise FileNotFoundError(f"File not found: {filepath}")
    for encoding in ENCODINGS:
        try:
            return filepath.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    raise ValueError(f"Could not decode file: {filepath}")


def read_word_list(filepath: Path) -> list[str]:
    """Read whitespace-separated words (document names, noise words) from a file."""
    return tokenize(read_text_file(filepath))


def read_stop_words(filepath: Path) -> frozenset[str]:
    return frozenset(word.lower() for word in read_word_list(filepath))


def read_document_tokens(filepath: Path) -> list[str]:
    """
    Read a document and return its raw tokens.
    .html/.htm files contribute only their visible text.
    """
    filepath = Path(filepath)
    content = read_text_file(filepath)
    if filepath.suffix.lower() in HTML_SUFFIXES:
        content = extract_text_from_html(content)
    tokens = tokenize(content)
    logger.debug("Read %d tokens from %s", len(tokens), filepath)
    return tokens

"""Keyword index and two-keyword search package."""

from .posting import Occurrence, InvertedIndex, insert_last_occurrence
from .index_builder import load_keywords, load_document_keywords, make_index
from .tokenizer import get_keyword, tokenize, read_document_tokens
from .search_cli import top5_search

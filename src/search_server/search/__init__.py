"""
TF-IDF search core.

This package provides a pure-Python in-memory search stack:
- analyzers: Space tokenizer, word validation and stop-word filtering
- stats: Rating averages, term frequencies and IDF
- query: Plus/minus query parsing
- document_index: Document store with inverted and forward indices
- tfidf_engine: Relevance scoring and ranking
- server: SearchServer facade
"""

from search_server.search.analyzers import StopWords, is_valid_word, split_into_words
from search_server.search.exceptions import (
    InvalidArgumentError,
    InvalidWordError,
    NotFoundError,
    SearchServerError,
)
from search_server.search.query import Query, parse_query
from search_server.search.server import SearchServer
from search_server.search.tfidf_engine import MAX_RESULT_DOCUMENT_COUNT, RELEVANCE_TOLERANCE


__all__ = [
    "MAX_RESULT_DOCUMENT_COUNT",
    "RELEVANCE_TOLERANCE",
    "InvalidArgumentError",
    "InvalidWordError",
    "NotFoundError",
    "Query",
    "SearchServer",
    "SearchServerError",
    "StopWords",
    "is_valid_word",
    "parse_query",
    "split_into_words",
]

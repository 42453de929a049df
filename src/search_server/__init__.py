"""search-server: in-process TF-IDF document index."""

from search_server.domain.model import Document, DocumentStatus
from search_server.search import (
    InvalidArgumentError,
    InvalidWordError,
    NotFoundError,
    SearchServer,
    SearchServerError,
)


__all__ = [
    "Document",
    "DocumentStatus",
    "InvalidArgumentError",
    "InvalidWordError",
    "NotFoundError",
    "SearchServer",
    "SearchServerError",
]

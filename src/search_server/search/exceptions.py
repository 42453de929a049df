"""Typed failures raised by the search core."""

from __future__ import annotations


class SearchServerError(Exception):
    """Base error for the search core."""


class InvalidArgumentError(SearchServerError, ValueError):
    """Raised for malformed stop words, queries, document ids or text."""


class InvalidWordError(InvalidArgumentError):
    """Raised when a token contains a control character."""

    def __init__(self, word: str) -> None:
        super().__init__(f"Word {word!r} contains invalid characters")
        self.word = word


class NotFoundError(SearchServerError, LookupError):
    """Raised when an operation references a document that is not live."""

    def __init__(self, document_id: int) -> None:
        super().__init__(f"Document {document_id} not found")
        self.document_id = document_id

"""Domain layer - value objects with no infrastructure dependencies."""

from search_server.domain.model import Document, DocumentStatus


__all__ = [
    "Document",
    "DocumentStatus",
]

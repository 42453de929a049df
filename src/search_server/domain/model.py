"""Domain model - value objects shared by the index and its callers.

- DocumentStatus is the moderation state attached to every stored document
- Document is the immutable record returned by ranked searches
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class DocumentStatus(str, Enum):
    """Moderation state of an indexed document."""

    ACTUAL = "actual"
    IRRELEVANT = "irrelevant"
    BANNED = "banned"
    REMOVED = "removed"


class Document(BaseModel):
    """Value object for a single ranked search result.

    Immutable to ensure result integrity once ranking is done.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=0)
    relevance: float = 0.0
    rating: int = 0

    def __str__(self) -> str:
        return f"{{ document_id = {self.id}, relevance = {self.relevance}, rating = {self.rating} }}"

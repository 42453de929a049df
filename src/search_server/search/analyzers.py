"""Analyzer utilities for the TF-IDF search core.

Text is split on runs of spaces and every word is validated before anything
else happens, so a document or query with control characters is rejected as a
whole. Stop words are dropped by a filter stage, mirroring a composable
tokenizer/filter design. Stages pass plain word strings along.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Protocol

from search_server.search.exceptions import InvalidArgumentError, InvalidWordError


class Tokenizer(Protocol):
    """Protocol implemented by tokenizers."""

    def __call__(self, text: str) -> Iterator[str]:  # pragma: no cover - interface definition
        ...


class TokenFilter(Protocol):
    """Protocol implemented by word filters."""

    def __call__(self, words: Iterable[str]) -> Iterator[str]:  # pragma: no cover - interface definition
        ...


def is_valid_word(word: str) -> bool:
    """Return True when ``word`` has no control characters or spaces."""

    return not any(ord(char) < 0x20 or char == " " for char in word)


def split_into_words(text: str) -> list[str]:
    """Split ``text`` on runs of spaces, rejecting control characters.

    Raises:
        InvalidWordError: if any token contains a character below 0x20
    """

    words = [word for word in text.split(" ") if word]
    for word in words:
        if not is_valid_word(word):
            raise InvalidWordError(word)
    return words


class WhitespaceTokenizer:
    """Tokenizer that yields validated space-delimited words."""

    def __call__(self, text: str) -> Iterator[str]:
        yield from split_into_words(text)


class StopWords:
    """Immutable set of words excluded from indexing and queries."""

    def __init__(self, words: str | Iterable[str] = ()) -> None:
        if isinstance(words, str):
            words = words.split(" ")
        unique = frozenset(word for word in words if word)
        invalid = sorted(word for word in unique if not is_valid_word(word))
        if invalid:
            raise InvalidArgumentError(f"Some of stop words are invalid: {invalid!r}")
        self._words = unique

    def is_stop_word(self, word: str) -> bool:
        return word in self._words

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"StopWords({sorted(self._words)!r})"


class StopFilter:
    """Removes stopwords from the stream."""

    def __init__(self, stop_words: StopWords) -> None:
        self.stop_words = stop_words

    def __call__(self, words: Iterable[str]) -> Iterator[str]:
        for word in words:
            if not self.stop_words.is_stop_word(word):
                yield word


class AnalyzerPipeline:
    """Composable analyzer pipeline (tokenizer + filters)."""

    def __init__(self, tokenizer: Tokenizer, filters: Sequence[TokenFilter] | None = None) -> None:
        self.tokenizer = tokenizer
        self.filters = list(filters or [])

    def __call__(self, text: str) -> list[str]:
        stream: Iterable[str] = self.tokenizer(text)
        for token_filter in self.filters:
            stream = token_filter(stream)
        return list(stream)


def build_document_analyzer(stop_words: StopWords) -> AnalyzerPipeline:
    """Return the analyzer used to turn document text into indexable words."""

    return AnalyzerPipeline(WhitespaceTokenizer(), [StopFilter(stop_words)])

"""Query parsing into plus and minus word sets."""

from __future__ import annotations

from dataclasses import dataclass

from search_server.search.analyzers import StopWords, is_valid_word, split_into_words
from search_server.search.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class QueryWord:
    """A single classified query token."""

    data: str
    is_minus: bool
    is_stop: bool


@dataclass(frozen=True)
class Query:
    """Immutable snapshot of a parsed query.

    A word requested both ways only survives as a minus-word, since exclusion
    overrides inclusion during ranking.
    """

    plus_words: frozenset[str] = frozenset()
    minus_words: frozenset[str] = frozenset()

    def is_empty(self) -> bool:
        return not self.plus_words and not self.minus_words


def parse_query_word(text: str, stop_words: StopWords) -> QueryWord:
    """Classify one raw query token.

    Raises:
        InvalidArgumentError: for a bare ``-``, a ``--word`` token, or a word
            with control characters
    """

    is_minus = text.startswith("-")
    word = text[1:] if is_minus else text
    if not word or word.startswith("-"):
        raise InvalidArgumentError(f"Query word {text!r} is invalid")
    if not is_valid_word(word):
        raise InvalidArgumentError(f"Query word {text!r} contains invalid characters")
    return QueryWord(data=word, is_minus=is_minus, is_stop=stop_words.is_stop_word(word))


def parse_query(raw_query: str, stop_words: StopWords) -> Query:
    """Parse ``raw_query`` into deduplicated plus and minus word sets."""

    plus_words: set[str] = set()
    minus_words: set[str] = set()
    for token in split_into_words(raw_query):
        query_word = parse_query_word(token, stop_words)
        if query_word.is_stop:
            continue
        if query_word.is_minus:
            minus_words.add(query_word.data)
        else:
            plus_words.add(query_word.data)

    return Query(plus_words=frozenset(plus_words - minus_words), minus_words=frozenset(minus_words))

"""TF-IDF relevance scoring and ranking over a DocumentIndex."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable, Iterable
from functools import cmp_to_key

from search_server.domain.model import Document, DocumentStatus
from search_server.search.document_index import DocumentIndex
from search_server.search.query import Query
from search_server.search.stats import calculate_idf


MAX_RESULT_DOCUMENT_COUNT = 5
RELEVANCE_TOLERANCE = 1e-6

DocumentPredicate = Callable[[int, DocumentStatus, int], bool]


class TfidfSearchEngine:
    """Compute TF-IDF scores for documents stored in a DocumentIndex."""

    def __init__(
        self,
        index: DocumentIndex,
        *,
        max_results: int = MAX_RESULT_DOCUMENT_COUNT,
        tolerance: float = RELEVANCE_TOLERANCE,
    ) -> None:
        self.index = index
        self.max_results = max_results
        self.tolerance = tolerance

    def inverse_document_freq(self, word: str) -> float:
        return calculate_idf(self.index.document_frequency(word), self.index.document_count())

    def find_all_documents(self, query: Query, predicate: DocumentPredicate) -> list[Document]:
        """Return every document scoring on a plus-word and hit by no minus-word.

        Minus-words veto a document outright rather than lowering its score.
        Documents come back in ascending id order so exact ties rank the same
        in every process.
        """

        doc_scores: dict[int, float] = defaultdict(float)

        for word in sorted(query.plus_words):
            if not self.index.has_word(word):
                continue
            idf = self.inverse_document_freq(word)
            for doc_id, term_freq in self.index.get_postings(word).items():
                data = self.index.get_document_data(doc_id)
                if predicate(doc_id, data.status, data.rating):
                    doc_scores[doc_id] += term_freq * idf

        for word in query.minus_words:
            for doc_id in self.index.get_postings(word):
                doc_scores.pop(doc_id, None)

        return [
            Document(id=doc_id, relevance=relevance, rating=self.index.get_document_data(doc_id).rating)
            for doc_id, relevance in sorted(doc_scores.items())
        ]

    def rank(self, documents: Iterable[Document]) -> list[Document]:
        """Sort by relevance, near-equal relevance by rating, and keep the top results."""

        ranked = sorted(documents, key=cmp_to_key(self._compare))
        return ranked[: self.max_results]

    def score(self, query: Query, predicate: DocumentPredicate) -> list[Document]:
        if self.max_results <= 0:
            return []
        return self.rank(self.find_all_documents(query, predicate))

    def _compare(self, lhs: Document, rhs: Document) -> int:
        if abs(lhs.relevance - rhs.relevance) < self.tolerance:
            return rhs.rating - lhs.rating
        return -1 if lhs.relevance > rhs.relevance else 1

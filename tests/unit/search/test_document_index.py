"""Unit tests for the document store and its paired indices."""

from types import MappingProxyType

import pytest

from search_server.domain.model import DocumentStatus
from search_server.search.analyzers import StopWords
from search_server.search.document_index import DocumentData, DocumentIndex
from search_server.search.exceptions import InvalidArgumentError, NotFoundError


def _assert_indices_in_lock_step(index: DocumentIndex) -> None:
    forward = {
        (word, doc_id, freq) for doc_id in index for word, freq in index.get_word_frequencies(doc_id).items()
    }
    inverted = {
        (word, doc_id, freq) for word in index.vocabulary() for doc_id, freq in index.get_postings(word).items()
    }
    assert forward == inverted


@pytest.fixture
def index():
    return DocumentIndex(StopWords("and the"))


@pytest.mark.unit
class TestAddDocument:
    """Ingestion computes term frequencies and metadata atomically."""

    def test_add_increases_count_by_one(self, index):
        index.add_document(1, "cat dog", DocumentStatus.ACTUAL, [5])
        before = index.document_count()

        index.add_document(2, "cat", DocumentStatus.ACTUAL, [3])

        assert index.document_count() == before + 1
        assert len(index) == 2

    def test_term_frequencies_ignore_stop_words(self, index):
        index.add_document(7, "the cat and the cat dog", DocumentStatus.ACTUAL, [])

        assert dict(index.get_word_frequencies(7)) == pytest.approx({"cat": 2 / 3, "dog": 1 / 3})
        assert index.get_document_data(7) == DocumentData(rating=0, status=DocumentStatus.ACTUAL)

    def test_document_of_only_stop_words_is_created_empty(self, index):
        index.add_document(3, "the and the", DocumentStatus.IRRELEVANT, [4, 4])

        assert 3 in index
        assert dict(index.get_word_frequencies(3)) == {}
        assert index.vocabulary() == frozenset()

    def test_empty_text_is_accepted(self, index):
        index.add_document(0, "", DocumentStatus.ACTUAL, [1])

        assert list(index) == [0]

    def test_negative_id_is_rejected(self, index):
        with pytest.raises(InvalidArgumentError):
            index.add_document(-1, "cat", DocumentStatus.ACTUAL, [1])

        assert index.document_count() == 0

    def test_duplicate_id_is_rejected_without_mutation(self, index):
        index.add_document(1, "cat", DocumentStatus.ACTUAL, [1])

        with pytest.raises(InvalidArgumentError):
            index.add_document(1, "dog", DocumentStatus.BANNED, [9])

        assert index.vocabulary() == frozenset({"cat"})
        assert index.get_document_data(1).status is DocumentStatus.ACTUAL

    def test_invalid_text_is_rejected_without_mutation(self, index):
        with pytest.raises(InvalidArgumentError):
            index.add_document(1, "cat d\x12og", DocumentStatus.ACTUAL, [1])

        assert index.document_count() == 0
        assert index.vocabulary() == frozenset()
        with pytest.raises(NotFoundError):
            index.get_word_frequencies(1)

    def test_unknown_status_is_rejected(self, index):
        with pytest.raises(InvalidArgumentError):
            index.add_document(1, "cat", "archived", [1])

        assert 1 not in index

    def test_iteration_follows_insertion_order(self, index):
        for doc_id in (5, 1, 3):
            index.add_document(doc_id, "cat", DocumentStatus.ACTUAL, [])

        assert list(index) == [5, 1, 3]


@pytest.mark.unit
class TestRemoveDocument:
    """Removal keeps the inverted and forward indices consistent."""

    def test_remove_drops_document_everywhere(self, index):
        index.add_document(1, "cat dog", DocumentStatus.ACTUAL, [5])
        index.add_document(2, "cat", DocumentStatus.ACTUAL, [3])

        index.remove_document(1)

        assert list(index) == [2]
        assert index.vocabulary() == frozenset({"cat"})
        assert dict(index.get_postings("cat")) == {2: 1.0}
        with pytest.raises(NotFoundError):
            index.get_word_frequencies(1)
        _assert_indices_in_lock_step(index)

    def test_removing_last_document_with_word_removes_word(self, index):
        index.add_document(1, "dog", DocumentStatus.ACTUAL, [])

        index.remove_document(1)

        assert not index.has_word("dog")
        assert index.document_frequency("dog") == 0
        assert dict(index.get_postings("dog")) == {}

    def test_removing_unknown_id_twice_is_noop(self, index):
        index.add_document(1, "cat", DocumentStatus.ACTUAL, [])

        index.remove_document(42)
        index.remove_document(42)

        assert index.document_count() == 1

    def test_removed_id_can_be_reused(self, index):
        index.add_document(1, "cat", DocumentStatus.ACTUAL, [])
        index.remove_document(1)

        index.add_document(1, "dog", DocumentStatus.BANNED, [2])

        assert dict(index.get_word_frequencies(1)) == {"dog": 1.0}
        _assert_indices_in_lock_step(index)

    def test_lock_step_after_mixed_operations(self, index):
        index.add_document(1, "cat dog bird", DocumentStatus.ACTUAL, [])
        index.add_document(2, "dog bird bird", DocumentStatus.ACTUAL, [])
        index.add_document(3, "fish", DocumentStatus.ACTUAL, [])
        index.remove_document(2)
        index.add_document(4, "bird fish", DocumentStatus.ACTUAL, [])

        _assert_indices_in_lock_step(index)
        assert index.document_frequency("bird") == 2


@pytest.mark.unit
class TestReadOnlyViews:
    def test_word_frequencies_cannot_be_mutated(self, index):
        index.add_document(1, "cat", DocumentStatus.ACTUAL, [])

        frequencies = index.get_word_frequencies(1)

        assert isinstance(frequencies, MappingProxyType)
        with pytest.raises(TypeError):
            frequencies["dog"] = 1.0  # type: ignore[index]

    def test_unknown_document_data_raises_not_found(self, index):
        with pytest.raises(NotFoundError) as exc_info:
            index.get_document_data(9)

        assert exc_info.value.document_id == 9

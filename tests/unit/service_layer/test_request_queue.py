"""Unit tests for the rolling no-result request counter."""

import pytest

from search_server.domain.model import DocumentStatus
from search_server.search.exceptions import InvalidArgumentError
from search_server.service_layer.request_queue import MIN_IN_DAY, RequestQueue


@pytest.mark.unit
class TestNotify:
    """Outcomes older than the window stop counting."""

    def test_counts_no_result_outcomes(self, search_server):
        queue = RequestQueue(search_server, window_size=3)

        queue.notify(False)
        queue.notify(False)
        queue.notify(True)

        assert queue.no_result_count() == 2
        assert len(queue) == 3

    def test_oldest_outcomes_fall_out_of_window(self, search_server):
        queue = RequestQueue(search_server, window_size=3)
        for had_results in (False, False, True):
            queue.notify(had_results)

        queue.notify(True)
        assert queue.no_result_count() == 1

        queue.notify(True)
        assert queue.no_result_count() == 0
        assert len(queue) == 3

    def test_evicting_result_outcome_keeps_count(self, search_server):
        queue = RequestQueue(search_server, window_size=2)
        queue.notify(True)
        queue.notify(False)

        queue.notify(False)

        assert queue.get_no_result_requests() == 2

    def test_default_window_is_one_day_of_minutes(self, search_server):
        assert RequestQueue(search_server).window_size == MIN_IN_DAY == 1440

    def test_window_must_be_positive(self, search_server):
        with pytest.raises(ValueError):
            RequestQueue(search_server, window_size=0)


@pytest.mark.unit
class TestAddFindRequest:
    def test_records_outcome_and_returns_documents(self, search_server):
        queue = RequestQueue(search_server)

        documents = queue.add_find_request("fluffy cat")
        queue.add_find_request("empty request")

        assert [doc.id for doc in documents] == [1, 0]
        assert queue.no_result_count() == 1

    def test_status_and_predicate_are_forwarded(self, search_server):
        queue = RequestQueue(search_server)

        banned = queue.add_find_request("groomed", DocumentStatus.BANNED)
        rated = queue.add_find_request("groomed", lambda _id, _status, rating: rating > 100)

        assert [doc.id for doc in banned] == [3]
        assert rated == []
        assert queue.no_result_count() == 1

    def test_rejected_query_records_nothing(self, search_server):
        queue = RequestQueue(search_server)

        with pytest.raises(InvalidArgumentError):
            queue.add_find_request("cat --dog")

        assert len(queue) == 0
        assert queue.no_result_count() == 0

    def test_full_day_of_requests(self, search_server):
        queue = RequestQueue(search_server)
        for _ in range(MIN_IN_DAY - 1):
            queue.add_find_request("empty request")

        queue.add_find_request("curly dog")
        queue.add_find_request("big collar")
        queue.add_find_request("starling")

        # two hits and one empty request came in while two empty ones fell out
        assert queue.no_result_count() == MIN_IN_DAY - 2

"""Service layer - orchestration around the search core."""

from .request_queue import MIN_IN_DAY, RequestQueue
from .search_service import SearchService, configure_observability


__all__ = [
    "MIN_IN_DAY",
    "RequestQueue",
    "SearchService",
    "configure_observability",
]

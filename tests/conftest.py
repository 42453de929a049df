"""Shared test fixtures and configuration."""

import os

import pytest

from search_server.domain.model import DocumentStatus
from search_server.search.server import SearchServer


# Complete test environment that overrides every config value
TEST_ENV = {
    "SEARCH_SERVER_STOP_WORDS": "and in on the",
    "SEARCH_SERVER_MAX_RESULT_DOCUMENT_COUNT": "5",
    "SEARCH_SERVER_RELEVANCE_TOLERANCE": "1e-6",
    "SEARCH_SERVER_REQUEST_WINDOW_SIZE": "1440",
    "SEARCH_SERVER_LOG_LEVEL": "info",
    "SEARCH_SERVER_LOG_JSON": "true",
}


for key, value in TEST_ENV.items():
    os.environ[key] = value


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Reset SEARCH_SERVER_* variables before each test."""
    for key, value in TEST_ENV.items():
        monkeypatch.setenv(key, value)


@pytest.fixture
def search_server():
    """Small index with a mix of statuses and ratings."""
    server = SearchServer("and in on the")
    server.add_document(0, "white cat and fashionable collar", DocumentStatus.ACTUAL, [8, -3])
    server.add_document(1, "fluffy cat fluffy tail", DocumentStatus.ACTUAL, [7, 2, 7])
    server.add_document(2, "groomed dog expressive eyes", DocumentStatus.ACTUAL, [5, -12, 2, 1])
    server.add_document(3, "groomed starling eugene", DocumentStatus.BANNED, [9])
    return server

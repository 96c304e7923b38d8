"""
Fixtures for the live bookstore API suite.

Every test here talks to the target resolved in ``tests/conftest.py``.
Nothing contacts the target ahead of time: if it is down, each scenario fails
with the connection error ``requests`` raised.

Key SDET Concepts Demonstrated:
- Session-scoped HTTP client shared across the live suite
- One execution context per resource group (no shared globals)
- Explicit sequential runner instead of implicit test ordering
"""

from __future__ import annotations

from collections.abc import Generator

import pytest

from bookstore_api.authors import AUTHORS
from bookstore_api.books import BOOKS
from bookstore_api.client import ApiClient
from bookstore_api.runner import LifecycleRun
from tests.support.live import live_client, live_lifecycle


@pytest.fixture(scope="session")
def api_client(settings) -> Generator[ApiClient, None, None]:
    client = live_client(settings)
    yield client
    client.close()


@pytest.fixture(scope="module")
def books_lifecycle(api_client, settings) -> LifecycleRun:
    return live_lifecycle(BOOKS, api_client, settings)


@pytest.fixture(scope="module")
def authors_lifecycle(api_client, settings) -> LifecycleRun:
    return live_lifecycle(AUTHORS, api_client, settings)

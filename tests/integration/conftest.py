"""
Fixtures for running the scenario catalogue against the fake bookstore.

The fake is a real HTTP server on an ephemeral port, so the suite's own
``requests``-based client is exercised end to end without a deployed
service.

Key SDET Concepts Demonstrated:
- Live server fixture running a Flask app in a background thread
- Session scope for the stateless fake, function scope for the stateful one
- Test doubles that model two deployment behaviours
"""

from __future__ import annotations

from collections.abc import Generator

import pytest

from bookstore_api.client import ApiClient
from tests.support.fake_bookstore import create_app, serve


@pytest.fixture(scope="session")
def lenient_url() -> Generator[str, None, None]:
    """Serve the non-persisting, non-validating fake for the whole session."""
    with serve(create_app(strict=False)) as url:
        yield url


@pytest.fixture
def strict_url() -> Generator[str, None, None]:
    """Serve a fresh validating fake per test so stored data never leaks."""
    with serve(create_app(strict=True)) as url:
        yield url


@pytest.fixture
def lenient_client(lenient_url) -> Generator[ApiClient, None, None]:
    client = ApiClient(lenient_url)
    yield client
    client.close()


@pytest.fixture
def strict_client(strict_url) -> Generator[ApiClient, None, None]:
    client = ApiClient(strict_url)
    yield client
    client.close()

"""
Tests for how the live suite is wired to an unreachable target.

A target nobody is listening on must turn every scenario into a
connection failure, never a skip: the default URL gets no special
treatment, and no reachability check runs before the scenarios.
"""

from __future__ import annotations

import pytest
import requests

from bookstore_api import books
from bookstore_api.books import BOOKS
from bookstore_api.config import LocalConfig, Settings, Target
from bookstore_api.context import MissingFieldPolicy
from bookstore_api.runner import Outcome
from bookstore_api.scenarios import run_scenario
from tests.support.live import live_client, live_lifecycle

pytestmark = pytest.mark.integration

# Port 9 (discard) on localhost is not an HTTP server.
UNREACHABLE_DEFAULT = Settings(
    target=Target(base_url="http://127.0.0.1:9", source="default"),
    profile=LocalConfig,
    request_timeout=2,
)


@pytest.fixture
def unreachable_client():
    client = live_client(UNREACHABLE_DEFAULT)
    yield client
    client.close()


def test_building_the_live_client_sends_no_requests(monkeypatch):
    """Test that building the live client sends no request of its own."""
    def _no_network(*args, **kwargs):
        raise AssertionError("no request expected while wiring the client")

    monkeypatch.setattr(requests, "get", _no_network)
    monkeypatch.setattr(requests.Session, "request", _no_network)

    client = live_client(UNREACHABLE_DEFAULT)

    assert client.base_url == "http://127.0.0.1:9"
    assert client.timeout == 2


def test_unreachable_default_fails_lifecycle_instead_of_skipping(unreachable_client):
    """Test that list and create fail with the transport error."""
    run = live_lifecycle(BOOKS, unreachable_client, UNREACHABLE_DEFAULT)

    listed = run.run_through("list")
    created = run.run_through("create")

    assert listed.outcome is Outcome.FAILED
    assert isinstance(listed.error, requests.ConnectionError)
    assert created.outcome is Outcome.FAILED
    assert isinstance(created.error, requests.ConnectionError)


def test_unreachable_default_fails_edge_case(unreachable_client):
    """Test that an independent edge case raises the connection error."""
    scenario = books.edge_cases(MissingFieldPolicy.LENIENT)["get_invalid_id"]

    with pytest.raises(requests.ConnectionError):
        run_scenario(unreachable_client, scenario)

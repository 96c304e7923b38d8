"""
Shared pytest plumbing for the bookstore API suite.

Registers the ``--base-url`` option and resolves the run's settings
(profile, target URL, request timeout) once, in ``pytest_configure``,
before any test is collected.  A malformed URL or timeout is a usage
error for the whole run; an unreachable target is not checked here and
shows up as connection failures in the scenarios themselves.

Key SDET Concepts Demonstrated:
- Command-line overrides layered over environment variables and defaults
- Session-scoped configuration shared by every suite
- Fail-fast configuration errors reported before any test runs
"""

from __future__ import annotations

import pytest

from bookstore_api.config import (
    BASE_URL_ENV,
    Config,
    ConfigurationError,
    Settings,
    load_settings,
)

SETTINGS_KEY = pytest.StashKey[Settings]()


def pytest_addoption(parser):
    parser.addoption(
        "--base-url",
        action="store",
        default=None,
        help="Base URL of the bookstore API (overrides the BASE_URL environment variable)",
    )


def pytest_configure(config):
    try:
        settings = load_settings(override=config.getoption("--base-url"))
    except ConfigurationError as exc:
        raise pytest.UsageError(str(exc)) from exc
    config.stash[SETTINGS_KEY] = settings


def pytest_report_header(config):
    settings = config.stash.get(SETTINGS_KEY, None)
    if settings is None:
        return None
    lines = [
        f"bookstore target: {settings.target.base_url} (from {settings.target.source}), "
        f"profile: {settings.profile.__name__}"
    ]
    if settings.target.is_default:
        lines.append(
            f"bookstore target is the built-in default; set {BASE_URL_ENV} or "
            f"--base-url if live tests fail to connect"
        )
    return lines


@pytest.fixture(scope="session")
def settings(pytestconfig) -> Settings:
    """Provide the settings resolved once at startup."""
    return pytestconfig.stash[SETTINGS_KEY]


@pytest.fixture(scope="session")
def api_config(settings) -> type[Config]:
    """Provide the active deployment profile."""
    return settings.profile


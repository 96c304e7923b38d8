"""
Bookstore API suite configuration.

Defines the deployment profiles the suite can run against and the
resolution rules for the target base URL.  Each profile captures the
default URL of a known deployment together with the assertion policies
that deployment needs (whether created resources get real ids, and
whether the service rejects payloads with missing required fields).

The base URL itself is resolved once per test process from, in order:

1. An explicit override (the ``--base-url`` pytest option).
2. The ``BASE_URL`` environment variable.
3. The ``DEFAULT_BASE_URL`` of the selected profile.

Key Concepts Demonstrated:
- Class-based configuration with inheritance for shared defaults
- Environment-variable overrides for 12-factor deployability
- Fail-fast syntactic validation before any scenario runs
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from urllib.parse import urlparse

from bookstore_api.context import IdPolicy, MissingFieldPolicy

BASE_URL_ENV = "BASE_URL"
PROFILE_ENV = "API_PROFILE"
TIMEOUT_ENV = "REQUEST_TIMEOUT"


class ConfigurationError(ValueError):
    """Raised when the run cannot be configured (bad base URL or timeout)."""


class Config:
    """
    Base (shared) configuration.

    The request timeout is not a profile setting; see ``request_timeout``.
    """

    DEFAULT_BASE_URL: str = "http://localhost:3000"

    # Existing resource used when the service echoes the sentinel id 0.
    FALLBACK_ID: int = 1

    ID_POLICY: IdPolicy = IdPolicy.SENTINEL
    MISSING_FIELD_POLICY: MissingFieldPolicy = MissingFieldPolicy.LENIENT


class LocalConfig(Config):
    """A FakeRestAPI container running on the developer machine."""


class DemoConfig(Config):
    """
    The publicly hosted FakeRestAPI demo.

    The demo service does not persist anything: creates echo ``id: 0``
    and missing fields come back as ``null``.
    """

    DEFAULT_BASE_URL: str = "https://fakerestapi.azurewebsites.net"


class StrictConfig(Config):
    """
    A validating deployment that allocates real ids.

    Missing required fields are rejected and a created id must be
    strictly positive; anything else leaves dependent steps skipped.
    """

    ID_POLICY: IdPolicy = IdPolicy.STRICT
    MISSING_FIELD_POLICY: MissingFieldPolicy = MissingFieldPolicy.STRICT


# Lookup table mapping profile names to their config classes.
config = {
    "local": LocalConfig,
    "demo": DemoConfig,
    "strict": StrictConfig,
    "default": LocalConfig,
}


def get_config(profile: str | None = None) -> type[Config]:
    """
    Return the configuration class for the given deployment profile.

    Args:
        profile: One of ``"local"``, ``"demo"`` or ``"strict"``.  When
            *None*, the ``API_PROFILE`` environment variable is consulted,
            falling back to ``"local"``.

    Returns:
        The ``Config`` subclass matching the profile, or ``LocalConfig``
        if the name is unrecognised.
    """
    if profile is None:
        profile = os.environ.get(PROFILE_ENV, "local")
    return config.get(profile.strip().lower(), config["default"])


@dataclass(frozen=True)
class Target:
    """The resolved base URL and where it came from."""

    base_url: str
    source: str

    @property
    def is_default(self) -> bool:
        return self.source == "default"


def _validate(url: str) -> str:
    parsed = urlparse(url)
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise ConfigurationError(
            f"Base URL {url!r} is not an absolute http(s) URL; "
            f"set --base-url or {BASE_URL_ENV} to a valid value"
        )
    return url.rstrip("/")


def resolve_target(
    override: str | None = None,
    environ: Mapping[str, str] | None = None,
    default: str | None = None,
) -> Target:
    """
    Resolve the target base URL.

    The first non-blank source wins.  Only the URL's shape is checked;
    reachability is left to the scenarios themselves.

    Args:
        override: Explicit per-run value, e.g. from ``--base-url``.
        environ: Environment mapping; defaults to ``os.environ``.
        default: Final fallback; defaults to the active profile's
            ``DEFAULT_BASE_URL``.

    Returns:
        An immutable ``Target``.

    Raises:
        ConfigurationError: If the winning value is not an http(s) URL.
    """
    if environ is None:
        environ = os.environ
    if default is None:
        default = get_config().DEFAULT_BASE_URL

    candidates = (
        ("override", override),
        ("environment", environ.get(BASE_URL_ENV)),
        ("default", default),
    )
    for source, value in candidates:
        if value and value.strip():
            return Target(base_url=_validate(value.strip()), source=source)

    raise ConfigurationError(
        f"No base URL configured; set --base-url or {BASE_URL_ENV}"
    )


def request_timeout(environ: Mapping[str, str] | None = None) -> float | None:
    """
    Read the optional ``REQUEST_TIMEOUT`` (seconds).

    Unset or blank means ``None``: the HTTP stack's own default applies.

    Raises:
        ConfigurationError: If the value is not a positive number.
    """
    if environ is None:
        environ = os.environ
    raw = (environ.get(TIMEOUT_ENV) or "").strip()
    if not raw:
        return None
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise ConfigurationError(
            f"{TIMEOUT_ENV}={raw!r} is not a number of seconds"
        ) from exc
    if timeout <= 0:
        raise ConfigurationError(f"{TIMEOUT_ENV} must be positive, got {raw!r}")
    return timeout


@dataclass(frozen=True)
class Settings:
    """Everything resolved once at startup: target, profile and timeout."""

    target: Target
    profile: type[Config]
    request_timeout: float | None


def load_settings(
    override: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """
    Resolve profile, target and timeout together from one environment.

    Raises:
        ConfigurationError: If the base URL or the timeout is unusable.
    """
    if environ is None:
        environ = os.environ
    profile = get_config(environ.get(PROFILE_ENV, "local"))
    target = resolve_target(override, environ=environ, default=profile.DEFAULT_BASE_URL)
    return Settings(
        target=target,
        profile=profile,
        request_timeout=request_timeout(environ),
    )

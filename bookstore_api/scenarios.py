"""
Declarative request/assertion pairs.

A ``Scenario`` is one fixed request plus what the response must look
like.  The ``expect_*`` helpers raise ``AssertionError`` with the
expected and actual values so pytest reports them directly.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping
from dataclasses import dataclass, field
from typing import Any

from bookstore_api.client import ApiClient, ApiResponse


@dataclass(frozen=True)
class Scenario:
    """
    One self-contained request and its expectations.

    ``expected_fields`` maps a top-level body field to its expected value;
    a value of ``None`` means the field must be null or absent.
    """

    name: str
    method: str
    path: str
    expected_status: frozenset[int]
    path_params: Mapping[str, Any] = field(default_factory=dict)
    body: str | None = None
    expected_fields: Mapping[str, Any] = field(default_factory=dict)


def statuses(*codes: int) -> frozenset[int]:
    return frozenset(codes)


def expect_status(response: ApiResponse, accepted: Collection[int]) -> None:
    if response.status_code not in accepted:
        raise AssertionError(
            f"Expected status in {sorted(accepted)}, got {response.status_code}: "
            f"{response.text[:500]}"
        )


def expect_json(response: ApiResponse) -> None:
    if not response.is_json:
        raise AssertionError(
            f"Expected a JSON content type, got {response.content_type!r}"
        )


def expect_fields(response: ApiResponse, expected: Mapping[str, Any]) -> None:
    """Compare each expected field; report every mismatch at once."""
    mismatches = []
    for name, want in expected.items():
        got = response.field(name)
        if want is None:
            if got is not None:
                mismatches.append(f"{name}: expected null, got {got!r}")
        elif got != want:
            mismatches.append(f"{name}: expected {want!r}, got {got!r}")
    if mismatches:
        raise AssertionError("Body mismatch -- " + "; ".join(mismatches))


def run_scenario(client: ApiClient, scenario: Scenario) -> ApiResponse:
    """Send the scenario's request and check its expectations."""
    response = client.request(
        scenario.method,
        scenario.path,
        path_params=scenario.path_params,
        body=scenario.body,
    )
    expect_status(response, scenario.expected_status)
    if scenario.expected_fields:
        expect_fields(response, scenario.expected_fields)
    return response

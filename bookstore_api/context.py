"""
Per-group execution state for the lifecycle scenarios.

Each resource group owns one ``GroupContext``.  The create step writes
the identifier the service returned; read, update and delete ask the
context which id to target.  Keeping the slot on an object passed to the
steps (rather than in a module global) means two groups never see each
other's ids.
"""

from __future__ import annotations

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class IdPolicy(Enum):
    """How a created resource's id is judged."""

    # id >= 0 is accepted; 0 means the service does not allocate ids and
    # dependent steps target the known existing fallback id instead.
    SENTINEL = "sentinel"
    # id > 0 is required; otherwise dependent steps are skipped.
    STRICT = "strict"


class MissingFieldPolicy(Enum):
    """How a create request missing a required field is expected to end."""

    # The service accepts it and echoes the field back as null.
    LENIENT = "lenient"
    # The service rejects it with a client error.
    STRICT = "strict"


SENTINEL_ID = 0


class PreconditionNotMet(Exception):
    """A dependent scenario has no state to act on and must be skipped."""


class GroupContext:
    """Mutable state threaded through one group's lifecycle steps."""

    def __init__(self, resource: str, id_policy: IdPolicy, fallback_id: int = 1):
        self.resource = resource
        self.id_policy = id_policy
        self.fallback_id = fallback_id
        self.created_id: int | None = None

    def record_created_id(self, value: object) -> int:
        """
        Validate and store the id extracted from a create response.

        The slot is only written when the value is usable under the
        group's policy; otherwise it stays empty and an ``AssertionError``
        describes what was returned.

        Returns:
            The stored id.
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise AssertionError(
                f"{self.resource}: expected an integer id in the create response, "
                f"got {value!r}"
            )
        if self.id_policy is IdPolicy.STRICT and value <= SENTINEL_ID:
            raise AssertionError(
                f"{self.resource}: created id should be greater than zero, got {value}"
            )
        if value < SENTINEL_ID:
            raise AssertionError(
                f"{self.resource}: created id should be zero or greater, got {value}"
            )

        self.created_id = value
        logger.info("%s: recorded created id %s", self.resource, value)
        return value

    @property
    def has_id(self) -> bool:
        return self.created_id is not None

    def target_id(self) -> int:
        """
        Return the id dependent steps should act on.

        Raises:
            PreconditionNotMet: If the create step produced no usable id.
        """
        if self.created_id is None:
            raise PreconditionNotMet(
                f"{self.resource} id not set from creation step"
            )
        if self.created_id == SENTINEL_ID:
            return self.fallback_id
        return self.created_id

"""Shape shared by every resource group exercised by the suite."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

# A path id that no deployment is expected to hold.
NONEXISTENT_ID = 9999999


@dataclass(frozen=True)
class ResourceGroup:
    """
    Endpoints and fixed payloads for one API resource.

    Attributes:
        name: Human-readable resource name used in messages.
        collection_path: Path of the list/create endpoint.
        item_path: Path template of the by-id endpoints; uses ``{id}``.
        create_body: JSON text posted by the lifecycle create step.
        update_body: Builds the full replacement JSON text for a target id.
    """

    name: str
    collection_path: str
    item_path: str
    create_body: str
    update_body: Callable[[int], str]
    id_field: str = "id"

"""Live-suite wiring kept out of fixtures so it can be unit tested."""

from __future__ import annotations

from bookstore_api.client import ApiClient
from bookstore_api.config import Settings
from bookstore_api.context import GroupContext
from bookstore_api.resources import ResourceGroup
from bookstore_api.runner import LifecycleRun, build_lifecycle


def live_client(settings: Settings) -> ApiClient:
    """Build the client for the resolved target; nothing is sent until a scenario runs."""
    return ApiClient(settings.target.base_url, timeout=settings.request_timeout)


def live_lifecycle(group: ResourceGroup, client: ApiClient, settings: Settings) -> LifecycleRun:
    """Build one group's lifecycle with a fresh context under the active profile."""
    profile = settings.profile
    context = GroupContext(group.name, profile.ID_POLICY, profile.FALLBACK_ID)
    return LifecycleRun(build_lifecycle(group, client, context))

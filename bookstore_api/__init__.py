"""
Bookstore API verification suite.

Client-side helpers for exercising the Books and Authors resources of a
bookstore demo API over HTTP: target resolution, a thin ``requests``
wrapper, declarative scenarios and an explicit lifecycle runner.
"""

from bookstore_api.client import ApiClient, ApiResponse
from bookstore_api.config import ConfigurationError, Target, get_config, resolve_target
from bookstore_api.context import GroupContext, IdPolicy, MissingFieldPolicy, PreconditionNotMet
from bookstore_api.runner import LifecycleRun, Outcome, build_lifecycle
from bookstore_api.scenarios import Scenario, run_scenario

__all__ = [
    "ApiClient",
    "ApiResponse",
    "ConfigurationError",
    "GroupContext",
    "IdPolicy",
    "LifecycleRun",
    "MissingFieldPolicy",
    "Outcome",
    "PreconditionNotMet",
    "Scenario",
    "Target",
    "build_lifecycle",
    "get_config",
    "resolve_target",
    "run_scenario",
]

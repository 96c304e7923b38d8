"""
Explicit sequential runner for lifecycle scenarios.

A group's lifecycle is an ordered list of closures (list, create, read,
update, delete) that share one ``GroupContext``.  ``LifecycleRun``
executes them strictly by rank, each at most once, and records an
outcome per step instead of letting one failure stop the rest:

* ``PreconditionNotMet`` -> ``SKIPPED``
* any other exception    -> ``FAILED`` (the exception is kept for reporting)
* no exception           -> ``PASSED``

Asking for a later step's result first runs every pending earlier step,
so selecting a single test still honours the dependency chain.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum

from bookstore_api.client import ApiClient
from bookstore_api.context import GroupContext, PreconditionNotMet
from bookstore_api.resources import ResourceGroup
from bookstore_api.scenarios import expect_fields, expect_json, expect_status, statuses

logger = logging.getLogger(__name__)


class Outcome(Enum):
    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class LifecycleStep:
    rank: int
    name: str
    action: Callable[[], None]


@dataclass(frozen=True)
class StepResult:
    step: LifecycleStep
    outcome: Outcome
    error: BaseException | None = None

    @property
    def name(self) -> str:
        return self.step.name


class LifecycleRun:
    """Run one group's lifecycle steps in rank order, each exactly once."""

    def __init__(self, steps: Iterable[LifecycleStep]):
        ordered = sorted(steps, key=lambda step: step.rank)
        ranks = [step.rank for step in ordered]
        names = [step.name for step in ordered]
        if len(set(ranks)) != len(ranks):
            raise ValueError(f"Duplicate lifecycle ranks: {ranks}")
        if len(set(names)) != len(names):
            raise ValueError(f"Duplicate lifecycle step names: {names}")
        self.steps: tuple[LifecycleStep, ...] = tuple(ordered)
        self.results: dict[str, StepResult] = {}

    @property
    def step_names(self) -> tuple[str, ...]:
        return tuple(step.name for step in self.steps)

    def run_through(self, name: str) -> StepResult:
        """Execute all pending steps up to and including ``name``."""
        if name not in self.step_names:
            raise KeyError(f"Unknown lifecycle step {name!r}")
        for step in self.steps:
            if step.name not in self.results:
                self.results[step.name] = self._execute(step)
            if step.name == name:
                break
        return self.results[name]

    def run_all(self) -> list[StepResult]:
        if self.steps:
            self.run_through(self.steps[-1].name)
        return [self.results[name] for name in self.step_names]

    @staticmethod
    def _execute(step: LifecycleStep) -> StepResult:
        try:
            step.action()
        except PreconditionNotMet as exc:
            logger.info("step %s skipped: %s", step.name, exc)
            return StepResult(step, Outcome.SKIPPED, exc)
        except Exception as exc:  # recorded and re-raised by the reporting test
            logger.warning("step %s failed: %s", step.name, exc)
            return StepResult(step, Outcome.FAILED, exc)
        logger.info("step %s passed", step.name)
        return StepResult(step, Outcome.PASSED)


LIFECYCLE_STEP_NAMES = ("list", "create", "read", "update", "delete")


def build_lifecycle(
    group: ResourceGroup, client: ApiClient, context: GroupContext
) -> list[LifecycleStep]:
    """Return the five ordered lifecycle steps for ``group``."""

    def list_all() -> None:
        response = client.get(group.collection_path)
        expect_status(response, statuses(200))
        expect_json(response)

    def create() -> None:
        response = client.post(group.collection_path, body=group.create_body)
        expect_status(response, statuses(200, 201))
        context.record_created_id(response.field(group.id_field))

    def read() -> None:
        target_id = context.target_id()
        response = client.get(group.item_path, path_params={"id": target_id})
        expect_status(response, statuses(200))
        expect_fields(response, {group.id_field: target_id})

    def update() -> None:
        target_id = context.target_id()
        response = client.put(
            group.item_path,
            path_params={"id": target_id},
            body=group.update_body(target_id),
        )
        expect_status(response, statuses(200, 204))

    def delete() -> None:
        target_id = context.target_id()
        response = client.delete(group.item_path, path_params={"id": target_id})
        expect_status(response, statuses(200, 204))

    actions = (list_all, create, read, update, delete)
    return [
        LifecycleStep(rank=rank, name=name, action=action)
        for rank, (name, action) in enumerate(zip(LIFECYCLE_STEP_NAMES, actions), start=1)
    ]

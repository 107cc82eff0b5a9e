"""
Resolution options — pins, filters and workload kinds.

Options are plain callables that return an updated, frozen options
object. They are folded once, before the first listing call:

    opts = ResolutionOptions.build(with_env("test"), with_workload_types([...]))
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import TYPE_CHECKING

from deploysel.core.models.task import TASK_GROUP_FORMAT
from deploysel.core.models.workload import DeployedWorkload, Workload

if TYPE_CHECKING:
    from deploysel.core.selector.collaborators import DeployStoreClient, WorkloadLister

# A filter keeps a candidate by returning True. Exceptions abort resolution.
WorkloadFilter = Callable[[DeployedWorkload], bool]


# ── Pins ────────────────────────────────────────────────────────────


class PinState(StrEnum):
    """Which dimensions the caller pinned before resolving."""

    NONE = "none"
    NAME = "name"
    ENV = "env"
    BOTH = "both"

    @classmethod
    def of(cls, name: str | None, env: str | None) -> PinState:
        if name and env:
            return cls.BOTH
        if name:
            return cls.NAME
        if env:
            return cls.ENV
        return cls.NONE


@dataclass(frozen=True)
class ResolutionOptions:
    """Pins and filters for a deployed-workload lookup."""

    name: str | None = None
    env: str | None = None
    filters: tuple[WorkloadFilter, ...] = ()

    @property
    def pins(self) -> PinState:
        return PinState.of(self.name, self.env)

    @classmethod
    def build(cls, *opts: ResolutionOption) -> ResolutionOptions:
        """Fold option callables into one frozen options object."""
        result = cls()
        for opt in opts:
            result = opt(result)
        return result


ResolutionOption = Callable[[ResolutionOptions], ResolutionOptions]


def with_name(name: str) -> ResolutionOption:
    """Pin the workload name."""
    return lambda o: replace(o, name=name or None)


def with_env(env: str) -> ResolutionOption:
    """Pin the environment."""
    return lambda o: replace(o, env=env or None)


def with_filter(predicate: WorkloadFilter) -> ResolutionOption:
    """Append a filter. All filters must accept a candidate for it to survive."""
    return lambda o: replace(o, filters=(*o.filters, predicate))


def with_workload_types(types: Iterable[str]) -> ResolutionOption:
    """Keep only candidates whose type is one of ``types``."""
    wanted = frozenset(types)
    return with_filter(lambda wl: wl.type in wanted)


def apply_filters(
    candidates: list[DeployedWorkload],
    filters: Iterable[WorkloadFilter],
) -> list[DeployedWorkload]:
    """Run the filter chain (logical AND). The first exception propagates."""
    out = candidates
    for predicate in filters:
        out = [wl for wl in out if predicate(wl)]
    return out


# ── Workload kinds ──────────────────────────────────────────────────


@dataclass(frozen=True)
class KindListing:
    """The three collaborator calls a kind maps to."""

    list_registered: Callable[[str], list[Workload]]
    list_deployed: Callable[[str, str], list[str]]
    is_deployed: Callable[[str, str, str], bool]


class WorkloadKind(StrEnum):
    """What a deployed-workload lookup is looking for."""

    SERVICE = "service"
    JOB = "job"
    ANY = "workload"

    @property
    def plural(self) -> str:
        return f"{self.value}s"

    def listing(self, config: WorkloadLister, store: DeployStoreClient) -> KindListing:
        """Bind this kind to the matching collaborator methods."""
        if self is WorkloadKind.SERVICE:
            return KindListing(
                list_registered=config.list_services,
                list_deployed=store.list_deployed_services,
                is_deployed=store.is_service_deployed,
            )
        if self is WorkloadKind.JOB:
            return KindListing(
                list_registered=config.list_jobs,
                list_deployed=store.list_deployed_jobs,
                is_deployed=store.is_job_deployed,
            )

        def list_deployed(app: str, env: str) -> list[str]:
            return store.list_deployed_services(app, env) + store.list_deployed_jobs(app, env)

        def is_deployed(app: str, env: str, name: str) -> bool:
            return store.is_service_deployed(app, env, name) or store.is_job_deployed(
                app, env, name
            )

        return KindListing(
            list_registered=config.list_workloads,
            list_deployed=list_deployed,
            is_deployed=is_deployed,
        )


# ── Task options ────────────────────────────────────────────────────


@dataclass(frozen=True)
class TaskOptions:
    """Where to look for tasks, and which ones."""

    app: str | None = None
    env: str | None = None
    default_cluster: bool = False
    task_group: str = ""
    task_id: str = ""

    @property
    def has_app_env(self) -> bool:
        return bool(self.app and self.env)

    @classmethod
    def build(cls, *opts: TaskOption) -> TaskOptions:
        result = cls()
        for opt in opts:
            result = opt(result)
        return result


TaskOption = Callable[[TaskOptions], TaskOptions]


def task_in_app_env(app: str, env: str) -> TaskOption:
    """Look for tasks in an application's environment."""
    return lambda o: replace(o, app=app or None, env=env or None)


def task_in_default_cluster() -> TaskOption:
    """Look for tasks in the account's default cluster."""
    return lambda o: replace(o, default_cluster=True)


def task_in_group(group: str) -> TaskOption:
    """Only tasks started under the given task group name."""
    return lambda o: replace(o, task_group=TASK_GROUP_FORMAT.format(group) if group else "")


def task_with_id(task_id: str) -> TaskOption:
    """Only tasks whose ID starts with ``task_id``."""
    return lambda o: replace(o, task_id=task_id)

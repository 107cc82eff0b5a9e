"""
Collaborator protocols — the listing capabilities selectors depend on.

Each selector asks only for the capabilities it calls. Implementations
live outside the core (see ``deploysel.adapters.inventory``); any object
with the right methods will do. Every method may raise; selectors wrap
those failures as ``ListingError`` and never retry.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from deploysel.core.models.app import Application, Environment
from deploysel.core.models.inventory import WorkspaceSummary
from deploysel.core.models.pipeline import DeployedPipeline, WorkspacePipeline
from deploysel.core.models.task import RunningTask, TaskFilter, TaskStackInfo
from deploysel.core.models.topic import Topic
from deploysel.core.models.workload import Workload

# ── Config store ────────────────────────────────────────────────────


@runtime_checkable
class ApplicationLister(Protocol):
    def list_applications(self) -> list[Application]: ...


@runtime_checkable
class EnvironmentLister(Protocol):
    def list_environments(self, app: str) -> list[Environment]: ...


class AppEnvLister(ApplicationLister, EnvironmentLister, Protocol):
    """Applications and their environments."""


@runtime_checkable
class WorkloadLister(Protocol):
    """Workloads registered under an application."""

    def list_services(self, app: str) -> list[Workload]: ...

    def list_jobs(self, app: str) -> list[Workload]: ...

    def list_workloads(self, app: str) -> list[Workload]: ...


class ConfigLister(AppEnvLister, WorkloadLister, Protocol):
    """The whole config store surface."""


# ── Workspace ───────────────────────────────────────────────────────


@runtime_checkable
class WorkspaceWorkloadLister(Protocol):
    """Workload names with manifests in the local workspace."""

    def list_services(self) -> list[str]: ...

    def list_jobs(self) -> list[str]: ...

    def list_workloads(self) -> list[str]: ...


class WorkspaceRetriever(WorkspaceWorkloadLister, Protocol):
    def summary(self) -> WorkspaceSummary: ...

    def list_environments(self) -> list[str]: ...


@runtime_checkable
class WorkspacePipelineLister(Protocol):
    def list_pipelines(self) -> list[WorkspacePipeline]: ...


# ── Deploy state ────────────────────────────────────────────────────


@runtime_checkable
class DeployStoreClient(Protocol):
    """What is actually running, per application environment."""

    def list_deployed_services(self, app: str, env: str) -> list[str]: ...

    def list_deployed_jobs(self, app: str, env: str) -> list[str]: ...

    def is_service_deployed(self, app: str, env: str, name: str) -> bool: ...

    def is_job_deployed(self, app: str, env: str, name: str) -> bool: ...

    def list_sns_topics(self, app: str, env: str) -> list[Topic]: ...


@runtime_checkable
class DeployedPipelineLister(Protocol):
    def list_deployed_pipelines(self, app: str) -> list[DeployedPipeline]: ...


# ── Tasks ───────────────────────────────────────────────────────────


@runtime_checkable
class TaskStackDescriber(Protocol):
    """One-off task stacks, per environment or in the default cluster."""

    def list_default_task_stacks(self) -> list[TaskStackInfo]: ...

    def list_task_stacks(self, app: str, env: str) -> list[TaskStackInfo]: ...


@runtime_checkable
class TaskLister(Protocol):
    """Running tasks, per environment or in the default cluster."""

    def list_active_app_env_tasks(
        self, app: str, env: str, task_filter: TaskFilter
    ) -> list[RunningTask]: ...

    def list_active_default_cluster_tasks(self, task_filter: TaskFilter) -> list[RunningTask]: ...

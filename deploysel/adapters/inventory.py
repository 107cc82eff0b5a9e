"""
Inventory adapters — answer collaborator calls from a loaded snapshot.

``InventoryStore`` plays the config store, the deploy store and the task
describers; ``InventoryWorkspace`` plays the local workspace. Both are
read-only views over one ``Inventory``.
"""

from __future__ import annotations

import logging

from deploysel.core.models.app import Application, Environment
from deploysel.core.models.inventory import AppInventory, Inventory, WorkspaceSummary
from deploysel.core.models.pipeline import DeployedPipeline, WorkspacePipeline
from deploysel.core.models.task import RunningTask, TaskFilter, TaskStackInfo
from deploysel.core.models.topic import Topic
from deploysel.core.models.workload import Workload, is_job_type

logger = logging.getLogger(__name__)


class InventoryError(LookupError):
    """Raised when the snapshot has no entry for what was asked."""


def _matches(task: RunningTask, task_filter: TaskFilter) -> bool:
    if task_filter.copilot_only and not task.managed:
        return False
    if task_filter.task_group and task.task_group != task_filter.task_group:
        return False
    if task_filter.task_id and not task.task_id.startswith(task_filter.task_id):
        return False
    return task.last_status == "RUNNING"


class InventoryStore:
    """Config store, deploy store and task listings backed by an Inventory."""

    def __init__(self, inventory: Inventory):
        self._inventory = inventory

    def _app(self, name: str) -> AppInventory:
        app = self._inventory.get_application(name)
        if app is None:
            raise InventoryError(f"application {name} not found")
        return app

    # ── Config store ─────────────────────────────────────────────

    def list_applications(self) -> list[Application]:
        return [Application(name=a.name, domain=a.domain) for a in self._inventory.applications]

    def list_environments(self, app: str) -> list[Environment]:
        return [
            Environment(app=app, **env.model_dump())
            for env in self._app(app).environments
        ]

    def list_workloads(self, app: str) -> list[Workload]:
        return [Workload(app=app, name=wl.name, type=wl.type) for wl in self._app(app).workloads]

    def list_services(self, app: str) -> list[Workload]:
        return [wl for wl in self.list_workloads(app) if wl.is_service]

    def list_jobs(self, app: str) -> list[Workload]:
        return [wl for wl in self.list_workloads(app) if wl.is_job]

    # ── Deploy store ─────────────────────────────────────────────

    def _deployed(self, app: str, env: str, want_service: bool) -> list[str]:
        inv = self._app(app)
        if inv.get_environment(env) is None:
            raise InventoryError(f"environment {env} not found in application {app}")
        out = []
        for name in inv.deployments.get(env, []):
            wl = inv.get_workload(name)
            is_job = wl is not None and is_job_type(wl.type)
            if is_job != want_service:
                out.append(name)
        return out

    def list_deployed_services(self, app: str, env: str) -> list[str]:
        return self._deployed(app, env, want_service=True)

    def list_deployed_jobs(self, app: str, env: str) -> list[str]:
        return self._deployed(app, env, want_service=False)

    def is_service_deployed(self, app: str, env: str, name: str) -> bool:
        return name in self.list_deployed_services(app, env)

    def is_job_deployed(self, app: str, env: str, name: str) -> bool:
        return name in self.list_deployed_jobs(app, env)

    def list_sns_topics(self, app: str, env: str) -> list[Topic]:
        refs = self._app(app).topics.get(env, [])
        return [Topic.from_arn(ref.arn, app, env, ref.workload) for ref in refs]

    def list_deployed_pipelines(self, app: str) -> list[DeployedPipeline]:
        return [
            DeployedPipeline(
                app=app,
                name=p.name,
                resource_name=p.resource_name or p.name,
                is_legacy=p.is_legacy,
            )
            for p in self._app(app).pipelines
        ]

    # ── Tasks ────────────────────────────────────────────────────

    def list_default_task_stacks(self) -> list[TaskStackInfo]:
        return [TaskStackInfo(stack_name=s) for s in self._inventory.default_cluster.task_stacks]

    def list_task_stacks(self, app: str, env: str) -> list[TaskStackInfo]:
        stacks = self._app(app).task_stacks.get(env, [])
        return [TaskStackInfo(stack_name=s, app=app, env=env) for s in stacks]

    def list_active_default_cluster_tasks(self, task_filter: TaskFilter) -> list[RunningTask]:
        return [t for t in self._inventory.default_cluster.tasks if _matches(t, task_filter)]

    def list_active_app_env_tasks(
        self, app: str, env: str, task_filter: TaskFilter
    ) -> list[RunningTask]:
        return [t for t in self._app(app).tasks.get(env, []) if _matches(t, task_filter)]


class InventoryWorkspace:
    """The local workspace as recorded in the snapshot."""

    def __init__(self, inventory: Inventory):
        if inventory.workspace is None:
            raise InventoryError("inventory has no workspace section")
        self._ws = inventory.workspace

    def summary(self) -> WorkspaceSummary:
        return WorkspaceSummary(application=self._ws.application)

    def list_services(self) -> list[str]:
        return list(self._ws.services)

    def list_jobs(self) -> list[str]:
        return list(self._ws.jobs)

    def list_workloads(self) -> list[str]:
        return [*self._ws.services, *self._ws.jobs]

    def list_environments(self) -> list[str]:
        return list(self._ws.environments)

    def list_pipelines(self) -> list[WorkspacePipeline]:
        return list(self._ws.pipelines)

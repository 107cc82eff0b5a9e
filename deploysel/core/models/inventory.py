"""
Inventory model — a snapshot of the config store, deploy state and workspace.

Loaded from deploysel.yml. The inventory adapters answer every listing
question the selectors ask from this one document, so the CLI can run
without talking to a cloud account.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from deploysel.core.models.pipeline import WorkspacePipeline
from deploysel.core.models.task import RunningTask


class TopicRef(BaseModel):
    """A published topic as declared in the snapshot."""

    workload: str
    arn: str


class PipelineRef(BaseModel):
    """A deployed pipeline as declared in the snapshot."""

    name: str
    resource_name: str = ""
    is_legacy: bool = False


class EnvironmentRef(BaseModel):
    name: str
    region: str = ""
    account_id: str = ""
    prod: bool = False


class WorkloadRef(BaseModel):
    name: str
    type: str = ""


class AppInventory(BaseModel):
    """Everything known about one application."""

    name: str
    domain: str = ""
    environments: list[EnvironmentRef] = Field(default_factory=list)
    workloads: list[WorkloadRef] = Field(default_factory=list)

    # env name → deployed workload names
    deployments: dict[str, list[str]] = Field(default_factory=dict)
    # env name → topics published in that env
    topics: dict[str, list[TopicRef]] = Field(default_factory=dict)
    # env name → task stack names
    task_stacks: dict[str, list[str]] = Field(default_factory=dict)
    # env name → running tasks
    tasks: dict[str, list[RunningTask]] = Field(default_factory=dict)
    pipelines: list[PipelineRef] = Field(default_factory=list)

    def get_environment(self, name: str) -> EnvironmentRef | None:
        for env in self.environments:
            if env.name == name:
                return env
        return None

    def get_workload(self, name: str) -> WorkloadRef | None:
        for wl in self.workloads:
            if wl.name == name:
                return wl
        return None


class ClusterInventory(BaseModel):
    """Tasks and task stacks living in the account's default cluster."""

    task_stacks: list[str] = Field(default_factory=list)
    tasks: list[RunningTask] = Field(default_factory=list)


class WorkspaceSummary(BaseModel):
    """The one-shot summary of a local workspace."""

    application: str
    path: str = ""


class WorkspaceInventory(BaseModel):
    """What the local workspace holds."""

    application: str
    services: list[str] = Field(default_factory=list)
    jobs: list[str] = Field(default_factory=list)
    environments: list[str] = Field(default_factory=list)
    pipelines: list[WorkspacePipeline] = Field(default_factory=list)


class Inventory(BaseModel):
    """Root snapshot — loaded from deploysel.yml."""

    version: int = 1

    applications: list[AppInventory] = Field(default_factory=list)
    default_cluster: ClusterInventory = Field(default_factory=ClusterInventory)
    workspace: WorkspaceInventory | None = None

    def get_application(self, name: str) -> AppInventory | None:
        """Look up an application by name."""
        for app in self.applications:
            if app.name == name:
                return app
        return None

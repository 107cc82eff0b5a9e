"""
Domain models — Pydantic types for the selector.

All models are re-exported here for convenient access:

    from deploysel.core.models import Workload, DeployedWorkload, Topic
"""

from deploysel.core.models.app import Application, Environment
from deploysel.core.models.inventory import (
    AppInventory,
    ClusterInventory,
    Inventory,
    WorkspaceInventory,
    WorkspaceSummary,
)
from deploysel.core.models.pipeline import DeployedPipeline, WorkspacePipeline
from deploysel.core.models.task import RunningTask, TaskFilter, TaskStackInfo
from deploysel.core.models.topic import Topic
from deploysel.core.models.workload import DeployedWorkload, Workload

__all__ = [
    # inventory.py
    "AppInventory",
    # app.py
    "Application",
    "ClusterInventory",
    # pipeline.py
    "DeployedPipeline",
    # workload.py
    "DeployedWorkload",
    "Environment",
    "Inventory",
    # task.py
    "RunningTask",
    "TaskFilter",
    "TaskStackInfo",
    # topic.py
    "Topic",
    "Workload",
    "WorkspaceInventory",
    "WorkspacePipeline",
    "WorkspaceSummary",
]

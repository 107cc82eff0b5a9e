"""
Pipeline models — manifests in the workspace and pipelines in the account.
"""

from __future__ import annotations

from pydantic import BaseModel


class WorkspacePipeline(BaseModel):
    """A pipeline manifest found in the local workspace."""

    name: str
    path: str = ""


class DeployedPipeline(BaseModel):
    """A pipeline deployed for an application.

    Legacy pipelines use their name as the resource name.
    """

    app: str
    resource_name: str
    name: str
    is_legacy: bool = False

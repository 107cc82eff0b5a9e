"""
Workload models — registered workloads and their deployed instances.

A ``Workload`` is what the config store knows about (name + type).
A ``DeployedWorkload`` pairs a workload with one environment it is
actually running in. Deployed workloads are rebuilt on every
resolution call; they are never cached.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

# Known workload types. The set is open; anything else is still a valid type.
LB_WEB_SERVICE = "Load Balanced Web Service"
BACKEND_SERVICE = "Backend Service"
WORKER_SERVICE = "Worker Service"
REQUEST_DRIVEN_WEB_SERVICE = "Request-Driven Web Service"
STATIC_SITE = "Static Site"
SCHEDULED_JOB = "Scheduled Job"

JOB_TYPES = (SCHEDULED_JOB,)


def is_job_type(workload_type: str) -> bool:
    """Jobs are the known job types; every other type, or none, is a service."""
    return workload_type in JOB_TYPES


class Workload(BaseModel):
    """A service or job registered under an application."""

    app: str = ""
    name: str
    type: str = ""

    @property
    def is_service(self) -> bool:
        return not self.is_job

    @property
    def is_job(self) -> bool:
        return is_job_type(self.type)


class DeployedWorkload(BaseModel):
    """A workload known to be deployed to a specific environment.

    Identity is ``(name, env)``; ``type`` only feeds filter predicates.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    env: str
    type: str = ""

    @property
    def key(self) -> tuple[str, str]:
        return (self.name, self.env)

    def __str__(self) -> str:
        return f"{self.name} ({self.env})"

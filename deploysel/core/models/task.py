"""
Task models — one-off task stacks and running ECS tasks.
"""

from __future__ import annotations

from pydantic import BaseModel

TASK_STACK_PREFIX = "task-"
TASK_GROUP_FORMAT = "copilot-{}"


class TaskStackInfo(BaseModel):
    """A CloudFormation stack created for a one-off task."""

    stack_name: str
    app: str = ""
    env: str = ""
    bucket: str = ""

    @property
    def task_name(self) -> str:
        """The task name the user typed when running it."""
        return self.stack_name.removeprefix(TASK_STACK_PREFIX)


class TaskFilter(BaseModel):
    """Criteria handed to the task lister."""

    task_group: str = ""
    task_id: str = ""
    copilot_only: bool = False


class RunningTask(BaseModel):
    """An active task in a cluster."""

    task_arn: str
    task_definition_arn: str = ""
    task_group: str = ""
    last_status: str = "RUNNING"
    managed: bool = True    # started by the deployment tool

    @property
    def task_id(self) -> str:
        return self.task_arn.rsplit("/", 1)[-1]

    @property
    def definition(self) -> str:
        """``family:revision`` of the task definition."""
        return self.task_definition_arn.rsplit("/", 1)[-1]

    def __str__(self) -> str:
        short_id = self.task_id[:8]
        if self.definition:
            return f"{short_id} ({self.definition})"
        return short_id

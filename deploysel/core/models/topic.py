"""
Topic model — an SNS topic published by a workload in one environment.

The same logical topic exists once per environment, each with its own
ARN. ``str(topic)`` leaves the environment out, so two topics from
different environments compare equal by their string form; ``arn`` is
the per-environment identity and doubles as a presentation sort key.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

_ARN_PARTS = 6
_NAME_PREFIX = "{app}-{env}-{workload}-"


class Topic(BaseModel):
    """A topic scoped to ``(app, env, workload, name)``."""

    model_config = ConfigDict(frozen=True)

    arn: str
    app: str
    env: str
    workload: str
    name: str

    @classmethod
    def from_arn(cls, arn: str, app: str, env: str, workload: str) -> Topic:
        """Build a topic from its ARN.

        The ARN's resource must read ``{app}-{env}-{workload}-{name}``.

        Raises:
            ValueError: If the ARN is malformed or belongs to another workload.
        """
        parts = arn.split(":", _ARN_PARTS - 1)
        if len(parts) != _ARN_PARTS or parts[0] != "arn" or not parts[5]:
            raise ValueError(f"invalid ARN format: {arn}")

        resource = parts[5]
        prefix = _NAME_PREFIX.format(app=app, env=env, workload=workload)
        if not resource.startswith(prefix) or resource == prefix:
            raise ValueError(
                f"topic ARN {arn} does not belong to {workload} in {app}/{env}"
            )
        return cls(
            arn=arn,
            app=app,
            env=env,
            workload=workload,
            name=resource[len(prefix):],
        )

    def __str__(self) -> str:
        return f"{self.name} ({self.workload})"

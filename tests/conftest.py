"""
Shared test fixtures and configuration.
"""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from deploysel.adapters.mock import MockPrompter
from deploysel.core.models.workload import BACKEND_SERVICE
from fakes import FakeStore


@pytest.fixture
def prompter() -> MockPrompter:
    """A prompter that answers with the first option unless scripted."""
    return MockPrompter()


@pytest.fixture
def mock_app_store() -> FakeStore:
    """mockApp with one env "test" and two deployed services."""
    return FakeStore(
        apps=["mockApp"],
        envs={"mockApp": ["test"]},
        workloads={"mockApp": [("mockSvc1", BACKEND_SERVICE), ("mockSvc2", BACKEND_SERVICE)]},
        deployed={("mockApp", "test"): ["mockSvc1", "mockSvc2"]},
    )


INVENTORY_YAML = textwrap.dedent("""\
    version: 1
    applications:
      - name: shop
        environments:
          - name: test
          - name: prod
            prod: true
        workloads:
          - name: api
            type: Load Balanced Web Service
          - name: worker
            type: Worker Service
          - name: report
            type: Scheduled Job
        deployments:
          test: [api, worker, report]
          prod: [api]
        topics:
          test:
            - workload: api
              arn: "arn:aws:sns:us-west-2:111111111111:shop-test-api-orders"
            - workload: api
              arn: "arn:aws:sns:us-west-2:111111111111:shop-test-api-events"
          prod:
            - workload: api
              arn: "arn:aws:sns:us-west-2:222222222222:shop-prod-api-orders"
        task_stacks:
          test: [task-db-migrate]
        tasks:
          test:
            - task_arn: "arn:aws:ecs:us-west-2:111111111111:task/shop-test/4082490ee6c245e09d2145010aa1ba8d"
              task_definition_arn: "arn:aws:ecs:us-west-2:111111111111:task-definition/copilot-db-migrate:3"
              task_group: copilot-db-migrate
        pipelines:
          - name: release
            resource_name: pipeline-shop-release
      - name: blog
        environments:
          - name: prod
    default_cluster:
      task_stacks: [task-cleanup, task-backfill]
    workspace:
      application: shop
      services: [worker, api, ghost]
      jobs: [report]
      environments: [prod]
      pipelines:
        - name: release
          path: copilot/pipelines/release/manifest.yml
""")


@pytest.fixture
def inventory_file(tmp_path: Path) -> Path:
    """Write a two-app deploysel.yml and return its path."""
    path = tmp_path / "deploysel.yml"
    path.write_text(INVENTORY_YAML)
    return path

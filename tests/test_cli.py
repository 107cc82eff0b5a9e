"""
Tests for CLI commands — global options and the select group.
"""

import json
from pathlib import Path

from click.testing import CliRunner

from deploysel.adapters.mock import MockPrompter
from deploysel.core.selector import NO_MORE_ENVIRONMENTS
from deploysel.main import cli


def _invoke(config: Path, *args: str, prompter: MockPrompter | None = None):
    runner = CliRunner()
    return runner.invoke(
        cli,
        ["--config", str(config), "select", *args],
        obj={"prompter": prompter or MockPrompter()},
    )


class TestCLIGlobal:
    """Tests for global CLI behavior."""

    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Deploy Selector" in result.output

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_select_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["select", "--help"])
        assert result.exit_code == 0
        for name in ("app", "env", "envs", "svc", "job", "deployed", "topics", "pipeline", "task"):
            assert name in result.output

    def test_missing_config(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        runner = CliRunner()
        result = runner.invoke(cli, ["select", "app"], obj={"prompter": MockPrompter()})
        assert result.exit_code == 1
        assert "No deploysel.yml" in result.output


# ── Applications & environments ──────────────────────────────────────


class TestSelectAppEnv:
    def test_app(self, inventory_file):
        prompter = MockPrompter("blog")
        result = _invoke(inventory_file, "app", prompter=prompter)
        assert result.exit_code == 0
        assert "Application: blog" in result.output
        assert prompter.call_log[0].options == ["shop", "blog"]

    def test_app_json(self, inventory_file):
        result = _invoke(inventory_file, "app", "--json")
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data == {"value": "shop", "auto_selected": False, "notice": None}

    def test_env_auto_selected_prints_notice(self, inventory_file):
        result = _invoke(inventory_file, "env", "--app", "blog")
        assert result.exit_code == 0
        assert "Only found one environment, defaulting to: prod" in result.output
        assert "Environment: prod" in result.output

    def test_quiet_hides_notice(self, inventory_file):
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["--quiet", "--config", str(inventory_file), "select", "env", "--app", "blog"],
            obj={"prompter": MockPrompter()},
        )
        assert result.exit_code == 0
        assert "defaulting" not in result.output
        assert "Environment: prod" in result.output

    def test_env_asks_for_app(self, inventory_file):
        prompter = MockPrompter("blog")
        result = _invoke(inventory_file, "env", prompter=prompter)
        assert result.exit_code == 0
        assert prompter.call_log[0].options == ["shop", "blog"]
        assert "Environment: prod" in result.output

    def test_envs(self, inventory_file):
        prompter = MockPrompter("prod", NO_MORE_ENVIRONMENTS)
        result = _invoke(inventory_file, "envs", "--app", "shop", prompter=prompter)
        assert result.exit_code == 0
        assert "Stages: prod" in result.output
        assert prompter.call_log[1].options == ["test", NO_MORE_ENVIRONMENTS]

    def test_unknown_app(self, inventory_file):
        result = _invoke(inventory_file, "env", "--app", "nope")
        assert result.exit_code == 1
        assert "❌" in result.output
        assert "application nope not found" in result.output


# ── Workloads ────────────────────────────────────────────────────────


class TestSelectWorkloads:
    def test_svc(self, inventory_file):
        result = _invoke(inventory_file, "svc", "--app", "shop", prompter=MockPrompter("worker"))
        assert result.exit_code == 0
        assert "Service: worker" in result.output

    def test_svc_workspace(self, inventory_file):
        prompter = MockPrompter()
        result = _invoke(inventory_file, "svc", "--workspace", prompter=prompter)
        assert result.exit_code == 0
        assert prompter.call_log[0].options == ["api", "worker"]
        assert "Service: api" in result.output

    def test_job(self, inventory_file):
        result = _invoke(inventory_file, "job", "--app", "shop")
        assert result.exit_code == 0
        assert "Job: report" in result.output

    def test_no_jobs(self, inventory_file):
        result = _invoke(inventory_file, "job", "--app", "blog")
        assert result.exit_code == 1
        assert "no jobs found in app blog" in result.output

    def test_deployed(self, inventory_file):
        prompter = MockPrompter("api (test)")
        result = _invoke(inventory_file, "deployed", "--app", "shop", prompter=prompter)
        assert result.exit_code == 0
        assert prompter.call_log[0].options == ["api (prod)", "api (test)", "worker (test)"]
        assert "Deployed: api (test)" in result.output

    def test_deployed_pinned_env_and_type(self, inventory_file):
        result = _invoke(
            inventory_file, "deployed", "--app", "shop",
            "--env", "test", "--type", "Worker Service",
        )
        assert result.exit_code == 0
        assert "Only the service worker is found in environment test" in result.output
        assert "Deployed: worker (test)" in result.output

    def test_deployed_job_json(self, inventory_file):
        result = _invoke(inventory_file, "deployed", "--app", "shop", "--kind", "job", "--json")
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["value"] == {"name": "report", "env": "test", "type": "Scheduled Job"}
        assert data["auto_selected"] is True

    def test_deployed_filter_rejects_all(self, inventory_file):
        result = _invoke(inventory_file, "deployed", "--app", "shop", "--type", "Static Site")
        assert result.exit_code == 1
        assert "no matching deployed services found in application shop" in result.output

    def test_deployed_nothing_in_env(self, inventory_file):
        result = _invoke(
            inventory_file, "deployed", "--app", "shop",
            "--env", "prod", "--name", "worker",
        )
        assert result.exit_code == 1
        assert "no deployed services found in application shop" in result.output


# ── Topics, pipelines, tasks ─────────────────────────────────────────


class TestSelectOther:
    def test_topics(self, inventory_file):
        prompter = MockPrompter()
        result = _invoke(inventory_file, "topics", "--app", "shop", prompter=prompter)
        assert result.exit_code == 0
        assert prompter.call_log[0].options == ["orders (api)"]
        assert "Topics: orders (api)" in result.output

    def test_topics_none_shared(self, inventory_file):
        result = _invoke(inventory_file, "topics", "--app", "blog")
        assert result.exit_code == 0
        assert "No SNS topics are currently deployed in all environments" in result.output
        assert "Topics: (none)" in result.output

    def test_workspace_pipeline(self, inventory_file):
        result = _invoke(inventory_file, "pipeline")
        assert result.exit_code == 0
        assert "Pipeline: release" in result.output

    def test_workspace_pipeline_json(self, inventory_file):
        result = _invoke(inventory_file, "pipeline", "--json")
        data = json.loads(result.output)
        assert data["value"]["path"] == "copilot/pipelines/release/manifest.yml"

    def test_deployed_pipeline(self, inventory_file):
        result = _invoke(inventory_file, "pipeline", "--deployed", "--app", "shop")
        assert result.exit_code == 0
        assert "Pipeline: release" in result.output

    def test_task_default_cluster(self, inventory_file):
        prompter = MockPrompter("backfill")
        result = _invoke(inventory_file, "task", "--default", prompter=prompter)
        assert result.exit_code == 0
        assert prompter.call_log[0].options == ["cleanup", "backfill"]
        assert "Task: backfill" in result.output

    def test_task_in_env(self, inventory_file):
        result = _invoke(inventory_file, "task", "--app", "shop", "--env", "test")
        assert result.exit_code == 0
        assert "Task: db-migrate" in result.output

    def test_task_conflicting_scope(self, inventory_file):
        result = _invoke(inventory_file, "task", "--default", "--env", "test")
        assert result.exit_code == 1
        assert "cannot specify both default cluster and env" in result.output

    def test_task_needs_scope(self, inventory_file):
        result = _invoke(inventory_file, "task", "--app", "shop")
        assert result.exit_code == 1
        assert "must specify either app and env or default cluster" in result.output

    def test_running_task(self, inventory_file):
        result = _invoke(
            inventory_file, "task", "--running",
            "--app", "shop", "--env", "test", "--group", "db-migrate",
        )
        assert result.exit_code == 0
        assert "Task: 4082490e (copilot-db-migrate:3)" in result.output

    def test_running_task_none_in_group(self, inventory_file):
        result = _invoke(
            inventory_file, "task", "--running",
            "--app", "shop", "--env", "test", "--group", "other",
        )
        assert result.exit_code == 1
        assert "no running tasks found" in result.output

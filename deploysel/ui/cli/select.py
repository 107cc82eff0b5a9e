"""
CLI commands for interactive target selection.

Thin wrappers over ``deploysel.core.selector``: each command builds a
selector over the inventory snapshot and the terminal prompter, runs one
resolution, and prints the result.
"""

from __future__ import annotations

import json
import sys
from typing import Any

import click

from deploysel.adapters.base import Prompter
from deploysel.adapters.inventory import InventoryError, InventoryStore, InventoryWorkspace
from deploysel.adapters.terminal import TerminalPrompter
from deploysel.core.config.loader import ConfigError, load_inventory
from deploysel.core.selector import (
    AppEnvSelector,
    CFTaskSelector,
    ConfigSelector,
    DeployedPipelineSelector,
    DeploySelector,
    PipelineSelector,
    Selection,
    SelectorError,
    TaskSelector,
    WorkloadKind,
    WorkspaceSelector,
    ordinal_final_message,
    task_in_app_env,
    task_in_default_cluster,
    task_in_group,
    task_with_id,
    with_env,
    with_name,
    with_workload_types,
)

_KINDS = {"service": WorkloadKind.SERVICE, "job": WorkloadKind.JOB, "any": WorkloadKind.ANY}


def _prompter(ctx: click.Context) -> Prompter:
    """The prompter for this invocation (tests may inject one via ctx.obj)."""
    return ctx.obj.get("prompter") or TerminalPrompter(show_help=not ctx.obj.get("quiet"))


def _store(ctx: click.Context) -> InventoryStore:
    return InventoryStore(load_inventory(ctx.obj.get("config_path")))


def _fail(error: Exception) -> None:
    click.secho(f"❌ {error}", fg="red")
    sys.exit(1)


def _to_json(value: Any) -> Any:
    if hasattr(value, "model_dump"):
        return value.model_dump()
    if isinstance(value, list):
        return [_to_json(v) for v in value]
    return value


def _report(ctx: click.Context, selection: Selection[Any], as_json: bool, label: str) -> None:
    """Print a selection: notice first, then the value."""
    if as_json:
        click.echo(json.dumps({
            "value": _to_json(selection.value),
            "auto_selected": selection.auto_selected,
            "notice": selection.notice,
        }, indent=2))
        return

    if selection.notice and not ctx.obj.get("quiet"):
        click.secho(f"ℹ️  {selection.notice}", fg="yellow")
    value = selection.value
    if isinstance(value, list):
        text = ", ".join(str(v) for v in value) or "(none)"
    else:
        text = str(value)
    click.echo(f"{label} {text}")


def _resolve_app(ctx: click.Context, store: InventoryStore, app: str | None) -> str:
    """Use --app if given, otherwise ask for one."""
    if app:
        return app
    selection = AppEnvSelector(_prompter(ctx), store).application(
        "Which application?", "An application groups environments and workloads."
    )
    if selection.notice and not ctx.obj.get("quiet"):
        click.secho(f"ℹ️  {selection.notice}", fg="yellow")
    return selection.value


_json_option = click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
_app_option = click.option("--app", "-a", default=None, help="Application name (default: ask).")

_errors = (SelectorError, ConfigError, InventoryError)


@click.group()
def select() -> None:
    """Select — resolve apps, environments, workloads, topics and tasks."""


# ═══════════════════════════════════════════════════════════════════
#  Applications & environments
# ═══════════════════════════════════════════════════════════════════


@select.command("app")
@_json_option
@click.pass_context
def select_app(ctx: click.Context, as_json: bool) -> None:
    """Pick an application."""
    try:
        store = _store(ctx)
        result = AppEnvSelector(_prompter(ctx), store).application(
            "Which application?", "An application groups environments and workloads."
        )
    except _errors as e:
        _fail(e)
        return
    _report(ctx, result, as_json, "Application:")


@select.command("env")
@_app_option
@_json_option
@click.pass_context
def select_env(ctx: click.Context, app: str | None, as_json: bool) -> None:
    """Pick one environment of an application."""
    try:
        store = _store(ctx)
        app = _resolve_app(ctx, store, app)
        result = AppEnvSelector(_prompter(ctx), store).environment(
            "Which environment?", "An environment is an isolated deployment stage.", app
        )
    except _errors as e:
        _fail(e)
        return
    _report(ctx, result, as_json, "Environment:")


@select.command("envs")
@_app_option
@_json_option
@click.pass_context
def select_envs(ctx: click.Context, app: str | None, as_json: bool) -> None:
    """Pick an ordered list of environments (pipeline stages)."""
    try:
        store = _store(ctx)
        app = _resolve_app(ctx, store, app)
        result = AppEnvSelector(_prompter(ctx), store).environments(
            "Which environment should be the next stage?",
            "Stages deploy in the order you pick them.",
            app,
            ordinal_final_message,
        )
    except _errors as e:
        _fail(e)
        return
    _report(ctx, result, as_json, "Stages:")


# ═══════════════════════════════════════════════════════════════════
#  Workloads
# ═══════════════════════════════════════════════════════════════════


def _select_registered(ctx: click.Context, kind: str, app: str | None, workspace: bool) -> Selection[str]:
    inventory = load_inventory(ctx.obj.get("config_path"))
    store = InventoryStore(inventory)
    msg = f"Which {kind}?"
    help = f"Only {kind}s registered in the application are listed."
    if workspace:
        sel = WorkspaceSelector(_prompter(ctx), store, InventoryWorkspace(inventory))
        return getattr(sel, kind)(msg, help)
    app = _resolve_app(ctx, store, app)
    return getattr(ConfigSelector(_prompter(ctx), store), kind)(msg, help, app)


@select.command("svc")
@_app_option
@click.option("--workspace", "-w", is_flag=True, help="Only services with a local manifest.")
@_json_option
@click.pass_context
def select_svc(ctx: click.Context, app: str | None, workspace: bool, as_json: bool) -> None:
    """Pick a registered service."""
    try:
        result = _select_registered(ctx, "service", app, workspace)
    except _errors as e:
        _fail(e)
        return
    _report(ctx, result, as_json, "Service:")


@select.command("job")
@_app_option
@click.option("--workspace", "-w", is_flag=True, help="Only jobs with a local manifest.")
@_json_option
@click.pass_context
def select_job(ctx: click.Context, app: str | None, workspace: bool, as_json: bool) -> None:
    """Pick a registered job."""
    try:
        result = _select_registered(ctx, "job", app, workspace)
    except _errors as e:
        _fail(e)
        return
    _report(ctx, result, as_json, "Job:")


@select.command("deployed")
@_app_option
@click.option(
    "--kind", "-k",
    type=click.Choice(sorted(_KINDS)),
    default="service",
    show_default=True,
    help="What to look for.",
)
@click.option("--name", "-n", default=None, help="Pin the workload name.")
@click.option("--env", "-e", "env_name", default=None, help="Pin the environment.")
@click.option("--type", "-t", "types", multiple=True, help="Only these workload types (repeatable).")
@_json_option
@click.pass_context
def select_deployed(
    ctx: click.Context,
    app: str | None,
    kind: str,
    name: str | None,
    env_name: str | None,
    types: tuple[str, ...],
    as_json: bool,
) -> None:
    """Pick a workload that is deployed in some environment."""
    workload_kind = _KINDS[kind]
    opts = []
    if name:
        opts.append(with_name(name))
    if env_name:
        opts.append(with_env(env_name))
    if types:
        opts.append(with_workload_types(types))

    try:
        store = _store(ctx)
        app = _resolve_app(ctx, store, app)
        result = DeploySelector(_prompter(ctx), store, store).locate(
            workload_kind,
            f"Which deployed {workload_kind.value}?",
            "Listed as name (environment).",
            app,
            *opts,
        )
    except _errors as e:
        _fail(e)
        return
    _report(ctx, result, as_json, "Deployed:")


@select.command("topics")
@_app_option
@_json_option
@click.pass_context
def select_topics(ctx: click.Context, app: str | None, as_json: bool) -> None:
    """Pick topics that exist in every environment of an application."""
    try:
        store = _store(ctx)
        app = _resolve_app(ctx, store, app)
        result = DeploySelector(_prompter(ctx), store, store).topics(
            "Which topics should this workload subscribe to?",
            "Only topics deployed in all environments are listed.",
            app,
        )
    except _errors as e:
        _fail(e)
        return
    _report(ctx, result, as_json, "Topics:")


# ═══════════════════════════════════════════════════════════════════
#  Pipelines & tasks
# ═══════════════════════════════════════════════════════════════════


@select.command("pipeline")
@_app_option
@click.option("--deployed", "-d", is_flag=True, help="Pick from deployed pipelines instead of the workspace.")
@_json_option
@click.pass_context
def select_pipeline(ctx: click.Context, app: str | None, deployed: bool, as_json: bool) -> None:
    """Pick a pipeline."""
    try:
        inventory = load_inventory(ctx.obj.get("config_path"))
        if deployed:
            store = InventoryStore(inventory)
            app = _resolve_app(ctx, store, app)
            result = DeployedPipelineSelector(_prompter(ctx), store).deployed_pipeline(
                "Which pipeline?", "Pipelines deployed for the application.", app
            )
        else:
            result = PipelineSelector(_prompter(ctx), InventoryWorkspace(inventory)).pipeline(
                "Which pipeline?", "Pipeline manifests in your workspace."
            )
    except _errors as e:
        _fail(e)
        return
    if as_json:
        _report(ctx, result, as_json, "Pipeline:")
        return
    _report(ctx, result.map(lambda p: p.name), as_json, "Pipeline:")


@select.command("task")
@click.option("--app", "-a", default=None, help="Application name.")
@click.option("--env", "-e", "env_name", default=None, help="Environment name.")
@click.option("--default", "default_cluster", is_flag=True, help="Use the default cluster.")
@click.option("--running", is_flag=True, help="Pick a running task instead of a task stack.")
@click.option("--group", default="", help="Task group (running tasks only).")
@click.option("--id", "task_id", default="", help="Task ID prefix (running tasks only).")
@_json_option
@click.pass_context
def select_task(
    ctx: click.Context,
    app: str | None,
    env_name: str | None,
    default_cluster: bool,
    running: bool,
    group: str,
    task_id: str,
    as_json: bool,
) -> None:
    """Pick a one-off task, by stack or among running tasks."""
    opts = []
    if default_cluster:
        opts.append(task_in_default_cluster())
    if app or env_name:
        opts.append(task_in_app_env(app or "", env_name or ""))

    try:
        store = _store(ctx)
        if running:
            result: Selection[Any] = TaskSelector(_prompter(ctx), store).running_task(
                "Which running task?", "Listed as task ID (task definition).",
                *opts, task_in_group(group), task_with_id(task_id),
            )
        else:
            result = CFTaskSelector(_prompter(ctx), store).task(
                "Which task?", "One-off tasks started from this account.", *opts
            )
    except _errors as e:
        _fail(e)
        return
    _report(ctx, result, as_json, "Task:")

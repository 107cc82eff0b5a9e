"""
Selectors — one-shot "list, then prompt" resolvers.

Each public method lists candidates from its collaborators, hands them
to the auto-resolve gate and returns a ``Selection``. The one exception
is ``AppEnvSelector.environments``, which runs the multi-pick loop.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from deploysel.adapters.base import Prompter, PromptConfig
from deploysel.core.models.pipeline import DeployedPipeline, WorkspacePipeline
from deploysel.core.models.task import RunningTask, TaskFilter, TaskStackInfo
from deploysel.core.models.workload import Workload
from deploysel.core.selector.collaborators import (
    AppEnvLister,
    ConfigLister,
    DeployedPipelineLister,
    TaskLister,
    TaskStackDescriber,
    WorkspacePipelineLister,
    WorkspaceRetriever,
)
from deploysel.core.selector.errors import (
    ListingError,
    MisconfigurationError,
    NoCandidatesError,
    SelectionError,
)
from deploysel.core.selector.gate import Selection, auto_resolve
from deploysel.core.selector.options import TaskOption, TaskOptions
from deploysel.core.selector.reconcile import reconcile
from deploysel.core.selector.sequence import NO_MORE_ENVIRONMENTS, pick_many

logger = logging.getLogger(__name__)

# Labels shown next to the answer once the user has chosen.
APP_FINAL_MESSAGE = "Application:"
ENV_FINAL_MESSAGE = "Environment:"
SVC_FINAL_MESSAGE = "Service name:"
JOB_FINAL_MESSAGE = "Job name:"
WORKLOAD_FINAL_MESSAGE = "Name:"
TASK_FINAL_MESSAGE = "Task:"
PIPELINE_FINAL_MESSAGE = "Pipeline:"


def _defaulting(kind: str) -> Callable[[str], str]:
    return lambda value: f"Only found one {kind}, defaulting to: {value}"


class AppEnvSelector:
    """Selects applications and environments from the config store."""

    def __init__(self, prompt: Prompter, config: AppEnvLister):
        self._prompt = prompt
        self._config = config

    def _select_one(self, msg: str, help: str, final_message: str) -> Callable[[list[str]], str]:
        """Prompt continuation for the gate."""
        return lambda options: self._prompt.select_one(
            msg, help, options, PromptConfig(final_message=final_message)
        )

    def application(self, msg: str, help: str, *additional: str) -> Selection[str]:
        """Pick an application. ``additional`` options are offered after the apps."""
        try:
            names = [a.name for a in self._config.list_applications()]
        except Exception as e:
            raise ListingError("list applications", e) from e

        return auto_resolve(
            [*names, *additional],
            pick=self._select_one(msg, help, APP_FINAL_MESSAGE),
            action="select application",
            empty=NoCandidatesError("no apps found", kind="application"),
            notice=_defaulting("application"),
        )

    def environment(self, msg: str, help: str, app: str, *additional: str) -> Selection[str]:
        """Pick one environment of ``app``."""
        try:
            names = self._environment_names(app)
        except ListingError as e:
            raise ListingError(f"get environments for app {app} from metadata store", e) from e

        return auto_resolve(
            [*names, *additional],
            pick=self._select_one(msg, help, ENV_FINAL_MESSAGE),
            action="select environment",
            empty=NoCandidatesError(
                f"no environments found in app {app}", kind="environment", app=app
            ),
            notice=_defaulting("environment"),
        )

    def environments(
        self,
        msg: str,
        help: str,
        app: str,
        step_config: Callable[[int], PromptConfig],
    ) -> Selection[list[str]]:
        """Pick an ordered sequence of environments, e.g. pipeline stages.

        Every environment is offered, even if there is only one, along with
        an option to stop. The result keeps the order the user chose in.
        """
        try:
            names = self._environment_names(app)
        except ListingError as e:
            raise ListingError(f"get environments for app {app} from metadata store", e) from e
        if not names:
            raise NoCandidatesError(
                f"no environments found in app {app}", kind="environment", app=app
            )

        def pick(step: int, available: list[str]) -> str:
            try:
                return self._prompt.select_one(msg, help, available, step_config(step))
            except Exception as e:
                raise SelectionError("select environments", e) from e

        return Selection(value=pick_many(names, pick, NO_MORE_ENVIRONMENTS))

    def _environment_names(self, app: str) -> list[str]:
        try:
            return [e.name for e in self._config.list_environments(app)]
        except Exception as e:
            raise ListingError("list environments", e) from e


class ConfigSelector(AppEnvSelector):
    """Also selects services and jobs, straight from the config store."""

    def __init__(self, prompt: Prompter, config: ConfigLister):
        super().__init__(prompt, config)
        self._config: ConfigLister = config

    def service(self, msg: str, help: str, app: str) -> Selection[str]:
        """Pick a service registered in ``app``."""
        return self._registered(
            msg, help, app, "service", self._config.list_services, SVC_FINAL_MESSAGE
        )

    def job(self, msg: str, help: str, app: str) -> Selection[str]:
        """Pick a job registered in ``app``."""
        return self._registered(
            msg, help, app, "job", self._config.list_jobs, JOB_FINAL_MESSAGE
        )

    def workload(self, msg: str, help: str, app: str) -> Selection[str]:
        """Pick any workload registered in ``app``."""
        return self._registered(
            msg, help, app, "workload", self._config.list_workloads, WORKLOAD_FINAL_MESSAGE
        )

    def _registered(
        self,
        msg: str,
        help: str,
        app: str,
        kind: str,
        lister: Callable[[str], list[Workload]],
        final_message: str,
    ) -> Selection[str]:
        try:
            names = [wl.name for wl in lister(app)]
        except Exception as e:
            raise ListingError(f"list {kind}s", e) from e

        return auto_resolve(
            names,
            pick=self._select_one(msg, help, final_message),
            action=f"select {kind}",
            empty=NoCandidatesError(f"no {kind}s found in app {app}", kind=kind, app=app),
            notice=_defaulting(kind),
        )


class WorkspaceSelector(AppEnvSelector):
    """Selects workloads and environments that exist both locally and in the store.

    The store decides the order; the workspace only decides membership.
    """

    def __init__(self, prompt: Prompter, config: ConfigLister, ws: WorkspaceRetriever):
        super().__init__(prompt, config)
        self._config: ConfigLister = config
        self._ws = ws

    def service(self, msg: str, help: str) -> Selection[str]:
        """Pick a service from the current workspace."""
        return self._local_workload(
            msg, help,
            ws_list=self._ws.list_services,
            store_list=self._config.list_services,
            noun="services",
            empty_message="no services found",
            kind="service",
            final_message=SVC_FINAL_MESSAGE,
        )

    def job(self, msg: str, help: str) -> Selection[str]:
        """Pick a job from the current workspace."""
        return self._local_workload(
            msg, help,
            ws_list=self._ws.list_jobs,
            store_list=self._config.list_jobs,
            noun="jobs",
            empty_message="no jobs found",
            kind="job",
            final_message=JOB_FINAL_MESSAGE,
        )

    def workload(self, msg: str, help: str) -> Selection[str]:
        """Pick a service or job from the current workspace."""
        return self._local_workload(
            msg, help,
            ws_list=self._ws.list_workloads,
            store_list=self._config.list_workloads,
            noun="jobs and services",
            empty_message="no jobs or services found",
            kind="workload",
            final_message=WORKLOAD_FINAL_MESSAGE,
        )

    def environment_in_workspace(self, msg: str, help: str) -> Selection[str]:
        """Pick an environment that has a local manifest and exists in the store."""
        app = self._application()
        try:
            local = self._ws.list_environments()
        except Exception as e:
            raise ListingError("retrieve environments from workspace", e) from e
        try:
            stored = self._config.list_environments(app)
        except Exception as e:
            raise ListingError("retrieve environments from store", e) from e

        return auto_resolve(
            reconcile(stored, local, lambda env: env.name),
            pick=self._select_one(msg, help, ENV_FINAL_MESSAGE),
            action="select environment",
            empty=NoCandidatesError("no environments found", kind="environment", app=app),
            notice=_defaulting("environment"),
        )

    def _application(self) -> str:
        try:
            return self._ws.summary().application
        except Exception as e:
            raise ListingError("read workspace summary", e) from e

    def _local_workload(
        self,
        msg: str,
        help: str,
        *,
        ws_list: Callable[[], list[str]],
        store_list: Callable[[str], list[Workload]],
        noun: str,
        empty_message: str,
        kind: str,
        final_message: str,
    ) -> Selection[str]:
        app = self._application()
        try:
            local = ws_list()
        except Exception as e:
            raise ListingError(f"retrieve {noun} from workspace", e) from e
        try:
            stored = store_list(app)
        except Exception as e:
            raise ListingError(f"retrieve {noun} from store", e) from e

        names = reconcile(stored, local, lambda wl: wl.name)
        logger.debug("%d of %d local %s are registered in %s", len(names), len(local), noun, app)
        return auto_resolve(
            names,
            pick=self._select_one(msg, help, final_message),
            action=f"select {kind}",
            empty=NoCandidatesError(empty_message, kind=kind, app=app),
            notice=_defaulting(kind),
        )


class PipelineSelector:
    """Selects a pipeline manifest from the workspace."""

    def __init__(self, prompt: Prompter, ws: WorkspacePipelineLister):
        self._prompt = prompt
        self._ws = ws

    def pipeline(self, msg: str, help: str) -> Selection[WorkspacePipeline]:
        try:
            pipelines = self._ws.list_pipelines()
        except Exception as e:
            raise ListingError("list pipelines", e) from e

        by_name = {p.name: p for p in pipelines}
        selection = auto_resolve(
            list(by_name),
            pick=lambda names: self._prompt.select_one(
                msg, help, names, PromptConfig(final_message=PIPELINE_FINAL_MESSAGE)
            ),
            action="select pipeline",
            empty=NoCandidatesError("no pipelines found", kind="pipeline"),
            notice=lambda name: f"Only found one pipeline; defaulting to: {name}",
        )
        return selection.map(by_name.__getitem__)


class DeployedPipelineSelector:
    """Selects a pipeline deployed for an application."""

    def __init__(self, prompt: Prompter, lister: DeployedPipelineLister):
        self._prompt = prompt
        self._lister = lister

    def deployed_pipeline(self, msg: str, help: str, app: str) -> Selection[DeployedPipeline]:
        try:
            pipelines = self._lister.list_deployed_pipelines(app)
        except Exception as e:
            raise ListingError("list deployed pipelines", e) from e

        by_name = {p.name: p for p in pipelines}
        selection = auto_resolve(
            list(by_name),
            pick=lambda names: self._prompt.select_one(
                msg, help, names, PromptConfig(final_message=PIPELINE_FINAL_MESSAGE)
            ),
            action="select pipeline",
            empty=NoCandidatesError("no deployed pipelines found", kind="pipeline", app=app),
            notice=lambda name: f"Only found one deployed pipeline; defaulting to: {name}",
        )
        return selection.map(by_name.__getitem__)


def _check_task_scope(opts: TaskOptions) -> None:
    """Reject option combinations before any collaborator is called."""
    if opts.default_cluster and (opts.app or opts.env):
        raise MisconfigurationError("cannot specify both default cluster and env")
    if not opts.default_cluster and not opts.has_app_env:
        raise MisconfigurationError("must specify either app and env or default cluster")


class CFTaskSelector:
    """Selects a one-off task by its stack, e.g. for deletion."""

    def __init__(self, prompt: Prompter, stacks: TaskStackDescriber):
        self._prompt = prompt
        self._stacks = stacks

    def task(self, msg: str, help: str, *opts: TaskOption) -> Selection[str]:
        """Pick a task name in the default cluster or in one environment."""
        options = TaskOptions.build(*opts)
        _check_task_scope(options)

        tasks: list[TaskStackInfo]
        if options.default_cluster:
            try:
                tasks = self._stacks.list_default_task_stacks()
            except Exception as e:
                raise ListingError("get tasks in default cluster", e) from e
        else:
            try:
                tasks = self._stacks.list_task_stacks(options.app, options.env)
            except Exception as e:
                raise ListingError(f"get tasks in environment {options.env}", e) from e

        return auto_resolve(
            [t.task_name for t in tasks],
            pick=lambda names: self._prompt.select_one(
                msg, help, names, PromptConfig(final_message=TASK_FINAL_MESSAGE)
            ),
            action="select task for deletion",
            empty=NoCandidatesError("no deployed tasks found in selected cluster", kind="task"),
            notice=lambda name: f"Found only one deployed task: {name}",
        )


class TaskSelector:
    """Selects a running task."""

    def __init__(self, prompt: Prompter, lister: TaskLister):
        self._prompt = prompt
        self._lister = lister

    def running_task(self, msg: str, help: str, *opts: TaskOption) -> Selection[RunningTask]:
        """Pick a running task in the default cluster or in one environment."""
        options = TaskOptions.build(*opts)
        _check_task_scope(options)

        task_filter = TaskFilter(
            task_group=options.task_group,
            task_id=options.task_id,
            copilot_only=True,
        )
        tasks: list[RunningTask]
        if options.default_cluster:
            try:
                tasks = self._lister.list_active_default_cluster_tasks(task_filter)
            except Exception as e:
                raise ListingError("list active tasks for default cluster", e) from e
        else:
            try:
                tasks = self._lister.list_active_app_env_tasks(
                    options.app, options.env, task_filter
                )
            except Exception as e:
                raise ListingError(f"list active tasks in environment {options.env}", e) from e

        by_label = {str(t): t for t in tasks}
        selection = auto_resolve(
            list(by_label),
            pick=lambda labels: self._prompt.select_one(
                msg, help, labels, PromptConfig(final_message=TASK_FINAL_MESSAGE)
            ),
            action="select running task",
            empty=NoCandidatesError("no running tasks found", kind="task"),
            notice=lambda label: f"Found only one running task {label}",
        )
        return selection.map(by_label.__getitem__)

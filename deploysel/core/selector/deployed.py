"""
Deployed workload locator — find a workload across an app's environments.

Flow:
    registered workloads → environment scope → deployed candidates
        → filter chain → auto-resolve gate → (maybe) prompt

Name and environment pins shrink the search space but never change how
the candidate set is built: a pinned environment is the whole scope, a
pinned name turns each per-environment listing into a point check.
"""

from __future__ import annotations

import logging

from deploysel.adapters.base import Prompter, PromptConfig
from deploysel.core.models.topic import Topic
from deploysel.core.models.workload import DeployedWorkload
from deploysel.core.selector.collaborators import ConfigLister, DeployStoreClient
from deploysel.core.selector.errors import (
    ListingError,
    NoCandidatesError,
    NoMatchingCandidatesError,
)
from deploysel.core.selector.gate import Selection, auto_resolve
from deploysel.core.selector.options import (
    KindListing,
    PinState,
    ResolutionOption,
    ResolutionOptions,
    WorkloadKind,
    apply_filters,
)
from deploysel.core.selector.selectors import ConfigSelector
from deploysel.core.selector.topics import TopicSelector

logger = logging.getLogger(__name__)

DEPLOYED_FINAL_MESSAGES = {
    WorkloadKind.SERVICE: "Service:",
    WorkloadKind.JOB: "Job:",
    WorkloadKind.ANY: "Workload:",
}


def auto_select_notice(
    pins: PinState,
    kind: WorkloadKind,
    workload: DeployedWorkload,
) -> str | None:
    """The notice to show when the lookup resolved without prompting.

    Both pins supplied means the flags already said everything, so there
    is nothing to tell the user.
    """
    if pins is PinState.BOTH:
        return None
    if pins is PinState.NAME:
        return (
            f"{kind.value.capitalize()} {workload.name} found only "
            f"in environment {workload.env}"
        )
    if pins is PinState.ENV:
        return f"Only the {kind.value} {workload.name} is found in environment {workload.env}"
    return (
        f"Found only one deployed {kind.value} {workload.name} "
        f"in environment {workload.env}"
    )


class DeploySelector(ConfigSelector):
    """Selects workloads and topics from what is actually deployed."""

    def __init__(self, prompt: Prompter, config: ConfigLister, deploy_store: DeployStoreClient):
        super().__init__(prompt, config)
        self._deploy_store = deploy_store
        self._topics = TopicSelector(prompt, config, deploy_store)

    def deployed_service(
        self, msg: str, help: str, app: str, *opts: ResolutionOption
    ) -> Selection[DeployedWorkload]:
        """Pick a deployed service. See ``locate``."""
        return self.locate(WorkloadKind.SERVICE, msg, help, app, *opts)

    def deployed_job(
        self, msg: str, help: str, app: str, *opts: ResolutionOption
    ) -> Selection[DeployedWorkload]:
        """Pick a deployed job. See ``locate``."""
        return self.locate(WorkloadKind.JOB, msg, help, app, *opts)

    def deployed_workload(
        self, msg: str, help: str, app: str, *opts: ResolutionOption
    ) -> Selection[DeployedWorkload]:
        """Pick a deployed service or job. See ``locate``."""
        return self.locate(WorkloadKind.ANY, msg, help, app, *opts)

    def topics(self, msg: str, help: str, app: str) -> Selection[list[Topic]]:
        """Pick topics deployed in every environment of ``app``."""
        return self._topics.topics(msg, help, app)

    def locate(
        self,
        kind: WorkloadKind,
        msg: str,
        help: str,
        app: str,
        *opts: ResolutionOption,
    ) -> Selection[DeployedWorkload]:
        """Resolve one deployed workload of ``kind`` in ``app``.

        Args:
            kind: Services, jobs, or either.
            msg: Prompt message.
            help: Prompt help text.
            app: Application to search.
            opts: Pins (``with_name``, ``with_env``) and filters.

        Returns:
            The chosen workload; ``pins`` records which pins were supplied.

        Raises:
            ListingError: A collaborator failed.
            NoCandidatesError: Nothing of ``kind`` is registered or deployed.
            NoMatchingCandidatesError: The filters rejected every candidate.
            SelectionError: The prompt failed.
            Exception: Whatever a filter raised, unchanged.
        """
        options = ResolutionOptions.build(*opts)
        listing = kind.listing(self._config, self._deploy_store)

        types = self._registered_types(listing, kind, app)
        env_names = self._environment_scope(app, options.env)

        found: dict[tuple[str, str], DeployedWorkload] = {}
        for env in env_names:
            for name in self._deployed_names(listing, kind, app, env, options.name):
                candidate = DeployedWorkload(name=name, env=env, type=types.get(name, ""))
                found.setdefault(candidate.key, candidate)
        logger.debug(
            "Found %d deployed %s in %s across %d environment(s)",
            len(found), kind.plural, app, len(env_names),
        )

        if not found:
            raise NoCandidatesError(
                f"no deployed {kind.plural} found in application {app}",
                kind=kind.value,
                app=app,
            )

        candidates = apply_filters(list(found.values()), options.filters)
        if not candidates:
            raise NoMatchingCandidatesError(
                f"no matching deployed {kind.plural} found in application {app}",
                kind=kind.value,
                app=app,
            )

        by_label = {str(c): c for c in candidates}
        selection = auto_resolve(
            sorted(by_label),
            pick=lambda labels: self._prompt.select_one(
                msg, help, labels, PromptConfig(final_message=DEPLOYED_FINAL_MESSAGES[kind])
            ),
            action=f"select deployed {kind.plural} for application {app}",
            empty=NoCandidatesError(
                f"no deployed {kind.plural} found in application {app}",
                kind=kind.value,
                app=app,
            ),
            notice=lambda label: auto_select_notice(options.pins, kind, by_label[label]),
        )
        result = selection.map(by_label.__getitem__)
        result.pins = options.pins
        return result

    def _registered_types(self, listing: KindListing, kind: WorkloadKind, app: str) -> dict[str, str]:
        """Name → type of every registered workload of ``kind``."""
        try:
            registered = listing.list_registered(app)
        except Exception as e:
            raise ListingError(f"list {kind.plural}", e) from e
        if not registered:
            raise NoCandidatesError(
                f"no {kind.plural} found in application {app}",
                kind=kind.value,
                app=app,
            )
        return {wl.name: wl.type for wl in registered}

    def _environment_scope(self, app: str, env: str | None) -> list[str]:
        if env:
            return [env]
        try:
            return [e.name for e in self._config.list_environments(app)]
        except Exception as e:
            raise ListingError("list environments", e) from e

    def _deployed_names(
        self,
        listing: KindListing,
        kind: WorkloadKind,
        app: str,
        env: str,
        name: str | None,
    ) -> list[str]:
        """Deployed names in one environment; a pinned name is point-checked."""
        if name:
            try:
                deployed = listing.is_deployed(app, env, name)
            except Exception as e:
                raise ListingError(
                    f"check if {kind.value} {name} is deployed in environment {env}", e
                ) from e
            return [name] if deployed else []

        try:
            return listing.list_deployed(app, env)
        except Exception as e:
            raise ListingError(f"list deployed {kind.plural} for environment {env}", e) from e

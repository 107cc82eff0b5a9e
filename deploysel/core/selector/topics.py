"""
Cross-environment topic intersection.

A workload can only subscribe to a topic that exists in every
environment it will be deployed to. Topics are matched across
environments by their string form ("orders (api)"), never by ARN: the
ARN embeds the environment, so the same logical topic has a different
ARN everywhere.

Two empty outcomes are normal, not errors: an app with no environments
yet, and environments that share no topic. Both return an empty list
with a notice.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from deploysel.adapters.base import Prompter, PromptConfig
from deploysel.core.models.topic import Topic
from deploysel.core.selector.collaborators import DeployStoreClient, EnvironmentLister
from deploysel.core.selector.errors import ListingError, SelectionError
from deploysel.core.selector.gate import Selection

logger = logging.getLogger(__name__)

TOPIC_FINAL_MESSAGE = "Topic subscriptions:"
NO_ENVIRONMENTS_NOTICE = (
    "No environments are currently deployed. Skipping subscription selection."
)
NO_COMMON_TOPICS_NOTICE = (
    "No SNS topics are currently deployed in all environments. "
    "You can customize subscriptions in your manifest."
)


def intersect(running: dict[str, Topic], topics: Iterable[Topic]) -> dict[str, Topic]:
    """Keep the entries of ``topics`` whose string form is in ``running``.

    Survivors come from ``topics``, so the result always refers to a
    single environment: the most recent one intersected.
    """
    out: dict[str, Topic] = {}
    for topic in topics:
        key = str(topic)
        if key in running:
            out[key] = topic
    return out


def common_topics(per_env: list[list[Topic]]) -> dict[str, Topic]:
    """Topics present in every list, keyed by string form."""
    if not per_env:
        return {}
    overall = {str(t): t for t in per_env[0]}
    for topics in per_env[1:]:
        overall = intersect(overall, topics)
    return overall


class TopicSelector:
    """Multi-selects topics shared by all environments of an app."""

    def __init__(self, prompt: Prompter, envs: EnvironmentLister, deploy_store: DeployStoreClient):
        self._prompt = prompt
        self._envs = envs
        self._deploy_store = deploy_store

    def topics(self, msg: str, help: str, app: str) -> Selection[list[Topic]]:
        """Ask which shared topics to subscribe to.

        Even a single shared topic is offered, since choosing none is valid.
        """
        try:
            envs = self._envs.list_environments(app)
        except Exception as e:
            raise ListingError("list environments", e) from e
        if not envs:
            return Selection(value=[], notice=NO_ENVIRONMENTS_NOTICE)

        per_env: list[list[Topic]] = []
        for env in envs:
            try:
                per_env.append(self._deploy_store.list_sns_topics(app, env.name))
            except Exception as e:
                raise ListingError("list SNS topics", e) from e

        overall = common_topics(per_env)
        logger.debug("%d topic(s) shared by %d environment(s) of %s", len(overall), len(envs), app)
        if not overall:
            return Selection(value=[], notice=NO_COMMON_TOPICS_NOTICE)

        # All survivors belong to one environment, so ARN order groups
        # them by workload, then by topic name.
        descriptions = sorted(overall, key=lambda d: overall[d].arn)
        try:
            chosen = self._prompt.multi_select(
                msg, help, descriptions, PromptConfig(final_message=TOPIC_FINAL_MESSAGE)
            )
        except Exception as e:
            raise SelectionError("select SNS topics", e) from e
        return Selection(value=[overall[d] for d in chosen])

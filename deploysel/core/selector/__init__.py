"""Selector engine — turn ambiguous user input into one deployment target.

Public re-exports for convenient access.
"""

from deploysel.core.selector.deployed import DeploySelector, auto_select_notice
from deploysel.core.selector.errors import (
    ListingError,
    MisconfigurationError,
    NoCandidatesError,
    NoMatchingCandidatesError,
    SelectionError,
    SelectorError,
)
from deploysel.core.selector.gate import Selection, auto_resolve
from deploysel.core.selector.options import (
    PinState,
    ResolutionOptions,
    TaskOptions,
    WorkloadKind,
    task_in_app_env,
    task_in_default_cluster,
    task_in_group,
    task_with_id,
    with_env,
    with_filter,
    with_name,
    with_workload_types,
)
from deploysel.core.selector.reconcile import reconcile
from deploysel.core.selector.selectors import (
    AppEnvSelector,
    CFTaskSelector,
    ConfigSelector,
    DeployedPipelineSelector,
    PipelineSelector,
    TaskSelector,
    WorkspaceSelector,
)
from deploysel.core.selector.sequence import (
    NO_MORE_ENVIRONMENTS,
    ordinal_final_message,
    pick_many,
)
from deploysel.core.selector.topics import TopicSelector, common_topics, intersect

__all__ = [
    "NO_MORE_ENVIRONMENTS",
    "AppEnvSelector",
    "CFTaskSelector",
    "ConfigSelector",
    "DeploySelector",
    "DeployedPipelineSelector",
    "ListingError",
    "MisconfigurationError",
    "NoCandidatesError",
    "NoMatchingCandidatesError",
    "PinState",
    "PipelineSelector",
    "ResolutionOptions",
    "Selection",
    "SelectionError",
    "SelectorError",
    "TaskOptions",
    "TaskSelector",
    "TopicSelector",
    "WorkloadKind",
    "WorkspaceSelector",
    "auto_resolve",
    "auto_select_notice",
    "common_topics",
    "intersect",
    "ordinal_final_message",
    "pick_many",
    "reconcile",
    "task_in_app_env",
    "task_in_default_cluster",
    "task_in_group",
    "task_with_id",
    "with_env",
    "with_filter",
    "with_name",
    "with_workload_types",
]

"""
Selector errors — everything a resolution call can raise.

Taxonomy:
    ListingError               a collaborator failed to list or check
    NoCandidatesError          nothing exists to choose from
    NoMatchingCandidatesError  candidates existed, the filters removed all
    SelectionError             the prompter failed or the user aborted
    MisconfigurationError      the caller combined options that conflict

Filter predicates raise their own exceptions; those pass through as-is.
"""

from __future__ import annotations


class SelectorError(Exception):
    """Base class for all selector errors."""


class _WrappedError(SelectorError):
    """An error that prefixes its cause with the action that failed."""

    def __init__(self, action: str, cause: BaseException | str):
        self.action = action
        self.cause = cause
        super().__init__(f"{action}: {cause}")


class ListingError(_WrappedError):
    """A listing collaborator failed. Never retried."""


class SelectionError(_WrappedError):
    """The interactive prompt failed or was aborted."""


class NoCandidatesError(SelectorError):
    """Zero candidates before any filtering.

    Attributes:
        kind: What was being looked for ("service", "environment", ...).
        app: The application searched, when the search was app-scoped.
    """

    def __init__(self, message: str, *, kind: str = "", app: str | None = None):
        self.kind = kind
        self.app = app
        super().__init__(message)


class NoMatchingCandidatesError(SelectorError):
    """Candidates existed but none survived the filter chain."""

    def __init__(self, message: str, *, kind: str = "", app: str | None = None):
        self.kind = kind
        self.app = app
        super().__init__(message)


class MisconfigurationError(SelectorError, ValueError):
    """The caller asked for an impossible combination of options."""

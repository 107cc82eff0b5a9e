"""
Auto-resolve gate — the one policy every resolver shares.

    0 options  → raise the caller's "nothing found" error
    1 option   → return it, no prompt
    2+ options → ask the prompter, wrap its failure as SelectionError

The gate never prints. When it skips the prompt it records that on the
returned ``Selection`` together with the notice the caller may show.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

from deploysel.core.selector.errors import SelectionError, SelectorError

if TYPE_CHECKING:
    from deploysel.core.selector.options import PinState

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")


@dataclass
class Selection(Generic[T]):
    """Outcome of one resolution call.

    Attributes:
        value: What was chosen.
        auto_selected: True when the prompt was skipped.
        notice: Informational text for the user, if any.
        pins: Which pins were supplied (deployed-workload lookups only).
    """

    value: T
    auto_selected: bool = False
    notice: str | None = None
    pins: PinState | None = None

    def map(self, fn: Callable[[T], U]) -> Selection[U]:
        """Same selection metadata, with ``fn`` applied to the value."""
        return Selection(
            value=fn(self.value),
            auto_selected=self.auto_selected,
            notice=self.notice,
            pins=self.pins,
        )


def auto_resolve(
    options: Sequence[str],
    *,
    pick: Callable[[list[str]], str],
    action: str,
    empty: SelectorError,
    notice: Callable[[str], str | None] | None = None,
) -> Selection[str]:
    """Apply the gate to an ordered option list.

    Args:
        options: Candidates in presentation order.
        pick: Prompt continuation, called only with two or more options.
        action: Prefix for prompt failures, e.g. ``"select service"``.
        empty: Raised when there are no options.
        notice: Builds the notice for an auto-selected value.

    Raises:
        SelectorError: ``empty`` if no options, SelectionError if the pick fails.
    """
    if not options:
        raise empty

    if len(options) == 1:
        value = options[0]
        logger.debug("%s: single candidate %r, skipping prompt", action, value)
        return Selection(
            value=value,
            auto_selected=True,
            notice=notice(value) if notice else None,
        )

    try:
        value = pick(list(options))
    except Exception as e:
        raise SelectionError(action, e) from e
    return Selection(value=value)

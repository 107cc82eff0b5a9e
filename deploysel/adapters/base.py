"""
Prompter base — the contract between selectors and the terminal.

Selectors never talk to a terminal directly; they hand an ordered option
list to a Prompter and get back the chosen value(s). A call blocks until
the user answers and only one call is ever outstanding.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class PromptConfig:
    """Per-call presentation settings.

    Attributes:
        final_message: Label shown next to the answer once it is given,
            e.g. ``"Service:"`` or ``"1st stage:"``.
    """

    final_message: str = ""


class Prompter(ABC):
    """Abstract base class for interactive pickers.

    To create a new prompter:
        1. Subclass Prompter
        2. Implement select_one and multi_select
        3. Return option values, never indices
    """

    @abstractmethod
    def select_one(
        self,
        message: str,
        help: str,
        options: Sequence[str],
        config: PromptConfig | None = None,
    ) -> str:
        """Ask the user to pick exactly one of ``options``.

        Raises whatever the underlying UI raises when the user aborts.
        """

    @abstractmethod
    def multi_select(
        self,
        message: str,
        help: str,
        options: Sequence[str],
        config: PromptConfig | None = None,
    ) -> list[str]:
        """Ask the user to pick zero or more of ``options``."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"

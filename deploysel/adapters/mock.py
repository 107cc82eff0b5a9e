"""
Mock prompter — scripted test double for interactive selection.

Answers are queued up front and handed out in order. Every call is
recorded so tests can assert what the user would have been shown, and
that the prompt was skipped when it should have been.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from deploysel.adapters.base import Prompter, PromptConfig

# An answer is a fixed value, a function of the offered options, or an
# exception to raise.
Answer = str | list[str] | Callable[[list[str]], str | list[str]] | BaseException


@dataclass
class PromptCall:
    """One recorded prompt."""

    method: str
    message: str
    help: str
    options: list[str]
    config: PromptConfig | None = None


class MockPrompter(Prompter):
    """Prompter that replays scripted answers.

    By default answers with the first option. Queue answers with
    ``answer``/``fail`` to script a session.
    """

    def __init__(self, *answers: Answer):
        self._answers: list[Answer] = list(answers)
        self._call_log: list[PromptCall] = []

    @property
    def call_log(self) -> list[PromptCall]:
        """All prompts this mock has received."""
        return self._call_log

    @property
    def call_count(self) -> int:
        """Number of prompts shown."""
        return len(self._call_log)

    def answer(self, *answers: Answer) -> MockPrompter:
        """Queue answers for the next prompts."""
        self._answers.extend(answers)
        return self

    def fail(self, error: BaseException | str = "Mock failure") -> MockPrompter:
        """Make the next prompt raise."""
        self._answers.append(error if isinstance(error, BaseException) else RuntimeError(error))
        return self

    def select_one(
        self,
        message: str,
        help: str,
        options: Sequence[str],
        config: PromptConfig | None = None,
    ) -> str:
        result = self._next("select_one", message, help, options, config)
        if isinstance(result, list):
            raise TypeError("select_one answered with a list")
        return result if result is not None else options[0]

    def multi_select(
        self,
        message: str,
        help: str,
        options: Sequence[str],
        config: PromptConfig | None = None,
    ) -> list[str]:
        result = self._next("multi_select", message, help, options, config)
        if result is None:
            return list(options[:1])
        return [result] if isinstance(result, str) else list(result)

    def _next(
        self,
        method: str,
        message: str,
        help: str,
        options: Sequence[str],
        config: PromptConfig | None,
    ) -> str | list[str] | None:
        offered = list(options)
        self._call_log.append(PromptCall(method, message, help, offered, config))
        if not self._answers:
            return None
        answer = self._answers.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        if callable(answer):
            return answer(offered)
        return answer

    def reset(self) -> None:
        """Clear the call log and any queued answers."""
        self._call_log.clear()
        self._answers.clear()

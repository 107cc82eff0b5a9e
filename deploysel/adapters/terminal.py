"""
Terminal prompter — numbered-list selection on top of click.

    Which service?
      1) api (prod)
      2) api (test)
    Choice: 2
    Service: api (test)

Ctrl-C / EOF raise ``click.Abort``; selectors wrap it as a SelectionError.
"""

from __future__ import annotations

from collections.abc import Sequence

import click

from deploysel.adapters.base import Prompter, PromptConfig


def _parse_indices(raw: str, count: int) -> list[int]:
    """Parse "1, 3" into [0, 2]. Blank means none; duplicates collapse."""
    indices: list[int] = []
    for part in raw.replace(" ", "").split(","):
        if not part:
            continue
        if not part.isdecimal() or not 1 <= int(part) <= count:
            raise click.BadParameter(f"{part!r} is not a number between 1 and {count}")
        if int(part) - 1 not in indices:
            indices.append(int(part) - 1)
    return indices


class TerminalPrompter(Prompter):
    """Interactive prompter for a real terminal."""

    def __init__(self, show_help: bool = True):
        self._show_help = show_help

    def _render(self, message: str, help: str, options: Sequence[str]) -> None:
        click.secho(message, fg="cyan", bold=True)
        if help and self._show_help:
            click.secho(f"  {help}", dim=True)
        for n, option in enumerate(options, start=1):
            click.echo(f"  {n}) {option}")

    @staticmethod
    def _confirm(config: PromptConfig | None, answer: str) -> None:
        if config and config.final_message:
            click.echo(f"{config.final_message} {click.style(answer, bold=True)}")

    def select_one(
        self,
        message: str,
        help: str,
        options: Sequence[str],
        config: PromptConfig | None = None,
    ) -> str:
        self._render(message, help, options)
        number = click.prompt("Choice", type=click.IntRange(1, len(options)))
        value = options[number - 1]
        self._confirm(config, value)
        return value

    def multi_select(
        self,
        message: str,
        help: str,
        options: Sequence[str],
        config: PromptConfig | None = None,
    ) -> list[str]:
        self._render(message, help, options)
        indices = click.prompt(
            "Choices (comma-separated, blank for none)",
            default="",
            show_default=False,
            value_proc=lambda raw: _parse_indices(raw, len(options)),
        )
        values = [options[i] for i in indices]
        self._confirm(config, ", ".join(values) or "none")
        return values

"""
Iterative multi-pick — build an ordered sequence one pick at a time.

Each step offers the options not yet picked plus a sentinel that ends
the sequence early. Once every real option is used the loop stops on its
own; the sentinel is never a forced last step.

    Picking(n) ──real pick──▶ Picking(n-1)
    Picking(n) ──sentinel───▶ Done
    Picking(0) ─────────────▶ Done
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from deploysel.adapters.base import PromptConfig

NO_MORE_ENVIRONMENTS = "[No additional environments]"

_ORDINAL_SUFFIXES = {1: "st", 2: "nd", 3: "rd"}


def ordinal(n: int) -> str:
    """1 → "1st", 2 → "2nd", 11 → "11th", 23 → "23rd"."""
    if 10 <= n % 100 <= 20:
        return f"{n}th"
    return f"{n}{_ORDINAL_SUFFIXES.get(n % 10, 'th')}"


def ordinal_final_message(step: int) -> PromptConfig:
    """Label each answer with its pipeline stage: "1st stage:", "2nd stage:"."""
    return PromptConfig(final_message=f"{ordinal(step)} stage:")


def pick_many(
    choices: Sequence[str],
    pick: Callable[[int, list[str]], str],
    sentinel: str = NO_MORE_ENVIRONMENTS,
) -> list[str]:
    """Run the pick loop.

    Args:
        choices: Every real option, in listing order.
        pick: Called with the 1-based step number and the options on
            offer (sentinel last). Returns one of them.
        sentinel: The "stop here" option.

    Returns:
        The picks in the order the user made them.
    """
    picked: list[str] = []
    used: set[str] = set()
    for step in range(1, len(choices) + 1):
        available = [c for c in choices if c not in used]
        available.append(sentinel)
        choice = pick(step, available)
        if choice == sentinel:
            break
        picked.append(choice)
        used.add(choice)
    return picked

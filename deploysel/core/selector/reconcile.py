"""
Source reconciler — intersect an authoritative list with local names.

The authoritative source (the config store) decides ordering; the local
source (the workspace) only decides membership.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

T = TypeVar("T")


def reconcile(
    authoritative: Iterable[T],
    local_names: Iterable[str],
    name_of: Callable[[T], str],
) -> list[str]:
    """Names of ``authoritative`` entries that also appear in ``local_names``.

    Args:
        authoritative: Entities from the canonical source, in canonical order.
        local_names: Names known locally. Their order is ignored.
        name_of: Projection from an entity to its name.

    Returns:
        The matching names in ``authoritative`` order. May be empty.
    """
    wanted = set(local_names)
    return [name_of(item) for item in authoritative if name_of(item) in wanted]

"""Item identifiers for cart keys."""

from __future__ import annotations

import re
from typing import Iterable

_WHITESPACE_RUN = re.compile(r"\s+")


def derive_item_id(title: str) -> str:
    """Slug a title: lowercase, each whitespace run becomes one hyphen."""
    return _WHITESPACE_RUN.sub("-", title.strip()).lower()


def assign_item_ids(items: Iterable[tuple[str, str | None]]) -> list[str]:
    """
    Assign a unique id to every (title, explicit_id) pair, in traversal order.

    Explicit ids win and must be unique. Items without one get the title slug;
    a slug that is already taken gets a numeric suffix (``-2``, ``-3``, ...),
    so two dishes sharing a title never share a cart entry.
    """
    pairs = list(items)

    taken: set[str] = set()
    for _, explicit_id in pairs:
        if explicit_id is None:
            continue
        if explicit_id in taken:
            raise ValueError(f"Duplicate item id: {explicit_id!r}")
        taken.add(explicit_id)

    assigned: list[str] = []
    for title, explicit_id in pairs:
        if explicit_id is not None:
            assigned.append(explicit_id)
            continue

        base = derive_item_id(title)
        candidate = base
        suffix = 2
        while candidate in taken:
            candidate = f"{base}-{suffix}"
            suffix += 1
        taken.add(candidate)
        assigned.append(candidate)

    return assigned

"""Immutable newest-first chain of entries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, TypeVar

V = TypeVar("V")


@dataclass(frozen=True)
class Entry(Generic[V]):
    """One binding in a chain, pointing at the older bindings."""

    key: str
    value: V
    rest: Entry[V] | None = None


Chain = Entry | None
"""A chain is its head entry, or ``None`` when empty."""


def entries(chain: Chain) -> Iterator[Entry]:
    """Iterate entries from newest to oldest."""
    while chain is not None:
        yield chain
        chain = chain.rest


def find(chain: Chain, key: str) -> Entry | None:
    """Return the newest entry for ``key``, or None.

    Stale entries further down the chain are shadowed by the first match.
    """
    for entry in entries(chain):
        if entry.key == key:
            return entry
    return None


def keys_of(chain: Chain) -> frozenset[str]:
    """Distinct keys reachable in the chain."""
    return frozenset(entry.key for entry in entries(chain))

"""Map backed by a persistent hash map replaced on every write."""

from pyrsistent import PMap, pmap

from ..errors import EntryNotFound
from .base import MutableMap, V


class HashMap(MutableMap[V]):
    """A ``MutableMap`` backed by an immutable hash mapping.

    Each ``put`` derives a new ``PMap`` that shares structure with the
    previous one and swaps it in with a single assignment; the previous
    mapping is never modified in place.
    """

    def __init__(self) -> None:
        self._entries: PMap = pmap()

    def put(self, key: str, value: V) -> None:
        self._entries = self._entries.set(key, value)

    def get(self, key: str) -> V:
        try:
            return self._entries[key]
        except KeyError:
            raise EntryNotFound(key) from None

    def contains(self, key: str) -> bool:
        return key in self._entries

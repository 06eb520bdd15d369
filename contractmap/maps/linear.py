"""Map backed by a chain of entries searched linearly."""

from ..errors import EntryNotFound
from .base import MutableMap, V
from .chain import Chain, Entry, find


class ListMap(MutableMap[V]):
    """A ``MutableMap`` backed by a newest-first chain of entries.

    ``put`` prepends in O(1) and never drops stale entries, so ``get``
    and ``contains`` cost O(writes), not O(distinct keys).
    """

    def __init__(self) -> None:
        self._entries: Chain = None

    def put(self, key: str, value: V) -> None:
        self._entries = Entry(key, value, self._entries)

    def get(self, key: str) -> V:
        entry = find(self._entries, key)
        if entry is None:
            raise EntryNotFound(key)
        return entry.value

    def contains(self, key: str) -> bool:
        return find(self._entries, key) is not None

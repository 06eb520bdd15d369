"""Map backed by a chain of entries plus an index of known keys."""

from pyrsistent import PSet, pset

from ..errors import EntryNotFound
from .base import MutableMap, V
from .chain import Chain, Entry, find


class IndexedListMap(MutableMap[V]):
    """A ``MutableMap`` backed by a chain of entries and a key set.

    ``contains`` and negative ``get`` lookups only consult the key set.
    Positive lookups still walk the chain.

    Invariant: the distinct keys of ``_entries`` equal ``_keys``. ``put``
    updates the two fields one after the other, so the invariant is
    briefly false inside it. Nothing guards that window: instances
    must not be shared between threads.
    """

    def __init__(self) -> None:
        self._entries: Chain = None
        self._keys: PSet = pset()

    def put(self, key: str, value: V) -> None:
        self._entries = Entry(key, value, self._entries)
        self._keys = self._keys.add(key)

    def get(self, key: str) -> V:
        if key not in self._keys:
            raise EntryNotFound(key)
        entry = find(self._entries, key)
        if entry is None:
            raise EntryNotFound(key)
        return entry.value

    def contains(self, key: str) -> bool:
        return key in self._keys

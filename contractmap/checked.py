"""Map implementations with runtime contract checks.

Each class behaves like its unchecked base and additionally raises:

- ``PreconditionViolation`` when called with an empty key,
- ``PostconditionViolation`` when ``put`` does not make the key present,
  or when ``get``/``contains`` replace backing state,
- ``InvariantViolation`` (indexed map only) when the chain and the key
  set disagree.
"""

from .contracts import Contracted, check_invariant, ensure
from .errors import EntryNotFound
from .maps.base import V
from .maps.chain import find, keys_of
from .maps.hashed import HashMap
from .maps.indexed import IndexedListMap
from .maps.linear import ListMap


class Checked(Contracted):
    """Pre/postcondition checks around ``put``, ``get`` and ``contains``."""

    def put(self, key: str, value: V) -> None:
        self._require_key(key)
        super().put(key, value)
        ensure(self.contains(key), f"Map must contain {key!r} after put.")

    def get(self, key: str) -> V:
        with self._unchanged():
            self._require_key(key)
            return super().get(key)

    def contains(self, key: str) -> bool:
        with self._unchanged():
            self._require_key(key)
            return super().contains(key)


class CheckedHashMap(Checked, HashMap[V]):
    """``HashMap`` with contract checks."""


class CheckedListMap(Checked, ListMap[V]):
    """``ListMap`` with contract checks."""


class CheckedIndexedListMap(Checked, IndexedListMap[V]):
    """``IndexedListMap`` with contract and invariant checks.

    The invariant is checked once after construction and after every
    ``put``. It is not checked around reads, which are covered by the
    identity check instead.
    """

    def __init__(self) -> None:
        super().__init__()
        self._check_invariant()

    def _snapshot(self) -> tuple:
        return (self._entries, self._keys)

    def _check_invariant(self) -> None:
        check_invariant(
            self._keys == keys_of(self._entries),
            "Keys in the entries must match the key set.",
        )

    def put(self, key: str, value: V) -> None:
        super().put(key, value)
        self._check_invariant()

    def get(self, key: str) -> V:
        with self._unchanged():
            self._require_key(key)
            if key not in self._keys:
                raise EntryNotFound(key)
            entry = find(self._entries, key)
            check_invariant(
                entry is not None,
                f"Key {key!r} is in the key set but not in the entries.",
            )
            return entry.value

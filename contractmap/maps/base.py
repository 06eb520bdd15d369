"""Abstract mutable map contract."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

V = TypeVar("V")


class MutableMap(ABC, Generic[V]):
    """A mutable store mapping string keys to values of type ``V``.

    Implementations must satisfy these equations (``m`` a map, ``k`` a
    non-empty key, ``v``/``v2`` values)::

        m.put(k, v); m.get(k)                 == v
        m.put(k, v); m.put(k, v2); m.get(k)   == v2
        m.put(k, v); m.get(k) == m.get(k)     == v
        m.get(k)                              raises EntryNotFound(k)
        m.contains(k)                         == False
        m.put(k, v); m.contains(k)            == True

    and, for any state of ``m``::

        if not m.contains(k): m.get(k) raises EntryNotFound(k)
        if m.contains(k):     m.get(k) returns some value

    There is no removal: once ``contains(k)`` is true it stays true.
    """

    @abstractmethod
    def put(self, key: str, value: V) -> None:
        """Store ``value`` under ``key``, replacing any previous value.

        Precondition: ``key`` is not empty.

        Postconditions: the map contains ``value`` for ``key``; entries
        for all other keys are left unchanged.
        """

    @abstractmethod
    def get(self, key: str) -> V:
        """Return the value most recently stored for ``key``.

        Preconditions: ``key`` is not empty and was stored with ``put``.

        Postcondition: no entries are altered.

        Raises:
            EntryNotFound: No value has been stored for ``key``.
        """

    @abstractmethod
    def contains(self, key: str) -> bool:
        """Check whether a value has been stored for ``key``.

        Precondition: ``key`` is not empty.

        Postcondition: no entries are altered.
        """

"""Factory function for map implementations."""

from typing import Literal

from .maps.base import MutableMap

Kind = Literal["hash", "list", "indexed"]

KINDS: tuple[str, ...] = ("hash", "list", "indexed")


def mutable_map(kind: Kind = "hash", *, checked: bool = False) -> MutableMap:
    """Create an empty map.

    Args:
        kind: ``"hash"`` (default) for a ``HashMap``, ``"list"`` for a
            ``ListMap``, or ``"indexed"`` for an ``IndexedListMap``.
        checked: Return the variant with runtime contract checks.

    Returns:
        An empty ``MutableMap``.
    """
    if kind == "hash":
        if checked:
            from .checked import CheckedHashMap

            return CheckedHashMap()
        from .maps.hashed import HashMap

        return HashMap()

    if kind == "list":
        if checked:
            from .checked import CheckedListMap

            return CheckedListMap()
        from .maps.linear import ListMap

        return ListMap()

    if kind == "indexed":
        if checked:
            from .checked import CheckedIndexedListMap

            return CheckedIndexedListMap()
        from .maps.indexed import IndexedListMap

        return IndexedListMap()

    raise ValueError(f"Unknown kind: {kind!r}")

"""contractmap: string-keyed mutable maps with checked contracts."""

from .checked import CheckedHashMap, CheckedIndexedListMap, CheckedListMap
from .errors import (
    ContractViolation,
    EntryNotFound,
    InvariantViolation,
    PostconditionViolation,
    PreconditionViolation,
)
from .factory import KINDS, mutable_map
from .maps.base import MutableMap
from .maps.hashed import HashMap
from .maps.indexed import IndexedListMap
from .maps.linear import ListMap

__all__ = [
    "KINDS",
    "CheckedHashMap",
    "CheckedIndexedListMap",
    "CheckedListMap",
    "ContractViolation",
    "EntryNotFound",
    "HashMap",
    "IndexedListMap",
    "InvariantViolation",
    "ListMap",
    "MutableMap",
    "PostconditionViolation",
    "PreconditionViolation",
    "mutable_map",
]

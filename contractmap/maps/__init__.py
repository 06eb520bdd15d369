"""Mutable map implementations."""

from .base import MutableMap
from .hashed import HashMap
from .indexed import IndexedListMap
from .linear import ListMap

__all__ = ["HashMap", "IndexedListMap", "ListMap", "MutableMap"]

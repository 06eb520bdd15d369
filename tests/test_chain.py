"""Tests for the entry chain helpers."""

import dataclasses

import pytest

from contractmap.maps.chain import Entry, entries, find, keys_of


def build(*pairs):
    chain = None
    for key, value in pairs:
        chain = Entry(key, value, chain)
    return chain


class TestChain:
    def test_empty(self):
        assert list(entries(None)) == []
        assert find(None, "k") is None
        assert keys_of(None) == frozenset()

    def test_newest_first(self):
        chain = build(("a", 1), ("b", 2))
        assert [e.key for e in entries(chain)] == ["b", "a"]

    def test_find_returns_newest(self):
        chain = build(("a", 1), ("b", 2), ("a", 3))
        assert find(chain, "a").value == 3
        assert find(chain, "b").value == 2
        assert find(chain, "c") is None

    def test_keys_ignore_stale_entries(self):
        chain = build(("a", 1), ("b", 2), ("a", 3))
        assert keys_of(chain) == {"a", "b"}

    def test_long_chain(self):
        chain = build(*((f"k{i}", i) for i in range(20000)))
        assert find(chain, "k0").value == 0
        assert sum(1 for _ in entries(chain)) == 20000

    def test_entries_are_immutable(self):
        entry = Entry("a", 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.value = 2

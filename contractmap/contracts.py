"""Runtime contract checks."""

from contextlib import contextmanager
from typing import Iterator

from .errors import InvariantViolation, PostconditionViolation, PreconditionViolation


def require(condition: bool, message: str) -> None:
    """Check a precondition; the caller is at fault if it fails."""
    if not condition:
        raise PreconditionViolation(message)


def ensure(condition: bool, message: str) -> None:
    """Check a postcondition; the implementation is at fault if it fails."""
    if not condition:
        raise PostconditionViolation(message)


def check_invariant(condition: bool, message: str) -> None:
    """Check a representation invariant."""
    if not condition:
        raise InvariantViolation(message)


class Contracted:
    """Mixin with contract helpers for map implementations.

    Subclasses describe their backing state through ``_snapshot``, which
    must return the objects held by every backing field. Writes replace
    those objects wholesale, so comparing identities is enough to detect
    a write.
    """

    def _snapshot(self) -> tuple:
        return (self._entries,)

    def _require_key(self, key: str) -> None:
        require(key != "", "Key must not be empty.")

    @contextmanager
    def _unchanged(self) -> Iterator[None]:
        """Fail if the wrapped block replaces any backing field.

        Compares identities, not values: swapping in an equal copy counts
        as a modification.
        """
        before = self._snapshot()
        yield
        after = self._snapshot()
        ensure(
            all(old is new for old, new in zip(before, after)),
            "This method should not modify the map.",
        )

"""contractmap error types."""


class EntryNotFound(KeyError):
    """Raised by ``get`` when no value was ever stored for a key.

    Attributes:
        key: The key that was looked up.
    """

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f'No value can be found for key "{self.key}".'


class ContractViolation(Exception):
    """Base class for failed runtime contract checks."""


class PreconditionViolation(ContractViolation, ValueError):
    """The caller broke a precondition, e.g. passed an empty key."""


class PostconditionViolation(ContractViolation, AssertionError):
    """An operation did not deliver what its contract promises.

    Signals a defect in the map implementation, not a caller error.
    """


class InvariantViolation(ContractViolation, AssertionError):
    """The internal representation of a map is inconsistent.

    Always fatal: the implementation itself is broken.
    """

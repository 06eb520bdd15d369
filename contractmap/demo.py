"""Demo sequence exercising a map through its contract."""

from typing import Iterable

from .errors import ContractViolation
from .factory import KINDS, mutable_map
from .maps.base import MutableMap


def _expect(condition: bool, message: str) -> None:
    # Explicit raise so the checks survive python -O.
    if not condition:
        raise AssertionError(message)


def demo(m: MutableMap[int]) -> None:
    """Run the fixed store/overwrite/lookup sequence against ``m``.

    Raises ``AssertionError`` on the first unmet expectation.
    """
    m.put("a", 0)
    _expect(m.get("a") == 0, "get('a') should return 0")

    m.put("a", 1)
    _expect(m.get("a") == 1, "get('a') should return 1 after overwrite")

    _expect(m.contains("a") is True, "contains('a') should be True")
    _expect(m.contains("b") is False, "contains('b') should be False")


def run(kinds: Iterable[str] = KINDS) -> dict[str, bool]:
    """Run ``demo`` against each kind, unchecked and checked.

    Contract violations are defects, not failed expectations, and
    propagate.

    Returns:
        Mapping of implementation class name to whether the demo passed.
    """
    results: dict[str, bool] = {}
    for kind in kinds:
        for checked in (False, True):
            m = mutable_map(kind, checked=checked)
            try:
                demo(m)
            except ContractViolation:
                raise
            except AssertionError:
                results[type(m).__name__] = False
            else:
                results[type(m).__name__] = True
    return results

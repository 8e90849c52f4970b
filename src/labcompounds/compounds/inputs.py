"""
Turn caller-supplied element lists into ElementSpec values.

Callers send elements in several shapes:

- ``"H"`` (a bare symbol, count 1)
- ``{"symbol": "H", "count": 2}`` or the lab's ``{"element": "H", "molecules": 2}``
- ``("H", 2)``
- ``ElementSpec("H", 2)``
"""

from typing import Any, List, Mapping

from ..config import CONFIG
from ..text.formula import parse_formula
from .errors import InvalidElementsError
from .models import ElementSpec

__all__ = ["coerce_element_spec", "coerce_element_specs", "specs_from_formula"]

_SYMBOL_KEYS = ("symbol", "element")
_COUNT_KEYS = ("count", "molecules")


def _first_present(item: Mapping[str, Any], keys) -> Any:
    for key in keys:
        if item.get(key) is not None:
            return item[key]
    return None


def _checked_count(symbol: str, count: Any) -> int:
    if count is None:
        return CONFIG["default_count"]
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidElementsError(f"Count for {symbol} must be an integer, got {count!r}")
    if count <= 0:
        raise InvalidElementsError(f"Count for {symbol} must be positive, got {count}")
    return count


def coerce_element_spec(item: Any) -> ElementSpec:
    """
    Convert one item to an ElementSpec.

    Raises:
        InvalidElementsError: if the item has no usable symbol or a bad count
    """
    if isinstance(item, ElementSpec):
        symbol, count = item.symbol, item.count
    elif isinstance(item, str):
        symbol, count = item, None
    elif isinstance(item, Mapping):
        symbol = _first_present(item, _SYMBOL_KEYS)
        count = _first_present(item, _COUNT_KEYS)
    elif isinstance(item, (tuple, list)) and len(item) == 2:
        symbol, count = item
    else:
        raise InvalidElementsError(f"Cannot read an element from {item!r}")

    if not isinstance(symbol, str) or not symbol.strip():
        raise InvalidElementsError(f"Element symbol must be a non-empty string, got {symbol!r}")
    symbol = symbol.strip()
    return ElementSpec(symbol=symbol, count=_checked_count(symbol, count))


def coerce_element_specs(items: Any) -> List[ElementSpec]:
    """
    Convert a list of loosely shaped elements to ElementSpec values.

    Raises:
        InvalidElementsError: if ``items`` is not a list/tuple, or any item is bad

    Example:
        >>> coerce_element_specs(["H", {"element": "O", "molecules": 2}])
        [ElementSpec(symbol='H', count=1), ElementSpec(symbol='O', count=2)]
    """
    if not isinstance(items, (list, tuple)):
        raise InvalidElementsError("Elements array is required")
    return [coerce_element_spec(item) for item in items]


def specs_from_formula(formula: str) -> List[ElementSpec]:
    """
    Element specs read from a formula, in order of appearance.

    Example:
        >>> specs_from_formula("H2O")
        [ElementSpec(symbol='H', count=2), ElementSpec(symbol='O', count=1)]
    """
    return [ElementSpec(symbol, count) for symbol, count in parse_formula(formula).items()]

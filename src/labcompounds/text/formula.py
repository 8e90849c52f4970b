"""
Molecular formula parsing and rendering - no external dependencies.

Pure functions for turning formula strings into element counts and back.
"""

__all__ = [
    "parse_formula",
    "count_element",
    "normalize_subscripts",
    "to_subscripts",
    "format_formula",
]

import re
from typing import Dict, Iterable, Tuple

# Subscript to digit translation table
_SUBSCRIPT_MAP = str.maketrans("₀₁₂₃₄₅₆₇₈₉", "0123456789")
_DIGIT_MAP = str.maketrans("0123456789", "₀₁₂₃₄₅₆₇₈₉")

# Compiled regex for element parsing
_ELEMENT_PATTERN = re.compile(r"([A-Z][a-z]?)(\d*)")


def normalize_subscripts(formula: str) -> str:
    """
    Convert subscript digits to regular digits.

    Args:
        formula: Formula string possibly containing subscripts

    Returns:
        Formula with subscripts converted to regular digits

    Example:
        >>> normalize_subscripts("H₂O₂")
        'H2O2'
    """
    return formula.translate(_SUBSCRIPT_MAP)


def to_subscripts(formula: str) -> str:
    """Convert regular digits to subscript digits ("CO2" -> "CO₂")."""
    return formula.translate(_DIGIT_MAP)


def parse_formula(formula: str) -> Dict[str, int]:
    """
    Parse molecular formula into element counts.

    Elements keep their order of first appearance; a repeated element
    accumulates (``"CH3COOH"`` gives ``{'C': 2, 'H': 4, 'O': 2}``).

    Args:
        formula: Molecular formula string (e.g., "H2O" or "H₂O")

    Returns:
        Dictionary mapping element symbols to counts

    Example:
        >>> parse_formula("Fe₂O₃")
        {'Fe': 2, 'O': 3}
        >>> parse_formula("NaCl")
        {'Na': 1, 'Cl': 1}
    """
    if not formula:
        return {}

    normalized = normalize_subscripts(formula)
    counts: Dict[str, int] = {}
    for element, count in _ELEMENT_PATTERN.findall(normalized):
        counts[element] = counts.get(element, 0) + (int(count) if count else 1)
    return counts


def count_element(formula: str, element: str) -> int:
    """
    Count occurrences of an element in a formula.

    Example:
        >>> count_element("N₂O₅", "O")
        5
        >>> count_element("N₂O₅", "H")
        0
    """
    return parse_formula(formula).get(element, 0)


def format_formula(counts: Iterable[Tuple[str, int]], subscripts: bool = True) -> str:
    """
    Render (element, count) pairs as a formula string, omitting counts of 1.

    Example:
        >>> format_formula([("C", 1), ("O", 2)])
        'CO₂'
        >>> format_formula([("C", 1), ("O", 2)], subscripts=False)
        'CO2'
    """
    text = "".join(
        f"{element}{count if count != 1 else ''}" for element, count in counts
    )
    return to_subscripts(text) if subscripts else text

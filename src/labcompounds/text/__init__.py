"""
Text utilities subpackage - no external dependencies.

Pure functions for string manipulation and formula parsing.
"""

from labcompounds.text.strings import (
    pluralize,
)

from labcompounds.text.formula import (
    parse_formula,
    count_element,
    normalize_subscripts,
    to_subscripts,
    format_formula,
)

__all__ = [
    # strings
    "pluralize",
    # formula
    "parse_formula",
    "count_element",
    "normalize_subscripts",
    "to_subscripts",
    "format_formula",
]

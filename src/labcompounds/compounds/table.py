"""
Reference table of known compounds: loading, validation, lookup.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, Iterable, Iterator, Mapping, Optional, Tuple

from loguru import logger

from ..config import FORMATIONS, SAFETY_LEVELS, STABILITY_LEVELS, STATES
from ..text.formula import format_formula, normalize_subscripts, parse_formula
from .errors import ReferenceTableError
from .models import CompoundRecord
from .reference import DEFAULT_COMPOUND_ROWS

__all__ = [
    "ReferenceTable",
    "load_table",
    "record_from_row",
    "default_table",
]

_REQUIRED_KEYS = ("formula", "name")

# Tag validation: (row key, allowed values)
_TAG_FIELDS = (
    ("stability", STABILITY_LEVELS),
    ("safety_level", SAFETY_LEVELS),
    ("state", STATES),
    ("formation", FORMATIONS),
)

_OPTIONAL_TEXT_FIELDS = ("description", "color", "common_use")


@dataclass(frozen=True)
class ReferenceTable:
    """Ordered, immutable collection of compound records."""

    records: Tuple[CompoundRecord, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "records", tuple(self.records))

    def __iter__(self) -> Iterator[CompoundRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    def __getitem__(self, index: int) -> CompoundRecord:
        return self.records[index]

    def find(self, formula: str) -> Optional[CompoundRecord]:
        """
        Look up a compound by formula.

        Subscript and plain digits are equivalent, so "H2O" finds "H₂O".
        """
        if not formula:
            return None
        wanted = normalize_subscripts(formula.strip())
        for record in self.records:
            if normalize_subscripts(record.formula) == wanted:
                return record
        return None

    def with_elements(self, symbols: Iterable[str]) -> Tuple[CompoundRecord, ...]:
        """Records whose element set is exactly ``symbols``."""
        wanted = frozenset(symbols)
        return tuple(r for r in self.records if r.element_set == wanted)


def _check_tags(row: Mapping[str, Any], formula: str) -> None:
    for key, allowed in _TAG_FIELDS:
        if key in row and row[key] not in allowed:
            raise ReferenceTableError(
                f"{formula}: {key} must be one of {', '.join(allowed)}, got {row[key]!r}"
            )


def _elements_and_ratios(
    row: Mapping[str, Any], formula: str
) -> Tuple[Tuple[str, ...], Dict[str, int]]:
    """Take elements/ratios from the row, deriving missing ones from the formula."""
    raw_ratios = row.get("ratios")
    if raw_ratios and not isinstance(raw_ratios, Mapping):
        raise ReferenceTableError(
            f"{formula}: ratios must be a mapping of element to count, got {raw_ratios!r}"
        )
    ratios = dict(raw_ratios or parse_formula(formula))

    raw_elements = row.get("elements")
    if raw_elements and not isinstance(raw_elements, (list, tuple)):
        raise ReferenceTableError(
            f"{formula}: elements must be a list or tuple of symbols, got {raw_elements!r}"
        )
    elements = tuple(raw_elements or ratios.keys())
    bad = [e for e in elements if not isinstance(e, str) or not e]
    if bad:
        raise ReferenceTableError(f"{formula}: bad element symbols {bad!r}")

    if not elements:
        raise ReferenceTableError(f"{formula}: compound has no elements")
    if len(set(elements)) != len(elements):
        raise ReferenceTableError(f"{formula}: duplicate elements {elements}")
    missing = [e for e in elements if e not in ratios]
    if missing:
        raise ReferenceTableError(f"{formula}: no ratio for {', '.join(missing)}")
    for element in elements:
        value = ratios[element]
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ReferenceTableError(
                f"{formula}: ratio for {element} must be a positive integer, got {value!r}"
            )
    return elements, ratios


def record_from_row(row: Mapping[str, Any]) -> CompoundRecord:
    """
    Build a validated CompoundRecord from a dict row.

    A row without a formula gets one rendered from its ratios.

    Raises:
        ReferenceTableError: if the row is missing keys or holds bad values
    """
    if not row.get("formula") and isinstance(row.get("ratios"), Mapping) and row["ratios"]:
        row = {**row, "formula": format_formula(row["ratios"].items())}

    for key in _REQUIRED_KEYS:
        if not row.get(key):
            raise ReferenceTableError(f"Row is missing required key {key!r}: {dict(row)}")

    formula = row["formula"]
    _check_tags(row, formula)
    elements, ratios = _elements_and_ratios(row, formula)

    extra = {key: row[key] for key, _ in _TAG_FIELDS if key in row}
    extra.update(
        {key: row[key] for key in _OPTIONAL_TEXT_FIELDS if row.get(key) is not None}
    )
    return CompoundRecord(
        elements=elements,
        ratios=ratios,
        formula=formula,
        name=row["name"],
        **extra,
    )


def load_table(rows: Iterable[Mapping[str, Any]]) -> ReferenceTable:
    """
    Build a ReferenceTable from dict rows, keeping their order.

    Raises:
        ReferenceTableError: on the first malformed row
    """
    table = ReferenceTable(tuple(record_from_row(row) for row in rows))
    logger.debug(f"Loaded reference table with {len(table)} compounds")
    return table


@lru_cache(maxsize=1)
def default_table() -> ReferenceTable:
    """The embedded reference table, built once per process."""
    return load_table(DEFAULT_COMPOUND_ROWS)

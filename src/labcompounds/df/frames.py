"""
Tabular views of reference tables and match results - requires polars.
"""

__all__ = [
    "COMPOUND_SCHEMA",
    "CANDIDATE_SCHEMA",
    "table_to_frame",
    "candidates_to_frame",
    "read_table_csv",
    "format_ratios",
    "parse_ratios",
]

from pathlib import Path
from typing import Any, Dict, Mapping, Sequence, Union

import polars as pl

from ..compounds.models import CompoundRecord, ScoredCandidate
from ..compounds.errors import ReferenceTableError
from ..compounds.table import ReferenceTable, load_table

COMPOUND_SCHEMA: Dict[str, Any] = {
    "formula": pl.Utf8,
    "name": pl.Utf8,
    "elements": pl.Utf8,
    "ratios": pl.Utf8,
    "description": pl.Utf8,
    "stability": pl.Utf8,
    "safety_level": pl.Utf8,
    "state": pl.Utf8,
    "color": pl.Utf8,
    "formation": pl.Utf8,
    "common_use": pl.Utf8,
}

CANDIDATE_SCHEMA: Dict[str, Any] = {
    "rank": pl.Int64,
    "score": pl.Float64,
    "ratio_match": pl.Utf8,
    **COMPOUND_SCHEMA,
}


def _compound_row(compound: CompoundRecord) -> Dict[str, Any]:
    return {
        "formula": compound.formula,
        "name": compound.name,
        "elements": ", ".join(compound.elements),
        "ratios": format_ratios(compound.ratios),
        "description": compound.description,
        "stability": compound.stability,
        "safety_level": compound.safety_level,
        "state": compound.state,
        "color": compound.color,
        "formation": compound.formation,
        "common_use": compound.common_use,
    }


def table_to_frame(table: ReferenceTable) -> pl.DataFrame:
    """One row per compound, in table order."""
    return pl.DataFrame(
        [_compound_row(c) for c in table],
        schema=COMPOUND_SCHEMA,
    )


def candidates_to_frame(candidates: Sequence[ScoredCandidate]) -> pl.DataFrame:
    """One row per candidate, ranked from 1 in the order given."""
    rows = [
        {
            "rank": rank,
            "score": candidate.score,
            "ratio_match": candidate.ratio_match,
            **_compound_row(candidate.compound),
        }
        for rank, candidate in enumerate(candidates, start=1)
    ]
    return pl.DataFrame(rows, schema=CANDIDATE_SCHEMA)


def format_ratios(ratios: Mapping[str, int]) -> str:
    """
    Render ratios as a CSV cell.

    Example:
        >>> format_ratios({"H": 2, "O": 1})
        'H:2;O:1'
    """
    return ";".join(f"{element}:{count}" for element, count in ratios.items())


def parse_ratios(cell: str, formula: str = "") -> Dict[str, int]:
    """
    Read a ``H:2;O:1`` ratios cell.

    Raises:
        ReferenceTableError: if a pair is not ``SYMBOL:COUNT``
    """
    ratios: Dict[str, int] = {}
    for pair in filter(None, (p.strip() for p in cell.split(";"))):
        symbol, sep, count = pair.partition(":")
        if not sep or not symbol.strip() or not count.strip().isdigit():
            raise ReferenceTableError(
                f"{formula}: ratios cell must look like 'H:2;O:1', got {cell!r}"
            )
        ratios[symbol.strip()] = int(count)
    return ratios


def _csv_row(row: Mapping[str, Any]) -> Dict[str, Any]:
    """Drop empty cells and parse the elements/ratios cells."""
    result = {key: value for key, value in row.items() if value is not None}
    if "elements" in result:
        result["elements"] = tuple(
            e.strip() for e in result["elements"].split(",") if e.strip()
        )
    if "ratios" in result:
        result["ratios"] = parse_ratios(result["ratios"], result.get("formula", ""))
    return result


def read_table_csv(path: Union[str, Path]) -> ReferenceTable:
    """
    Load a reference table from CSV.

    Needs ``formula`` and ``name`` columns. ``elements`` (``H, O``) and
    ``ratios`` (``H:2;O:1``) are optional and default to what the formula
    says. Tag and text columns are optional and empty cells are ignored.

    Raises:
        ReferenceTableError: if a row is malformed
    """
    df = pl.read_csv(path, infer_schema_length=0)
    return load_table(_csv_row(row) for row in df.iter_rows(named=True))

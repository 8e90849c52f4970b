"""
Filters for compound and candidate frames - requires polars.

Tag filters check their values against the vocabularies in ``config`` so a
typo fails loudly instead of silently matching nothing.
"""

__all__ = [
    "TAG_VOCABULARIES",
    "parse_levels",
    "filter_by_tag",
    "filter_by_ratio_match",
    "filter_by_score",
]

from typing import Dict, Iterable, Optional, Tuple, Union

import polars as pl

from ..compounds.errors import InvalidFilterError
from ..config import (
    FORMATIONS,
    RATIO_MATCH_LEVELS,
    SAFETY_LEVELS,
    STABILITY_LEVELS,
    STATES,
)

# Frame column -> allowed values
TAG_VOCABULARIES: Dict[str, Tuple[str, ...]] = {
    "stability": STABILITY_LEVELS,
    "safety_level": SAFETY_LEVELS,
    "state": STATES,
    "formation": FORMATIONS,
    "ratio_match": RATIO_MATCH_LEVELS,
}


def parse_levels(levels: Union[str, Iterable[str]]) -> Tuple[str, ...]:
    """
    Normalize ``"good,fair"`` or ``["good", "fair"]`` to a tuple.

    Example:
        >>> parse_levels(" good, fair ")
        ('good', 'fair')
    """
    if isinstance(levels, str):
        levels = levels.split(",")
    return tuple(str(level).strip() for level in levels if str(level).strip())


def filter_by_tag(
    df: pl.DataFrame,
    column: str,
    values: Union[str, Iterable[str]],
    exclude: bool = False,
) -> pl.DataFrame:
    """
    Keep (or drop) rows whose tag column holds one of ``values``.

    Raises:
        InvalidFilterError: on an unknown tag column, a column missing from
            the frame, or a value outside the column's vocabulary
    """
    if column not in TAG_VOCABULARIES:
        raise InvalidFilterError(
            f"Unknown tag column {column!r}; expected one of {', '.join(TAG_VOCABULARIES)}"
        )
    if column not in df.columns:
        raise InvalidFilterError(f"Frame has no {column!r} column")

    wanted = parse_levels(values)
    allowed = TAG_VOCABULARIES[column]
    unknown = [v for v in wanted if v not in allowed]
    if unknown:
        raise InvalidFilterError(
            f"Unknown {column} value(s) {', '.join(unknown)}; expected {', '.join(allowed)}"
        )

    condition = pl.col(column).is_in(list(wanted))
    if exclude:
        condition = ~condition
    return df.filter(condition)


def filter_by_ratio_match(
    df: pl.DataFrame, levels: Union[str, Iterable[str]]
) -> pl.DataFrame:
    """Keep candidates whose ratioMatch bucket is in ``levels`` (e.g. "good,fair")."""
    return filter_by_tag(df, "ratio_match", levels)


def filter_by_score(
    df: pl.DataFrame,
    min_score: Optional[float] = None,
    max_score: Optional[float] = None,
) -> pl.DataFrame:
    """
    Keep candidates with ``min_score <= score <= max_score``.

    Raises:
        InvalidFilterError: if a bound lies outside [0, 1] or min exceeds max
    """
    for bound in (min_score, max_score):
        if bound is not None and not 0.0 <= bound <= 1.0:
            raise InvalidFilterError(f"Score bounds must lie in [0, 1], got {bound}")
    if min_score is not None and max_score is not None and min_score > max_score:
        raise InvalidFilterError(f"min_score {min_score} exceeds max_score {max_score}")

    condition = pl.lit(True)
    if min_score is not None:
        condition = condition & (pl.col("score") >= min_score)
    if max_score is not None:
        condition = condition & (pl.col("score") <= max_score)
    return df.filter(condition)

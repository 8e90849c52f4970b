"""
DataFrame utilities subpackage - requires polars.

Tabular views of compounds and candidates, CSV table loading, and filters.
"""

from labcompounds.df.filters import (
    TAG_VOCABULARIES,
    parse_levels,
    filter_by_tag,
    filter_by_ratio_match,
    filter_by_score,
)

from labcompounds.df.frames import (
    COMPOUND_SCHEMA,
    CANDIDATE_SCHEMA,
    table_to_frame,
    candidates_to_frame,
    read_table_csv,
    format_ratios,
    parse_ratios,
)

__all__ = [
    # filters
    "TAG_VOCABULARIES",
    "parse_levels",
    "filter_by_tag",
    "filter_by_ratio_match",
    "filter_by_score",
    # frames
    "COMPOUND_SCHEMA",
    "CANDIDATE_SCHEMA",
    "table_to_frame",
    "candidates_to_frame",
    "read_table_csv",
    "format_ratios",
    "parse_ratios",
]

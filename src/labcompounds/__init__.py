"""
labcompounds - Compound matching for the chemistry lab simulator.

This package is organized into focused subpackages:

- text/       Pure text utilities (no dependencies)
              - formula: parse_formula, normalize_subscripts, format_formula
              - strings: pluralize

- compounds/  Compound matching (requires loguru)
              - models: ElementSpec, CompoundRecord, ScoredCandidate
              - table: ReferenceTable, load_table, default_table
              - matcher: CompoundMatcher, match, suggest_most_likely
              - inputs: coerce_element_specs, specs_from_formula
              - serialize: candidate_to_dict, to_payload

- df/         DataFrame utilities (requires polars)
              - frames: table_to_frame, candidates_to_frame, read_table_csv
              - filters: filter_by_tag, filter_by_ratio_match, filter_by_score

- cli         `labcompounds` console command (requires fire)

Usage:
    from labcompounds import ElementSpec, match
    match([ElementSpec("H", 2), ElementSpec("O", 1)])[0].formula  # 'H₂O'

Logging goes through loguru and is disabled for this package by default;
call ``logger.enable("labcompounds")`` to see it.
"""

__version__ = "0.1.0"

from loguru import logger

# Convenience imports from text (no dependencies)
from labcompounds.text import (
    parse_formula,
    normalize_subscripts,
    format_formula,
)

# Convenience imports from compounds
from labcompounds.compounds import (
    LabCompoundsError,
    InvalidElementsError,
    ReferenceTableError,
    ElementSpec,
    CompoundRecord,
    ScoredCandidate,
    ReferenceTable,
    CompoundMatcher,
    load_table,
    default_table,
    match,
    suggest_most_likely,
    coerce_element_specs,
    specs_from_formula,
    to_payload,
)

logger.disable("labcompounds")

__all__ = [
    "__version__",
    # text.formula
    "parse_formula",
    "normalize_subscripts",
    "format_formula",
    # compounds.errors
    "LabCompoundsError",
    "InvalidElementsError",
    "ReferenceTableError",
    # compounds.models
    "ElementSpec",
    "CompoundRecord",
    "ScoredCandidate",
    # compounds.table
    "ReferenceTable",
    "load_table",
    "default_table",
    # compounds.matcher
    "CompoundMatcher",
    "match",
    "suggest_most_likely",
    # compounds.inputs
    "coerce_element_specs",
    "specs_from_formula",
    # compounds.serialize
    "to_payload",
]

"""
Compound matching subpackage.

Data model, reference table, the CompoundMatcher, input coercion,
and JSON payloads.
"""

from labcompounds.compounds.errors import (
    LabCompoundsError,
    InvalidElementsError,
    ReferenceTableError,
    InvalidFilterError,
)

from labcompounds.compounds.models import (
    ElementSpec,
    CompoundRecord,
    ScoredCandidate,
)

from labcompounds.compounds.table import (
    ReferenceTable,
    load_table,
    record_from_row,
    default_table,
)

from labcompounds.compounds.matcher import (
    CompoundMatcher,
    element_counts,
    ratio_similarity,
    classify_ratio_match,
    score_compound,
    match,
    suggest_most_likely,
)

from labcompounds.compounds.inputs import (
    coerce_element_spec,
    coerce_element_specs,
    specs_from_formula,
)

from labcompounds.compounds.serialize import (
    compound_to_dict,
    candidate_to_dict,
    to_payload,
)

__all__ = [
    # errors
    "LabCompoundsError",
    "InvalidElementsError",
    "ReferenceTableError",
    "InvalidFilterError",
    # models
    "ElementSpec",
    "CompoundRecord",
    "ScoredCandidate",
    # table
    "ReferenceTable",
    "load_table",
    "record_from_row",
    "default_table",
    # matcher
    "CompoundMatcher",
    "element_counts",
    "ratio_similarity",
    "classify_ratio_match",
    "score_compound",
    "match",
    "suggest_most_likely",
    # inputs
    "coerce_element_spec",
    "coerce_element_specs",
    "specs_from_formula",
    # serialize
    "compound_to_dict",
    "candidate_to_dict",
    "to_payload",
]

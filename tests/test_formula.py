"""
Tests for formula text utilities.
"""

import pytest
from labcompounds.text import (
    count_element,
    format_formula,
    normalize_subscripts,
    parse_formula,
    pluralize,
    to_subscripts,
)


class TestFormula:
    """Test suite for formula parsing and rendering."""

    def test_normalize_subscripts(self):
        assert normalize_subscripts("C₆H₁₂O₆") == "C6H12O6"

    def test_to_subscripts(self):
        assert to_subscripts("N2O5") == "N₂O₅"

    @pytest.mark.parametrize(
        "formula, counts",
        [
            ("H2O", {"H": 2, "O": 1}),
            ("H₂O₂", {"H": 2, "O": 2}),
            ("NaCl", {"Na": 1, "Cl": 1}),
            ("NaOH", {"Na": 1, "O": 1, "H": 1}),
            ("CH3COOH", {"C": 2, "H": 4, "O": 2}),
            ("", {}),
        ],
    )
    def test_parse_formula(self, formula, counts):
        assert parse_formula(formula) == counts

    def test_parse_keeps_order(self):
        assert list(parse_formula("N₂H₄")) == ["N", "H"]

    def test_count_element(self):
        assert count_element("N₂O₅", "O") == 5
        assert count_element("N₂O₅", "H") == 0

    def test_format_formula(self):
        assert format_formula([("C", 1), ("O", 2)]) == "CO₂"
        assert format_formula([("Fe", 2), ("O", 3)], subscripts=False) == "Fe2O3"
        assert format_formula([]) == ""


class TestPluralize:
    """Test suite for pluralize."""

    def test_singular(self):
        assert pluralize("candidate", 1) == "candidate"

    def test_plural(self):
        assert pluralize("candidate", 0) == "candidates"

    def test_irregular(self):
        assert pluralize("Formula", 2, {"Formula": "Formulae"}) == "Formulae"

"""Shared fixtures for labcompounds tests."""

import pytest
from labcompounds.compounds import (
    CompoundMatcher,
    CompoundRecord,
    ElementSpec,
    ReferenceTable,
    default_table,
)


def make_record(formula, ratios, **kwargs):
    """Build a CompoundRecord whose elements follow the ratio order."""
    kwargs.setdefault("name", formula)
    elements = tuple(kwargs.pop("elements", ratios.keys()))
    return CompoundRecord(
        elements=elements,
        ratios=ratios,
        formula=formula,
        **kwargs,
    )


def specs(**counts):
    """ElementSpec list from keyword counts, e.g. specs(H=2, O=1)."""
    return [ElementSpec(symbol, count) for symbol, count in counts.items()]


@pytest.fixture
def table():
    """The embedded reference table."""
    return default_table()


@pytest.fixture
def matcher(table):
    """Matcher over the embedded reference table."""
    return CompoundMatcher(table)


@pytest.fixture
def xy_table():
    """Substitute table: twelve X/Y compounds with X ratios 1..12."""
    return ReferenceTable(
        tuple(make_record(f"X{i}Y", {"X": i, "Y": 1}) for i in range(1, 13))
    )

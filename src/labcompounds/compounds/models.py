"""
Data models for compound matching.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

__all__ = ["ElementSpec", "CompoundRecord", "ScoredCandidate"]


@dataclass(frozen=True)
class ElementSpec:
    """One element supplied by the caller, with its relative quantity."""

    symbol: str
    count: Optional[int] = 1


@dataclass(frozen=True)
class CompoundRecord:
    """
    A known compound in the reference table.

    ``ratios`` is copied into a read-only mapping so records can be shared
    between threads without copying.
    """

    elements: Tuple[str, ...]
    ratios: Mapping[str, int]
    formula: str
    name: str
    description: str = ""
    stability: str = "medium"
    safety_level: str = "safe"
    state: str = "solid"
    color: str = "#FFFFFF"
    formation: str = "common"
    common_use: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "elements", tuple(self.elements))
        object.__setattr__(self, "ratios", MappingProxyType(dict(self.ratios)))

    def __hash__(self) -> int:
        return hash((self.formula, self.elements, tuple(self.ratios.items())))

    @property
    def element_set(self) -> frozenset:
        """Element symbols as a set, for structural matching."""
        return frozenset(self.elements)


@dataclass(frozen=True)
class ScoredCandidate:
    """A compound paired with how well it fits one query."""

    compound: CompoundRecord
    score: float
    ratio_match: str = "poor"

    def __getattr__(self, name: str):
        # Expose compound fields directly (candidate.formula, candidate.name, ...)
        if name == "compound":
            raise AttributeError(name)
        return getattr(self.compound, name)

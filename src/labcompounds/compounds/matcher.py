"""
Compound matching: rank known compounds against a set of elements.

A compound is a candidate only when its element set equals the input's
symbol set exactly. Candidates are scored by how close the supplied counts
are to the compound's stoichiometry:

    similarity(actual, expected) = min(actual, expected) / max(actual, expected)
    score = mean of per-element similarities over the compound's elements

Over- and under-supplying an element are penalized alike, and every
compound lands on the same [0, 1] scale regardless of its ratios.
"""

from functools import lru_cache
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from loguru import logger

from ..config import CONFIG
from ..text.strings import pluralize
from .models import CompoundRecord, ElementSpec, ScoredCandidate
from .table import ReferenceTable, default_table

__all__ = [
    "CompoundMatcher",
    "element_counts",
    "ratio_similarity",
    "classify_ratio_match",
    "score_compound",
    "match",
    "suggest_most_likely",
]


def element_counts(elements: Iterable[ElementSpec]) -> Dict[str, int]:
    """
    Map each symbol to its count; a missing count means 1, a repeated
    symbol keeps its last count.

    Example:
        >>> element_counts([ElementSpec("H", 2), ElementSpec("O", None)])
        {'H': 2, 'O': 1}
    """
    default = CONFIG["default_count"]
    return {
        spec.symbol: spec.count if spec.count is not None else default
        for spec in elements
    }


def ratio_similarity(actual: float, expected: float) -> float:
    """Similarity in (0, 1] of two positive quantities; 0.0 when either is not positive."""
    if actual <= 0 or expected <= 0:
        return 0.0
    return min(actual, expected) / max(actual, expected)


def classify_ratio_match(score: float) -> str:
    """
    Bucket a score into good/fair/poor. Lower bounds are exclusive.

    Example:
        >>> classify_ratio_match(0.75), classify_ratio_match(0.7), classify_ratio_match(0.4)
        ('good', 'fair', 'poor')
    """
    if score > CONFIG["good_threshold"]:
        return "good"
    if score > CONFIG["fair_threshold"]:
        return "fair"
    return "poor"


def score_compound(compound: CompoundRecord, counts: Mapping[str, int]) -> float:
    """
    Average ratio similarity of ``counts`` against the compound's ratios.

    An element with no supplied count contributes 0; an element with no
    expected ratio is compared against the configured default ratio.
    """
    if not compound.elements:
        return 0.0

    default_ratio = CONFIG["default_ratio"]
    total = 0.0
    for element in compound.elements:
        expected = compound.ratios.get(element, default_ratio)
        actual = counts.get(element, 0)
        if actual > 0:
            total += ratio_similarity(actual, expected)
    return total / len(compound.elements)


class CompoundMatcher:
    """
    Ranks the compounds of a reference table against element sets.

    The table is never modified, so one matcher can serve concurrent callers.
    """

    def __init__(
        self,
        table: Optional[ReferenceTable] = None,
        max_results: Optional[int] = None,
    ):
        if max_results is None:
            max_results = CONFIG["max_results"]
        if isinstance(max_results, bool) or not isinstance(max_results, int):
            raise ValueError(f"max_results must be an integer, got {max_results!r}")
        if max_results < 0:
            raise ValueError(f"max_results must not be negative, got {max_results}")

        self.table = table if table is not None else default_table()
        self.max_results = max_results

    def candidates(self, symbols: Iterable[str]) -> List[CompoundRecord]:
        """Compounds whose element set equals ``symbols``, in table order."""
        wanted = frozenset(symbols)
        return [c for c in self.table if c.element_set == wanted]

    def match(self, elements: Sequence[ElementSpec]) -> List[ScoredCandidate]:
        """
        Return up to ``max_results`` candidates, best score first.

        Ties keep table order. An empty input, unknown symbols, or an input
        with no structural match all give an empty list.
        """
        if not elements:
            return []

        counts = element_counts(elements)
        scored = []
        for compound in self.candidates(counts):
            score = score_compound(compound, counts)
            scored.append(
                ScoredCandidate(
                    compound=compound,
                    score=score,
                    ratio_match=classify_ratio_match(score),
                )
            )

        # sorted() is stable, so equal scores stay in table order
        ranked = sorted(scored, key=lambda c: c.score, reverse=True)
        ranked = ranked[: self.max_results]
        logger.debug(
            f"Matched {len(ranked)} {pluralize('candidate', len(ranked))} "
            f"for {', '.join(counts)}"
        )
        return ranked

    def suggest(self, elements: Sequence[ElementSpec]) -> Optional[ScoredCandidate]:
        """Best candidate, or None when nothing matches."""
        ranked = self.match(elements)
        return ranked[0] if ranked else None


@lru_cache(maxsize=1)
def _default_matcher() -> CompoundMatcher:
    return CompoundMatcher()


def match(
    elements: Sequence[ElementSpec],
    table: Optional[ReferenceTable] = None,
) -> List[ScoredCandidate]:
    """Match against ``table``, or the embedded reference table by default."""
    matcher = CompoundMatcher(table) if table is not None else _default_matcher()
    return matcher.match(elements)


def suggest_most_likely(
    elements: Sequence[ElementSpec],
    table: Optional[ReferenceTable] = None,
) -> Optional[ScoredCandidate]:
    """Most likely compound for ``elements``, or None."""
    matcher = CompoundMatcher(table) if table is not None else _default_matcher()
    return matcher.suggest(elements)

"""Serialize candidates to JSON-ready dictionaries."""

__all__ = ["compound_to_dict", "candidate_to_dict", "to_payload"]

from typing import Any, Dict, Sequence

from .models import CompoundRecord, ScoredCandidate


def compound_to_dict(compound: CompoundRecord) -> Dict[str, Any]:
    """Flat dict of a compound using the lab's camelCase keys."""
    return {
        "formula": compound.formula,
        "name": compound.name,
        "description": compound.description,
        "elements": list(compound.elements),
        "ratios": dict(compound.ratios),
        "stability": compound.stability,
        "safetyLevel": compound.safety_level,
        "state": compound.state,
        "color": compound.color,
        "formation": compound.formation,
        "commonUse": compound.common_use,
    }


def candidate_to_dict(candidate: ScoredCandidate) -> Dict[str, Any]:
    """Compound fields plus ``score`` and ``ratioMatch``."""
    result = compound_to_dict(candidate.compound)
    result["score"] = candidate.score
    result["ratioMatch"] = candidate.ratio_match
    return result


def to_payload(candidates: Sequence[ScoredCandidate]) -> Dict[str, Any]:
    """Response body for a possible-compounds request."""
    return {
        "success": True,
        "compounds": [candidate_to_dict(c) for c in candidates],
        "count": len(candidates),
    }

"""
Package configuration and tag vocabularies.

All thresholds and tunable parameters are centralized here
for easy maintenance and tuning.
"""

from typing import Any, Dict, Tuple

__all__ = [
    "CONFIG",
    "STABILITY_LEVELS",
    "SAFETY_LEVELS",
    "STATES",
    "FORMATIONS",
    "RATIO_MATCH_LEVELS",
]

# ====================================================================
# MATCHING CONFIGURATION
# ====================================================================

CONFIG: Dict[str, Any] = {
    # Result shaping
    "max_results": 10,  # Candidates kept after ranking
    # ratioMatch buckets (exclusive lower bounds: 0.7 is "fair", not "good")
    "good_threshold": 0.7,
    "fair_threshold": 0.4,
    # Defaults for incomplete data
    "default_count": 1,  # Count assumed when a caller omits it
    "default_ratio": 1,  # Expected ratio assumed when a compound lacks one
}

# ====================================================================
# TAG VOCABULARIES
# ====================================================================

STABILITY_LEVELS: Tuple[str, ...] = ("low", "medium", "high")
SAFETY_LEVELS: Tuple[str, ...] = ("safe", "caution", "dangerous")
STATES: Tuple[str, ...] = ("solid", "liquid", "gas")
FORMATIONS: Tuple[str, ...] = ("common", "synthetic")
RATIO_MATCH_LEVELS: Tuple[str, ...] = ("good", "fair", "poor")

"""
Tests for JSON payloads.
"""

import json

from conftest import specs
from labcompounds.compounds import (
    ScoredCandidate,
    candidate_to_dict,
    compound_to_dict,
    to_payload,
)


class TestPayload:
    """Test suite for candidate serialization."""

    def test_candidate_to_dict(self, matcher):
        """Test compound fields plus score fields use camelCase keys."""
        water = candidate_to_dict(matcher.match(specs(H=2, O=1))[0])

        assert water["formula"] == "H₂O"
        assert water["safetyLevel"] == "safe"
        assert water["commonUse"] == "Drinking, industrial processes"
        assert water["elements"] == ["H", "O"]
        assert water["ratios"] == {"H": 2, "O": 1}
        assert water["score"] == 1.0
        assert water["ratioMatch"] == "good"

    def test_compound_has_no_score(self, table):
        """Test bare compounds carry no score fields."""
        data = compound_to_dict(table.find("NaCl"))

        assert "score" not in data
        assert data["name"] == "Sodium Chloride"

    def test_candidate_defaults_to_poor(self, table):
        """Test a candidate built without a bucket serializes as poor."""
        candidate = ScoredCandidate(compound=table.find("NaCl"), score=0.1)

        assert candidate.ratio_match == "poor"
        assert candidate_to_dict(candidate)["ratioMatch"] == "poor"

    def test_payload(self, matcher):
        """Test the response envelope."""
        payload = to_payload(matcher.match(specs(C=1, O=2)))

        assert payload["success"] is True
        assert payload["count"] == 2
        assert [c["formula"] for c in payload["compounds"]] == ["CO₂", "CO"]

    def test_empty_payload_is_success(self):
        """Test no matches is still a successful response."""
        assert to_payload([]) == {"success": True, "compounds": [], "count": 0}

    def test_payload_is_json_serializable(self, matcher):
        """Test the payload survives json.dumps."""
        text = json.dumps(to_payload(matcher.match(specs(N=1, O=2))), ensure_ascii=False)

        assert json.loads(text)["compounds"][0]["formula"] == "NO₂"

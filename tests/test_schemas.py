"""Tests for schema defaults and construction invariants."""

import pytest
from pydantic import ValidationError

from skillmatch.models.schemas import (
    Achievement,
    CareerStage,
    ExtractedKeyword,
    Match,
    MatchReport,
    MatchType,
    Priority,
    UserProfile,
    VerificationResult,
)

EVIDENCE = [Achievement(id="a", bullet="Built it", skills=["python"])]


class TestMatch:
    def test_requires_evidence(self):
        with pytest.raises(ValidationError):
            Match(
                requirement=ExtractedKeyword(phrase="python"),
                user_evidence=[],
                match_type=MatchType.DIRECT,
                confidence=1.0,
            )

    @pytest.mark.parametrize("match_type,confidence", [
        (MatchType.DIRECT, 0.9),
        (MatchType.SEMANTIC, 0.95),
        (MatchType.TRANSFERABLE, 0.7),
        (MatchType.INFERRED, 0.6),
    ])
    def test_rejects_out_of_bounds_confidence(self, match_type, confidence):
        with pytest.raises(ValidationError):
            Match(
                requirement=ExtractedKeyword(phrase="python"),
                user_evidence=EVIDENCE,
                match_type=match_type,
                confidence=confidence,
            )

    def test_frozen(self):
        match = Match(
            requirement=ExtractedKeyword(phrase="python"),
            user_evidence=EVIDENCE,
            match_type=MatchType.DIRECT,
            confidence=1.0,
        )
        with pytest.raises(ValidationError):
            match.confidence = 0.95


def test_match_report_defaults():
    report = MatchReport()
    assert report.matches == []
    assert report.missing == []
    assert report.match_score == 0.0
    assert report.direct_matches == []


def test_match_score_bounded():
    with pytest.raises(ValidationError):
        MatchReport(match_score=1.2)


def test_verification_defaults():
    result = VerificationResult()
    assert result.all_facts_preserved is True
    assert result.confidence == 1.0


def test_profile_tolerates_missing_sections():
    profile = UserProfile.model_validate({"name": "Ada", "skills": [{"name": "Python"}, None]})
    assert profile.work_experience == []
    assert profile.metadata.career_stage == CareerStage.PROFESSIONAL
    assert profile.all_achievements() == []


def test_keyword_is_technical():
    assert ExtractedKeyword(phrase="AWS", category="cloud").is_technical
    assert not ExtractedKeyword(phrase="Empathy", category="soft").is_technical
    assert not ExtractedKeyword(phrase="Grit").is_technical


def test_priority_rank_order():
    assert Priority.HIGH.rank < Priority.MEDIUM.rank < Priority.LOW.rank

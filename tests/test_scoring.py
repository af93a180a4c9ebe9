"""Tests for match score aggregation and recommendations."""

import pytest

from skillmatch.models.schemas import (
    Achievement,
    CareerStage,
    ExtractedKeyword,
    Match,
    MatchType,
    Priority,
    ProfileMetadata,
    RecommendationType,
    UserProfile,
)
from skillmatch.services.scoring import calculate_match_score, generate_recommendations


def kw(phrase: str, required: bool = True, category: str | None = None) -> ExtractedKeyword:
    return ExtractedKeyword(phrase=phrase, required=required, category=category)


class TestMatchScore:
    def test_weighted_example(self):
        assert calculate_match_score(10, 5, 7, 2) == pytest.approx(0.61)

    def test_no_required_counts_as_full(self):
        assert calculate_match_score(0, 4, 0, 2) == pytest.approx(0.7 + 0.3 * 0.5)

    def test_no_preferred_is_neutral(self):
        assert calculate_match_score(4, 0, 4, 0) == pytest.approx(0.7 + 0.15)

    def test_empty_posting(self):
        assert calculate_match_score(0, 0, 0, 0) == pytest.approx(0.85)

    def test_monotonic_in_matched_required(self):
        scores = [calculate_match_score(6, 3, matched, 1) for matched in range(7)]
        assert scores == sorted(scores)

    def test_bounded(self):
        assert 0.0 <= calculate_match_score(3, 3, 3, 3) <= 1.0
        assert calculate_match_score(3, 3, 3, 3) == pytest.approx(1.0)


class TestRecommendations:
    def setup_method(self):
        self.professional = UserProfile()
        self.student = UserProfile(metadata=ProfileMetadata(career_stage=CareerStage.STUDENT))
        self.evidence = [Achievement(id="a", bullet="Taught classes", skills=["teaching"])]

    def test_missing_required_capped_at_three_high(self):
        missing = [kw(p) for p in ("Go", "Rust", "Kafka", "Scala")]
        recs = generate_recommendations(self.professional, missing, [], 0.9)
        add_skill = [r for r in recs if r.type == RecommendationType.ADD_SKILL]
        assert [r.skill for r in add_skill] == ["Go", "Rust", "Kafka"]
        assert all(r.priority == Priority.HIGH for r in add_skill)
        assert "required qualification" in add_skill[0].reason

    def test_missing_preferred_capped_at_two_medium(self):
        missing = [kw(p, required=False) for p in ("GraphQL", "Redis", "Kafka")]
        recs = generate_recommendations(self.professional, missing, [], 0.9)
        assert [r.skill for r in recs] == ["GraphQL", "Redis"]
        assert all(r.priority == Priority.MEDIUM for r in recs)

    def test_weak_matches_get_reframe(self):
        weak = Match(
            requirement=kw("communication"),
            user_evidence=self.evidence,
            match_type=MatchType.TRANSFERABLE,
            confidence=0.6,
        )
        strong = Match(
            requirement=kw("teaching"),
            user_evidence=self.evidence,
            match_type=MatchType.DIRECT,
            confidence=1.0,
        )
        recs = generate_recommendations(self.professional, [], [weak, strong], 0.9)
        assert len(recs) == 1
        assert recs[0].type == RecommendationType.REFRAME_EXPERIENCE
        assert recs[0].reason == 'Weak match for "communication" (transferable match)'

    def test_low_score_suggests_project_for_non_professionals(self):
        recs = generate_recommendations(self.student, [], [], 0.4)
        assert [r.type for r in recs] == [RecommendationType.ADD_PROJECT]
        assert recs[0].priority == Priority.HIGH

    def test_low_score_no_project_for_professionals(self):
        recs = generate_recommendations(self.professional, [], [], 0.4)
        assert recs == []

    def test_certification_prefers_required_technical_gap(self):
        required = [kw("Leadership", category="soft"), kw("AWS", category="cloud")]
        preferred = [kw("Docker", required=False, category="devops")]
        recs = generate_recommendations(self.professional, required + preferred, [], 0.9)
        certs = [r for r in recs if r.type == RecommendationType.GET_CERTIFICATION]
        assert [r.skill for r in certs] == ["AWS"]
        assert certs[0].priority == Priority.LOW

    def test_certification_falls_back_to_preferred(self):
        preferred = [kw("Terraform", required=False, category="devops")]
        recs = generate_recommendations(self.professional, [kw("Empathy", category="soft"), *preferred], [], 0.9)
        certs = [r for r in recs if r.type == RecommendationType.GET_CERTIFICATION]
        assert [r.skill for r in certs] == ["Terraform"]

    def test_sorted_by_priority_stably(self):
        required = [kw("AWS", category="cloud")]
        preferred = [kw("Redis", required=False)]
        recs = generate_recommendations(self.student, required + preferred, [], 0.3)
        assert [r.priority for r in recs] == [Priority.HIGH, Priority.HIGH, Priority.MEDIUM, Priority.LOW]
        assert [r.type for r in recs][:2] == [RecommendationType.ADD_SKILL, RecommendationType.ADD_PROJECT]

    def test_priority_follows_keyword_flag(self):
        missing = [kw("Kafka", required=False), kw("Go")]
        recs = generate_recommendations(self.professional, missing, [], 0.9)
        assert [(r.skill, r.priority) for r in recs] == [("Go", Priority.HIGH), ("Kafka", Priority.MEDIUM)]

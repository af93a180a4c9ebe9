"""Matcher output: evidenced matches, gaps, score and recommendations for one job."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from skillmatch.models.schemas.profile import Achievement
from skillmatch.models.schemas.requirements import ExtractedKeyword


class MatchType(str, Enum):
    """Matching strategies, in cascade order."""
    DIRECT = "direct"
    SEMANTIC = "semantic"
    TRANSFERABLE = "transferable"
    INFERRED = "inferred"


# Closed confidence range per strategy (inclusive). One entry per MatchType.
CONFIDENCE_BOUNDS: dict[MatchType, tuple[float, float]] = {
    MatchType.DIRECT: (0.95, 1.0),
    MatchType.SEMANTIC: (0.7, 0.9),
    MatchType.TRANSFERABLE: (0.6, 0.6),
    MatchType.INFERRED: (0.7, 0.7),
}

_BOUNDS_EPSILON = 1e-9


def confidence_in_bounds(match_type: MatchType, confidence: float) -> bool:
    """Check a confidence against its strategy's range.

    Raises KeyError for a MatchType without registered bounds.
    """
    low, high = CONFIDENCE_BOUNDS[match_type]
    return low - _BOUNDS_EPSILON <= confidence <= high + _BOUNDS_EPSILON


class RecommendationType(str, Enum):
    ADD_SKILL = "add-skill"
    REFRAME_EXPERIENCE = "reframe-experience"
    ADD_PROJECT = "add-project"
    GET_CERTIFICATION = "get-certification"


class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        return _PRIORITY_RANK[self]


_PRIORITY_RANK = {Priority.HIGH: 0, Priority.MEDIUM: 1, Priority.LOW: 2}


class Match(BaseModel):
    """A requirement satisfied by at least one concrete achievement."""
    model_config = ConfigDict(frozen=True)

    requirement: ExtractedKeyword
    user_evidence: list[Achievement] = Field(min_length=1)
    match_type: MatchType
    confidence: float
    explanation: str = ""

    @model_validator(mode="after")
    def _check_confidence(self) -> "Match":
        if not confidence_in_bounds(self.match_type, self.confidence):
            low, high = CONFIDENCE_BOUNDS[self.match_type]
            raise ValueError(
                f"{self.match_type.value} match confidence {self.confidence} "
                f"outside [{low}, {high}]"
            )
        return self


class Recommendation(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: RecommendationType
    priority: Priority
    skill: str | None = None
    reason: str
    suggestion: str


class MatchReport(BaseModel):
    """Full matching result for one job posting."""
    model_config = ConfigDict(frozen=True)

    matches: list[Match] = []
    missing: list[ExtractedKeyword] = []
    match_score: float = Field(default=0.0, ge=0.0, le=1.0)
    recommendations: list[Recommendation] = []

    def matches_of(self, match_type: MatchType) -> list[Match]:
        return [m for m in self.matches if m.match_type == match_type]

    @property
    def direct_matches(self) -> list[Match]:
        return self.matches_of(MatchType.DIRECT)

    @property
    def semantic_matches(self) -> list[Match]:
        return self.matches_of(MatchType.SEMANTIC)

    @property
    def transferable_matches(self) -> list[Match]:
        return self.matches_of(MatchType.TRANSFERABLE)

    @property
    def inferred_matches(self) -> list[Match]:
        return self.matches_of(MatchType.INFERRED)

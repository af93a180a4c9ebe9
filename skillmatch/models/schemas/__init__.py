"""Pydantic contracts shared by the matcher, fact extractor and verifier."""

from skillmatch.models.schemas.match_report import (
    CONFIDENCE_BOUNDS,
    Match,
    MatchReport,
    MatchType,
    Priority,
    Recommendation,
    RecommendationType,
)
from skillmatch.models.schemas.profile import (
    Achievement,
    CareerStage,
    Education,
    Metric,
    ProfileMetadata,
    Project,
    Skill,
    SkillLevel,
    UserProfile,
    VolunteerExperience,
    WorkExperience,
)
from skillmatch.models.schemas.requirements import ExtractedKeyword, JobRequirements
from skillmatch.models.schemas.verification import FactSet, RewrittenBullet, VerificationResult

__all__ = [
    "Achievement",
    "CareerStage",
    "CONFIDENCE_BOUNDS",
    "Education",
    "ExtractedKeyword",
    "FactSet",
    "JobRequirements",
    "Match",
    "MatchReport",
    "MatchType",
    "Metric",
    "Priority",
    "ProfileMetadata",
    "Project",
    "Recommendation",
    "RecommendationType",
    "RewrittenBullet",
    "Skill",
    "SkillLevel",
    "UserProfile",
    "VerificationResult",
    "VolunteerExperience",
    "WorkExperience",
]

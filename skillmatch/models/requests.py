from pydantic import BaseModel, Field

from skillmatch.models.schemas.profile import Achievement, UserProfile
from skillmatch.models.schemas.requirements import ExtractedKeyword, JobRequirements
from skillmatch.models.schemas.verification import FactSet


class MatchRequest(BaseModel):
    profile: UserProfile
    requirements: JobRequirements


class VerifyRequest(BaseModel):
    facts: FactSet
    rewritten_text: str = Field(..., max_length=5000, description="AI-rewritten bullet text")


class CoverLetterVerifyRequest(BaseModel):
    profile: UserProfile
    sections: list[str] = Field(..., max_length=20, description="Cover letter body sections")


class FactsRequest(BaseModel):
    achievement: Achievement


class TailorRequest(BaseModel):
    achievements: list[Achievement] = Field(..., max_length=30)
    keywords: list[ExtractedKeyword] = []
    title: str = ""
    company: str = ""

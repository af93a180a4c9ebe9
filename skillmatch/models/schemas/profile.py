"""Candidate profile: the single source of truth every match and rewrite is checked against."""

from enum import Enum

from pydantic import BaseModel


class SkillLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"


class CareerStage(str, Enum):
    STUDENT = "student"
    CAREER_CHANGER = "career-changer"
    PROFESSIONAL = "professional"


class Skill(BaseModel):
    """A skill the candidate lists explicitly."""
    name: str = ""
    proficiency: SkillLevel = SkillLevel.INTERMEDIATE
    category: str | None = None
    synonyms: list[str] = []
    years_of_experience: float = 0.0


class Metric(BaseModel):
    """A quantified result recorded on an achievement, e.g. 40 '%' latency."""
    value: float
    unit: str = ""  # '%', 'users', 'hours', '$'
    type: str = "count"  # increase, decrease, reduction, scale, count
    context: str | None = None


class Achievement(BaseModel):
    """One accomplishment bullet. Authored by the user and never modified here."""
    id: str = ""
    bullet: str = ""
    action: str = ""  # "Built", "Led"
    object: str = ""  # "microservices platform"
    result: str | None = None  # "reducing latency by 40%"
    skills: list[str] = []
    keywords: list[str] = []
    transferable_skills: list[str] = []
    metrics: list[Metric] = []
    verified: bool = False


class WorkExperience(BaseModel):
    id: str = ""
    company: str = ""
    title: str = ""
    start_date: str = ""
    end_date: str | None = None  # None = current
    skills: list[str] = []
    achievements: list[Achievement] = []


class Project(BaseModel):
    id: str = ""
    name: str = ""
    description: str = ""
    skills: list[str] = []
    achievements: list[Achievement] = []


class VolunteerExperience(BaseModel):
    id: str = ""
    organization: str = ""
    role: str = ""
    skills: list[str] = []
    achievements: list[Achievement] = []


class Education(BaseModel):
    id: str = ""
    school: str = ""
    degree: str = ""
    field: str = ""
    relevant_courses: list[str] = []


class ProfileMetadata(BaseModel):
    total_years_experience: float = 0.0
    domains: list[str] = []
    seniority: str = "mid"  # entry, mid, senior, staff, principal
    career_stage: CareerStage = CareerStage.PROFESSIONAL


class UserProfile(BaseModel):
    """Complete candidate profile.

    Optional sections default to empty so partially filled profiles can be
    matched; the profile store is responsible for validating required fields.
    """
    name: str = ""
    title: str = ""
    skills: list[Skill | None] = []
    work_experience: list[WorkExperience] = []
    projects: list[Project] = []
    volunteer: list[VolunteerExperience] = []
    education: list[Education] = []
    metadata: ProfileMetadata = ProfileMetadata()

    def all_achievements(self) -> list[Achievement]:
        """Achievements from work, projects and volunteer entries, in that order."""
        found: list[Achievement] = []
        for exp in self.work_experience:
            found.extend(exp.achievements)
        for project in self.projects:
            found.extend(project.achievements)
        for vol in self.volunteer:
            found.extend(vol.achievements)
        return found

"""Shared test configuration, pytest markers and profile fixtures."""

import pytest

from skillmatch.models.schemas import (
    Achievement,
    CareerStage,
    Education,
    Metric,
    ProfileMetadata,
    Project,
    Skill,
    UserProfile,
    VolunteerExperience,
    WorkExperience,
)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "api: exercises the FastAPI app through TestClient"
    )


@pytest.fixture
def engineer_profile() -> UserProfile:
    """Backend engineer with Python, PostgreSQL, React and Docker evidence."""
    return UserProfile(
        name="Sam Rivera",
        title="Backend Engineer",
        skills=[Skill(name="Python"), Skill(name="PostgreSQL"), None],
        work_experience=[
            WorkExperience(
                id="w1",
                company="Acme",
                title="Software Engineer",
                skills=["Python", "PostgreSQL", "Docker"],
                achievements=[
                    Achievement(
                        id="a1",
                        bullet="Built microservices platform reducing latency by 40%",
                        action="Built",
                        object="microservices platform",
                        result="reducing latency by 40%",
                        skills=["Python", "Docker"],
                        keywords=["microservices"],
                        metrics=[Metric(value=40, unit="%", type="reduction", context="latency")],
                    ),
                    Achievement(
                        id="a2",
                        bullet="Led a team of 5 engineers to migrate billing to PostgreSQL",
                        action="Led",
                        object="billing migration",
                        skills=["PostgreSQL"],
                        keywords=["team leadership"],
                    ),
                ],
            ),
        ],
        projects=[
            Project(
                id="p1",
                name="Dashboard",
                skills=["React"],
                achievements=[
                    Achievement(
                        id="a3",
                        bullet="Developed analytics dashboard serving 500 users",
                        skills=["React"],
                        keywords=["data visualization"],
                        metrics=[Metric(value=500, unit="users", type="scale")],
                    ),
                ],
            ),
        ],
        education=[Education(id="e1", school="State U", relevant_courses=["Distributed Systems"])],
    )


@pytest.fixture
def career_changer_profile() -> UserProfile:
    """Career changer whose only evidence is classroom teaching."""
    return UserProfile(
        name="Jordan Lee",
        title="Teacher",
        work_experience=[
            WorkExperience(
                id="w1",
                company="Lincoln High",
                title="Math Teacher",
                skills=["Teaching"],
                achievements=[
                    Achievement(
                        id="t1",
                        bullet="Taught algebra to 120 students across 4 sections",
                        skills=["teaching"],
                    ),
                ],
            ),
        ],
        volunteer=[
            VolunteerExperience(
                id="v1",
                organization="Code Club",
                skills=["mentoring"],
                achievements=[
                    Achievement(id="v1a", bullet="Mentored students learning Scratch", skills=["mentoring"]),
                ],
            ),
        ],
        metadata=ProfileMetadata(career_stage=CareerStage.CAREER_CHANGER),
    )

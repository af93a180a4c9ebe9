"""Flatten a candidate profile into the lower-cased skill vocabulary the matcher searches."""

from collections.abc import Iterable

from skillmatch.models.schemas.profile import Achievement, UserProfile


def _add_all(corpus: set[str], names: Iterable[str | None]) -> None:
    for name in names:
        if name:
            corpus.add(name.lower())


def _add_achievements(corpus: set[str], achievements: Iterable[Achievement], *, full: bool = True) -> None:
    for ach in achievements:
        _add_all(corpus, ach.skills)
        if full:
            _add_all(corpus, ach.keywords)
            _add_all(corpus, ach.transferable_skills)


def collect_user_skills(profile: UserProfile) -> set[str]:
    """Union of every skill name mentioned anywhere in the profile.

    Explicit skills, work and project skills together with their
    achievements' skills/keywords/transferable skills, volunteer skills with
    achievement skills, and education relevant courses. Empty entries are
    skipped.
    """
    corpus: set[str] = set()

    _add_all(corpus, (skill.name for skill in profile.skills if skill is not None))

    for exp in profile.work_experience:
        _add_all(corpus, exp.skills)
        _add_achievements(corpus, exp.achievements)

    for project in profile.projects:
        _add_all(corpus, project.skills)
        _add_achievements(corpus, project.achievements)

    for vol in profile.volunteer:
        _add_all(corpus, vol.skills)
        _add_achievements(corpus, vol.achievements, full=False)

    for edu in profile.education:
        _add_all(corpus, edu.relevant_courses)

    return corpus

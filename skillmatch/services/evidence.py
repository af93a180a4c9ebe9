"""Locate the achievements that prove a candidate has a skill.

Only tagged skills and keywords count as evidence. Bullet text is never
searched: a word appearing in a sentence is not proof of the skill.
"""

from skillmatch.models.schemas.profile import Achievement, UserProfile


def _tags_skill(achievement: Achievement, target: str) -> bool:
    return any(s and s.lower() == target for s in achievement.skills) or any(
        k and k.lower() == target for k in achievement.keywords
    )


def find_evidence_for_skill(skill_name: str, profile: UserProfile) -> list[Achievement]:
    """Achievements tagged with `skill_name` (case-insensitive exact match).

    Ordered by section (work, projects, volunteer), then entry, then
    achievement. Empty when nothing in the profile backs the skill.
    """
    target = skill_name.lower().strip()
    if not target:
        return []
    return [ach for ach in profile.all_achievements() if _tags_skill(ach, target)]

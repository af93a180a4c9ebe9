"""Match score aggregation and gap-closing recommendations."""

from skillmatch.config import Settings
from skillmatch.config import settings as default_settings
from skillmatch.models.schemas.match_report import Match, Priority, Recommendation, RecommendationType
from skillmatch.models.schemas.profile import CareerStage, UserProfile
from skillmatch.models.schemas.requirements import ExtractedKeyword


def calculate_match_score(
    total_required: int,
    total_preferred: int,
    matched_required: int,
    matched_preferred: int,
    settings: Settings = default_settings,
) -> float:
    """Weighted coverage: 70% required, 30% preferred, clamped to [0, 1].

    A posting with no required keywords counts required coverage as full; one
    with no preferred keywords counts preferred coverage as neutral (0.5).
    """
    if total_required > 0:
        required_score = matched_required / total_required
    else:
        required_score = settings.empty_required_score

    if total_preferred > 0:
        preferred_score = matched_preferred / total_preferred
    else:
        preferred_score = settings.empty_preferred_score

    score = settings.required_weight * required_score + settings.preferred_weight * preferred_score
    return max(0.0, min(1.0, score))


def generate_recommendations(
    profile: UserProfile,
    missing: list[ExtractedKeyword],
    matches: list[Match],
    match_score: float,
    settings: Settings = default_settings,
) -> list[Recommendation]:
    """Suggestions for closing the gap, sorted high -> medium -> low priority.

    A missing keyword counts as required or preferred by its own `required`
    flag, whichever list of the posting it arrived in.
    """
    recs: list[Recommendation] = []
    missing_required = [k for k in missing if k.required]
    missing_preferred = [k for k in missing if not k.required]

    for req in missing_required[:settings.max_required_recommendations]:
        recs.append(Recommendation(
            type=RecommendationType.ADD_SKILL,
            priority=Priority.HIGH,
            skill=req.phrase,
            reason=f'Critical missing skill: "{req.phrase}" is a required qualification',
            suggestion=(
                f'Consider gaining experience with "{req.phrase}" through projects, courses, '
                "or professional work. This is a must-have for this role."
            ),
        ))

    for req in missing_preferred[:settings.max_preferred_recommendations]:
        recs.append(Recommendation(
            type=RecommendationType.ADD_SKILL,
            priority=Priority.MEDIUM,
            skill=req.phrase,
            reason=f'Preferred skill missing: "{req.phrase}" would strengthen your application',
            suggestion=(
                f'Learning "{req.phrase}" could make you a more competitive candidate. '
                "Consider adding this to your skill development plan."
            ),
        ))

    weak = [m for m in matches if m.confidence < settings.weak_match_threshold]
    for match in weak[:settings.max_reframe_recommendations]:
        phrase = match.requirement.phrase
        recs.append(Recommendation(
            type=RecommendationType.REFRAME_EXPERIENCE,
            priority=Priority.MEDIUM,
            skill=phrase,
            reason=f'Weak match for "{phrase}" ({match.match_type.value} match)',
            suggestion=(
                f'Emphasize your "{phrase}" experience more prominently in your resume. '
                "Add more specific examples."
            ),
        ))

    if (
        match_score < settings.low_score_threshold
        and profile.metadata.career_stage != CareerStage.PROFESSIONAL
    ):
        recs.append(Recommendation(
            type=RecommendationType.ADD_PROJECT,
            priority=Priority.HIGH,
            reason="Overall match score is low",
            suggestion=(
                "Consider building a project that demonstrates the missing required skills. "
                "This is especially valuable for career changers and students."
            ),
        ))

    certifiable = [k for k in missing if k.is_technical]
    for req in certifiable[:settings.max_certification_recommendations]:
        recs.append(Recommendation(
            type=RecommendationType.GET_CERTIFICATION,
            priority=Priority.LOW,
            skill=req.phrase,
            reason=f'Technical certification could validate "{req.phrase}" skills',
            suggestion=(
                f'Consider pursuing a certification in "{req.phrase}" to demonstrate '
                "competency and fill this gap."
            ),
        ))

    # sorted() is stable, so insertion order holds within a priority
    return sorted(recs, key=lambda r: r.priority.rank)

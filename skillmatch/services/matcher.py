"""Cascading requirement matcher: direct -> semantic -> transferable -> inferred.

Every match is backed by at least one concrete achievement. A requirement the
candidate cannot prove is reported as missing, never as a weak match.

Confidence per strategy:
  direct        1.0 (exact) / 0.95 (synonym)
  semantic      0.7 + similarity * 0.2, similarity >= 0.5
  transferable  0.6
  inferred      0.7
"""

import logging
import re
from collections import Counter
from collections.abc import Iterable, Mapping

from skillmatch.config import Settings
from skillmatch.config import settings as default_settings
from skillmatch.models.schemas.match_report import Match, MatchReport, MatchType
from skillmatch.models.schemas.profile import Achievement, UserProfile
from skillmatch.models.schemas.requirements import ExtractedKeyword, JobRequirements
from skillmatch.services.evidence import find_evidence_for_skill
from skillmatch.services.knowledge import DEFAULT_KNOWLEDGE, SkillKnowledge
from skillmatch.services.scoring import calculate_match_score, generate_recommendations
from skillmatch.services.skill_corpus import collect_user_skills

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[.\-_/]")


def tokenize_skill(skill: str, min_length: int = 2) -> set[str]:
    """Lower-case word set of a skill name; tokens of `min_length` chars or fewer are dropped."""
    words = _SEPARATORS.sub(" ", skill.lower()).split()
    return {w for w in words if len(w) > min_length}


def calculate_word_similarity(words1: set[str], words2: set[str]) -> float:
    """Jaccard similarity of two token sets, 0.0 when either is empty."""
    if not words1 or not words2:
        return 0.0
    return len(words1 & words2) / len(words1 | words2)


# ---------------------------------------------------------------------------
# Strategy 1: direct
# ---------------------------------------------------------------------------

def find_direct_match(
    requirement: ExtractedKeyword,
    profile: UserProfile,
    user_skills: set[str],
    *,
    knowledge: SkillKnowledge = DEFAULT_KNOWLEDGE,
    settings: Settings = default_settings,
) -> Match | None:
    """Exact phrase, then skills-database synonyms, then the requirement's own synonyms."""
    phrase = requirement.phrase
    req_lower = phrase.lower()

    if req_lower in user_skills:
        evidence = find_evidence_for_skill(phrase, profile)
        if evidence:
            return Match(
                requirement=requirement,
                user_evidence=evidence,
                match_type=MatchType.DIRECT,
                confidence=settings.direct_confidence,
                explanation=(
                    f'Direct match: User explicitly lists "{phrase}" as a skill '
                    f"with {len(evidence)} concrete examples"
                ),
            )

    for synonyms in (knowledge.synonyms_for(req_lower), requirement.synonyms):
        for synonym in synonyms:
            if not synonym or synonym.lower() not in user_skills:
                continue
            evidence = find_evidence_for_skill(synonym, profile)
            if evidence:
                return Match(
                    requirement=requirement,
                    user_evidence=evidence,
                    match_type=MatchType.DIRECT,
                    confidence=settings.synonym_confidence,
                    explanation=f'Direct match via synonym: User has "{synonym}" which matches "{phrase}"',
                )

    return None


# ---------------------------------------------------------------------------
# Strategy 2: semantic (token overlap)
# ---------------------------------------------------------------------------

def find_semantic_match(
    requirement: ExtractedKeyword,
    profile: UserProfile,
    user_skills: set[str],
    *,
    knowledge: SkillKnowledge = DEFAULT_KNOWLEDGE,
    settings: Settings = default_settings,
) -> Match | None:
    """Best token-overlap skill above the similarity threshold.

    Only the single most similar skill is tried for evidence. Ties go to the
    alphabetically first skill.
    """
    req_words = tokenize_skill(requirement.phrase, settings.min_token_length)
    if not req_words:
        return None

    best_skill: str | None = None
    best_similarity = 0.0
    for user_skill in sorted(user_skills):
        similarity = calculate_word_similarity(
            req_words, tokenize_skill(user_skill, settings.min_token_length)
        )
        if similarity >= settings.semantic_similarity_threshold and similarity > best_similarity:
            best_skill, best_similarity = user_skill, similarity

    if best_skill is None:
        return None

    evidence = find_evidence_for_skill(best_skill, profile)
    if not evidence:
        return None

    confidence = settings.semantic_base_confidence + best_similarity * settings.semantic_confidence_span
    return Match(
        requirement=requirement,
        user_evidence=evidence,
        match_type=MatchType.SEMANTIC,
        confidence=confidence,
        explanation=(
            f'Semantic match: User has "{best_skill}" which is related to '
            f'"{requirement.phrase}" ({best_similarity:.0%} similar)'
        ),
    )


# ---------------------------------------------------------------------------
# Strategies 3 and 4: table driven
# ---------------------------------------------------------------------------

def _related(target: str, req_lower: str) -> bool:
    return target == req_lower or target in req_lower or req_lower in target


def _find_table_match(
    table: Mapping[str, Iterable[str]],
    requirement: ExtractedKeyword,
    profile: UserProfile,
    user_skills: set[str],
) -> tuple[str, list[Achievement]] | None:
    """First (source skill, evidence) whose table entry covers the requirement."""
    req_lower = requirement.phrase.lower()
    for source, targets in table.items():
        if source not in user_skills:
            continue
        if not any(_related(t, req_lower) for t in targets):
            continue
        evidence = find_evidence_for_skill(source, profile)
        if evidence:
            return source, evidence
    return None


def find_transferable_match(
    requirement: ExtractedKeyword,
    profile: UserProfile,
    user_skills: set[str],
    *,
    knowledge: SkillKnowledge = DEFAULT_KNOWLEDGE,
    settings: Settings = default_settings,
) -> Match | None:
    found = _find_table_match(knowledge.transferable_skills, requirement, profile, user_skills)
    if found is None:
        return None
    source, evidence = found
    return Match(
        requirement=requirement,
        user_evidence=evidence,
        match_type=MatchType.TRANSFERABLE,
        confidence=settings.transferable_confidence,
        explanation=(
            f'Transferable skill: User\'s "{source}" experience demonstrates '
            f'"{requirement.phrase}" (career changer strength)'
        ),
    )


def find_inferred_match(
    requirement: ExtractedKeyword,
    profile: UserProfile,
    user_skills: set[str],
    *,
    knowledge: SkillKnowledge = DEFAULT_KNOWLEDGE,
    settings: Settings = default_settings,
) -> Match | None:
    found = _find_table_match(knowledge.skill_inferences, requirement, profile, user_skills)
    if found is None:
        return None
    parent, evidence = found
    return Match(
        requirement=requirement,
        user_evidence=evidence,
        match_type=MatchType.INFERRED,
        confidence=settings.inferred_confidence,
        explanation=f'Inferred skill: Since user knows "{parent}", they likely know "{requirement.phrase}"',
    )


_CASCADE = (
    find_direct_match,
    find_semantic_match,
    find_transferable_match,
    find_inferred_match,
)


def find_match_for_requirement(
    requirement: ExtractedKeyword,
    profile: UserProfile,
    user_skills: set[str],
    *,
    knowledge: SkillKnowledge = DEFAULT_KNOWLEDGE,
    settings: Settings = default_settings,
) -> Match | None:
    """Run the cascade; the first strategy that produces evidence wins."""
    if not requirement.phrase.strip():
        return None
    for strategy in _CASCADE:
        match = strategy(requirement, profile, user_skills, knowledge=knowledge, settings=settings)
        if match is not None:
            return match
    return None


def match_user_to_job(
    profile: UserProfile,
    requirements: JobRequirements,
    *,
    knowledge: SkillKnowledge | None = None,
    settings: Settings | None = None,
) -> MatchReport:
    """Match a profile against a job's required and preferred keywords.

    Returns evidenced matches, missing requirements, the weighted match score
    and prioritized recommendations.
    """
    knowledge = knowledge or DEFAULT_KNOWLEDGE
    settings = settings or default_settings

    user_skills = collect_user_skills(profile)
    logger.debug("Profile skill corpus has %d entries", len(user_skills))

    matches: list[Match] = []
    missing: list[ExtractedKeyword] = []
    matched_required = 0
    matched_preferred = 0

    # list membership drives the score; each keyword's own flag drives recommendations
    for is_required, keywords in ((True, requirements.required), (False, requirements.preferred)):
        for requirement in keywords:
            match = find_match_for_requirement(
                requirement, profile, user_skills, knowledge=knowledge, settings=settings
            )
            if match is None:
                logger.debug("No evidenced match for %r", requirement.phrase)
                missing.append(requirement)
                continue
            logger.debug(
                "Matched %r via %s (%.2f)",
                requirement.phrase, match.match_type.value, match.confidence,
            )
            matches.append(match)
            if is_required:
                matched_required += 1
            else:
                matched_preferred += 1

    match_score = calculate_match_score(
        total_required=len(requirements.required),
        total_preferred=len(requirements.preferred),
        matched_required=matched_required,
        matched_preferred=matched_preferred,
        settings=settings,
    )
    recommendations = generate_recommendations(
        profile, missing, matches, match_score, settings=settings
    )

    by_type = Counter(m.match_type.value for m in matches)
    logger.info(
        "Matched %d/%d requirements (direct=%d semantic=%d transferable=%d inferred=%d), "
        "missing=%d, score=%.2f",
        len(matches),
        len(requirements.required) + len(requirements.preferred),
        by_type[MatchType.DIRECT.value],
        by_type[MatchType.SEMANTIC.value],
        by_type[MatchType.TRANSFERABLE.value],
        by_type[MatchType.INFERRED.value],
        len(missing),
        match_score,
    )

    return MatchReport(
        matches=matches,
        missing=missing,
        match_score=match_score,
        recommendations=recommendations,
    )

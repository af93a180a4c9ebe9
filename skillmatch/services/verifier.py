"""Hallucination checks for AI-rewritten text.

A rewrite that loses or invents a metric (bullets), or a cover letter that makes
a claim the profile cannot back, is rejected; the caller must fall back to the
original.
"""

import logging
import re
from dataclasses import dataclass

from skillmatch.config import Settings
from skillmatch.config import settings as default_settings
from skillmatch.models.schemas.profile import Metric, UserProfile
from skillmatch.models.schemas.verification import FactSet, VerificationResult
from skillmatch.services.fact_extractor import NUMERIC_METRIC_PATTERNS, find_metrics, format_metric

logger = logging.getLogger(__name__)


def _result(added: list[str], removed: list[str], confidence: float) -> VerificationResult:
    return VerificationResult(
        all_facts_preserved=not added and not removed,
        added_facts=added,
        removed_facts=removed,
        confidence=max(0.0, min(1.0, confidence)),
    )


def verify(
    original: FactSet,
    rewritten_text: str,
    settings: Settings = default_settings,
) -> VerificationResult:
    """Check that every original metric survives verbatim in the rewrite.

    Each missing metric is reported as "Metric: <value>" and costs
    `missing_metric_penalty` confidence. A number in the rewrite that is not
    one of the original metrics is reported as "New metric: <value>" and
    costs `new_metric_penalty`.
    """
    text = rewritten_text or ""
    added: list[str] = []
    removed: list[str] = []
    confidence = 1.0

    for metric in original.metrics:
        if metric not in text:
            removed.append(f"Metric: {metric}")
            confidence -= settings.missing_metric_penalty

    for metric in find_metrics(text, NUMERIC_METRIC_PATTERNS):
        if metric not in original.metrics:
            added.append(f"New metric: {metric}")
            confidence -= settings.new_metric_penalty

    result = _result(added, removed, confidence)
    if not result.all_facts_preserved:
        logger.warning(
            "Rewrite rejected: %d metric(s) missing, %d added (%s)",
            len(removed), len(added), ", ".join(removed + added),
        )
    return result


# ---------------------------------------------------------------------------
# Cover letter audit
# ---------------------------------------------------------------------------

_TEAM_CLAIM = re.compile(
    r"\b(?:led|lead|managed|manages|directed|mentored|oversaw|supervised|coached|guided)\b"
    r".*\b(?:team|group|engineers?|developers?|people)\b"
    r"|\bteam\s+(?:of\s+)?\d+"
)
_TEAM_SIZE = re.compile(r"\bteam\s+of\s+(\d+)")
_LETTER_METRIC = re.compile(
    r"(\d+(?:[.,]\d{3})*(?:\.\d+)?)\s*"
    r"([%€$£¥]|\s*(?:users?|customers?|employees?|developers?|engineers?|hours|days|weeks|months"
    r"|years|revenue|profit|savings|reduction|increase|growth|improvement))",
    re.IGNORECASE,
)
_PROFILE_TEAM_WORDS = re.compile(r"\b(?:led|team|managed)\b", re.IGNORECASE)
_PROFILE_TEAM_SIZE = re.compile(r"team\s+of\s+\d+", re.IGNORECASE)


@dataclass
class LetterClaims:
    """Checkable claims found in one piece of letter text."""
    team_involvement: bool
    team_size: str | None  # digits as written
    metrics: list[Metric]


def _normalize_unit(unit: str) -> str:
    return unit.strip().lower()


def extract_letter_claims(text: str) -> LetterClaims:
    lowered = text.lower()
    size = _TEAM_SIZE.search(lowered)

    metrics: list[Metric] = []
    seen: set[tuple[float, str]] = set()
    for m in _LETTER_METRIC.finditer(text):
        value = float(m.group(1).replace(",", ""))
        unit = _normalize_unit(m.group(2))
        if (value, unit) in seen:
            continue
        seen.add((value, unit))
        metrics.append(Metric(value=value, unit=unit))

    return LetterClaims(
        team_involvement=_TEAM_CLAIM.search(lowered) is not None,
        team_size=size.group(1) if size else None,
        metrics=metrics,
    )


def _audit_section(
    text: str,
    profile: UserProfile,
    settings: Settings,
) -> tuple[list[str], float]:
    """Added-fact descriptions and the total penalty for one section."""
    claims = extract_letter_claims(text or "")
    achievements = profile.all_achievements()
    added: list[str] = []
    penalty = 0.0

    if claims.team_involvement:
        if not any(_PROFILE_TEAM_WORDS.search(a.bullet) for a in achievements):
            added.append("Added team leadership claim without evidence")
            penalty += settings.team_claim_penalty

    if claims.team_size is not None:
        if not any(_PROFILE_TEAM_SIZE.search(a.bullet) for a in achievements):
            added.append(f"Added specific team size: {claims.team_size}")
            penalty += settings.team_size_penalty

    if claims.metrics:
        recorded = [m for a in achievements for m in a.metrics]
        for claimed in claims.metrics:
            backed = any(
                abs(m.value - claimed.value) < settings.metric_tolerance
                and _normalize_unit(m.unit) == claimed.unit
                for m in recorded
            )
            if not backed:
                added.append(f"Added metric: {format_metric(claimed)}")
                penalty += settings.unverified_metric_penalty

    return added, penalty


def verify_letter_section(
    text: str,
    profile: UserProfile,
    settings: Settings = default_settings,
) -> VerificationResult:
    """Audit one cover-letter section against everything the profile records."""
    return verify_cover_letter([text], profile, settings)


def verify_cover_letter(
    sections: list[str],
    profile: UserProfile,
    settings: Settings = default_settings,
) -> VerificationResult:
    """Audit every section; penalties accumulate across sections."""
    added: list[str] = []
    confidence = 1.0
    for section in sections:
        if not section:
            continue
        section_added, penalty = _audit_section(section, profile, settings)
        added.extend(section_added)
        confidence -= penalty

    result = _result(added, [], confidence)
    if not result.all_facts_preserved:
        logger.warning("Cover letter has %d unsupported claim(s): %s", len(added), "; ".join(added))
    return result

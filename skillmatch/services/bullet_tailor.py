"""Tailor achievement bullets to a job through a text generator, guarded by fact verification.

The generator is a black box `prompt -> text | None`. Whatever it returns,
the bullet shown to anyone is either a rewrite that kept every metric or the
original text verbatim.
"""

import json
import logging
from collections.abc import Callable, Sequence

from skillmatch.config import Settings
from skillmatch.config import settings as default_settings
from skillmatch.models.schemas.profile import Achievement
from skillmatch.models.schemas.requirements import ExtractedKeyword
from skillmatch.models.schemas.verification import FactSet, RewrittenBullet
from skillmatch.services.fact_extractor import extract_facts
from skillmatch.services.verifier import verify

logger = logging.getLogger(__name__)

Generator = Callable[[str], str | None]

MAX_REQUIRED_KEYWORDS = 10
MAX_PREFERRED_KEYWORDS = 5
BULLET_MARKER = "•"


def select_target_keywords(keywords: Sequence[ExtractedKeyword]) -> list[str]:
    """Up to 10 required then 5 preferred phrases, in extraction order."""
    required = [k.phrase for k in keywords if k.required][:MAX_REQUIRED_KEYWORDS]
    preferred = [k.phrase for k in keywords if not k.required][:MAX_PREFERRED_KEYWORDS]
    return required + preferred


def build_rewrite_prompt(
    achievements: Sequence[Achievement],
    target_keywords: Sequence[str],
    title: str = "",
    company: str = "",
    facts: Sequence[FactSet] | None = None,
) -> str:
    """Anti-hallucination rewrite prompt listing the facts each bullet must keep."""
    if facts is None:
        facts = [extract_facts(a) for a in achievements]

    facts_json = json.dumps(
        [
            {
                "bulletNumber": i + 1,
                "originalText": ach.bullet,
                "requiredMetrics": fs.metrics,
                "requiredTechnologies": fs.technologies,
                "requiredKeyFacts": fs.key_facts,
            }
            for i, (ach, fs) in enumerate(zip(achievements, facts))
        ],
        indent=2,
        ensure_ascii=False,
    )

    return f"""CRITICAL ANTI-HALLUCINATION RULES:
1. You MUST use ONLY the facts, metrics, and technologies provided for each bullet
2. DO NOT add new metrics, percentages, or numbers not in the original
3. DO NOT invent team sizes, project durations, or scope
4. DO NOT add technologies or tools not mentioned in the original
5. DO NOT inflate achievements or exaggerate impact
6. You CAN reword sentences for clarity and keyword optimization
7. You CAN emphasize matching keywords from the job description

ORIGINAL EXPERIENCE:
Position: {title}
Company: {company}

ORIGINAL BULLETS WITH REQUIRED FACTS:
{facts_json}

TARGET KEYWORDS TO EMPHASIZE: {', '.join(target_keywords)}

TASK:
Rewrite each bullet to emphasize the target keywords naturally while keeping
ALL original metrics, technologies, and facts EXACTLY as provided.

RULES FOR OUTPUT:
- Return EXACTLY {len(achievements)} bullets, in the original order (one per original bullet)
- Each bullet must start with a strong action verb
- Each bullet must preserve all facts listed for that bullet number
- Return only the bullets, one per line, no numbering, no extra text
- Start each bullet with "{BULLET_MARKER}" character

Begin:"""


def parse_rewritten_bullets(response: str | None) -> list[str]:
    """Lines starting with the bullet marker, marker stripped."""
    if not response:
        return []
    bullets = []
    for line in response.splitlines():
        line = line.strip()
        if line.startswith(BULLET_MARKER):
            bullets.append(line[len(BULLET_MARKER):].strip())
    return bullets


def apply_rewrite(
    achievement: Achievement,
    rewritten: str,
    settings: Settings = default_settings,
    facts: FactSet | None = None,
) -> RewrittenBullet:
    """Verify one rewrite; keep it only when every fact survived."""
    if facts is None:
        facts = extract_facts(achievement)
    verification = verify(facts, rewritten, settings)
    preserved = verification.all_facts_preserved
    if not preserved:
        logger.warning("Falling back to original bullet %r", achievement.id or achievement.bullet[:40])
    return RewrittenBullet(
        original=achievement.bullet,
        rewritten=rewritten,
        final=rewritten if preserved else achievement.bullet,
        used_fallback=not preserved,
        facts=facts,
        verification=verification,
    )


def _unchanged(achievement: Achievement, facts: FactSet) -> RewrittenBullet:
    return RewrittenBullet(
        original=achievement.bullet,
        rewritten=achievement.bullet,
        final=achievement.bullet,
        used_fallback=True,
        facts=facts,
    )


def tailor_bullets(
    achievements: Sequence[Achievement],
    target_keywords: Sequence[str],
    generate: Generator,
    *,
    title: str = "",
    company: str = "",
    settings: Settings = default_settings,
) -> list[RewrittenBullet]:
    """Rewrite bullets toward the target keywords without losing any fact.

    No response, or a response with the wrong number of bullets, keeps every
    original bullet. Otherwise each rewrite is verified on its own.
    """
    if not achievements:
        return []

    facts = [extract_facts(a) for a in achievements]
    prompt = build_rewrite_prompt(achievements, target_keywords, title, company, facts)
    logger.debug("Tailoring %d bullets (%d keywords)", len(achievements), len(target_keywords))

    rewritten = parse_rewritten_bullets(generate(prompt))
    if len(rewritten) != len(achievements):
        logger.warning(
            "Bullet count mismatch (expected %d, received %d), using original bullets",
            len(achievements), len(rewritten),
        )
        return [_unchanged(a, f) for a, f in zip(achievements, facts)]

    return [
        apply_rewrite(ach, text, settings, fs)
        for ach, text, fs in zip(achievements, rewritten, facts)
    ]

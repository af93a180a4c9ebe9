"""Fact extraction and rewrite verification contracts."""

from pydantic import BaseModel, Field


class FactSet(BaseModel):
    """Verifiable content of one achievement bullet.

    Every string in `metrics` must survive a rewrite verbatim.
    """
    metrics: list[str] = []
    technologies: list[str] = []
    key_facts: list[str] = []


class VerificationResult(BaseModel):
    """Audit outcome for one rewrite attempt.

    all_facts_preserved=False obligates the caller to discard the rewrite and
    reuse the original text verbatim.
    """
    all_facts_preserved: bool = True
    added_facts: list[str] = []
    removed_facts: list[str] = []
    confidence: float = Field(default=1.0, ge=0.0, le=1.0)


class RewrittenBullet(BaseModel):
    """A rewrite after verification. `final` is what may be shown to anyone."""
    original: str
    rewritten: str
    final: str
    used_fallback: bool = False
    facts: FactSet = FactSet()
    verification: VerificationResult = VerificationResult()

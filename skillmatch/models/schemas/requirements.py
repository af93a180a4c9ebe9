"""Job requirements as produced by the keyword extraction collaborator."""

from pydantic import BaseModel

# Keyword categories that a certification can validate
TECHNICAL_CATEGORIES: frozenset[str] = frozenset({
    "language", "framework", "cloud", "devops", "db", "tool",
})


class ExtractedKeyword(BaseModel):
    """One job requirement. `phrase` is free text, not pre-normalized."""
    phrase: str
    category: str | None = None  # language, framework, cloud, devops, db, tool, soft, ...
    required: bool = False
    synonyms: list[str] = []
    score: float = 0.0
    occurrences: int = 0

    @property
    def is_technical(self) -> bool:
        return self.category in TECHNICAL_CATEGORIES


class JobRequirements(BaseModel):
    required: list[ExtractedKeyword] = []
    preferred: list[ExtractedKeyword] = []

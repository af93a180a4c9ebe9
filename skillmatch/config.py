import os

from pydantic import model_validator
from pydantic_settings import BaseSettings

from skillmatch.models.schemas.match_report import CONFIDENCE_BOUNDS, MatchType


def _parse_cors_origins() -> list[str] | None:
    """Parse SKILLMATCH_CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("SKILLMATCH_CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    log_level: str = "INFO"
    debug: bool = False
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]

    # Generation collaborator (bullet tailoring only)
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"

    # Semantic (token overlap) matching
    semantic_similarity_threshold: float = 0.5
    semantic_base_confidence: float = 0.7
    semantic_confidence_span: float = 0.2
    min_token_length: int = 2  # tokens this short or shorter are dropped

    # Fixed per-strategy confidences
    direct_confidence: float = 1.0
    synonym_confidence: float = 0.95
    transferable_confidence: float = 0.6
    inferred_confidence: float = 0.7

    # Match score aggregation
    required_weight: float = 0.7
    preferred_weight: float = 0.3
    empty_required_score: float = 1.0
    empty_preferred_score: float = 0.5  # neutral when the posting lists no preferred skills

    # Recommendations
    weak_match_threshold: float = 0.7
    low_score_threshold: float = 0.6
    max_required_recommendations: int = 3
    max_preferred_recommendations: int = 2
    max_reframe_recommendations: int = 2
    max_certification_recommendations: int = 1

    # Hallucination verification penalties
    missing_metric_penalty: float = 0.2
    new_metric_penalty: float = 0.3
    team_claim_penalty: float = 0.25
    team_size_penalty: float = 0.25
    unverified_metric_penalty: float = 0.2
    metric_tolerance: float = 0.1

    model_config = {"env_prefix": "SKILLMATCH_", "env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    @model_validator(mode="after")
    def _check_bounds(self) -> "Settings":
        checks = [
            (MatchType.DIRECT, self.direct_confidence),
            (MatchType.DIRECT, self.synonym_confidence),
            (MatchType.SEMANTIC, self.semantic_base_confidence),
            (MatchType.SEMANTIC, self.semantic_base_confidence + self.semantic_confidence_span),
            (MatchType.TRANSFERABLE, self.transferable_confidence),
            (MatchType.INFERRED, self.inferred_confidence),
        ]
        for match_type, value in checks:
            low, high = CONFIDENCE_BOUNDS[match_type]
            if not low - 1e-9 <= value <= high + 1e-9:
                raise ValueError(
                    f"{match_type.value} confidence {value} outside [{low}, {high}]"
                )
        if not 0.0 <= self.semantic_similarity_threshold <= 1.0:
            raise ValueError("semantic_similarity_threshold must be within [0, 1]")
        if abs(self.required_weight + self.preferred_weight - 1.0) > 1e-9:
            raise ValueError("required_weight and preferred_weight must sum to 1")
        return self


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})

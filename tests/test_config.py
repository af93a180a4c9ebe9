"""Tests for settings defaults and validation."""

import pytest
from pydantic import ValidationError

from skillmatch.config import Settings


def test_defaults_match_business_rules():
    s = Settings()
    assert s.semantic_similarity_threshold == 0.5
    assert (s.direct_confidence, s.synonym_confidence) == (1.0, 0.95)
    assert (s.transferable_confidence, s.inferred_confidence) == (0.6, 0.7)
    assert (s.required_weight, s.preferred_weight) == (0.7, 0.3)
    assert s.missing_metric_penalty == 0.2


def test_env_prefix(monkeypatch):
    monkeypatch.setenv("SKILLMATCH_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("SKILLMATCH_MAX_REQUIRED_RECOMMENDATIONS", "5")
    s = Settings()
    assert s.log_level == "DEBUG"
    assert s.max_required_recommendations == 5


@pytest.mark.parametrize("field,value", [
    ("transferable_confidence", 0.8),
    ("inferred_confidence", 0.5),
    ("synonym_confidence", 0.9),
    ("semantic_confidence_span", 0.5),
])
def test_confidence_outside_bounds_rejected(field, value):
    with pytest.raises(ValidationError):
        Settings(**{field: value})


def test_weights_must_sum_to_one():
    with pytest.raises(ValidationError):
        Settings(required_weight=0.8, preferred_weight=0.3)


def test_threshold_range():
    with pytest.raises(ValidationError):
        Settings(semantic_similarity_threshold=1.5)

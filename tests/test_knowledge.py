"""Tests for the static knowledge tables and confidence bounds."""

import pytest

from skillmatch.models.schemas import CONFIDENCE_BOUNDS, MatchType
from skillmatch.models.schemas.match_report import confidence_in_bounds
from skillmatch.services.knowledge import DEFAULT_KNOWLEDGE, SkillKnowledge


def test_bounds_cover_every_match_type():
    assert set(CONFIDENCE_BOUNDS) == set(MatchType)


def test_confidence_in_bounds():
    assert confidence_in_bounds(MatchType.DIRECT, 0.95)
    assert confidence_in_bounds(MatchType.SEMANTIC, 0.7 + 1.0 * 0.2)
    assert not confidence_in_bounds(MatchType.TRANSFERABLE, 0.65)
    assert not confidence_in_bounds(MatchType.INFERRED, 0.6)


def test_synonyms_include_canonical_name():
    assert DEFAULT_KNOWLEDGE.synonyms_for("postgres") == ("postgresql", "postgres", "psql", "pg")
    assert DEFAULT_KNOWLEDGE.synonyms_for("K8s")[0] == "kubernetes"


def test_unknown_term_has_no_synonyms():
    assert DEFAULT_KNOWLEDGE.synonyms_for("basket weaving") == ()
    assert DEFAULT_KNOWLEDGE.canonical_name("") is None


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        DEFAULT_KNOWLEDGE.skill_inferences["react"] = ("cobol",)


def test_instance_is_frozen():
    with pytest.raises(AttributeError):
        DEFAULT_KNOWLEDGE.skill_synonyms = {}


def test_custom_tables_are_normalized():
    knowledge = SkillKnowledge(transferable_skills={"Sales": ["Negotiation"]})
    assert knowledge.transferable_skills == {"sales": ("negotiation",)}
    assert knowledge.synonyms_for("sales") == ()


def test_table_order_is_preserved():
    assert list(DEFAULT_KNOWLEDGE.transferable_skills)[:3] == [
        "teaching", "classroom management", "curriculum development",
    ]

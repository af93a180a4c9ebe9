"""Evidence-backed skill matching and anti-hallucination verification."""

from skillmatch.services.fact_extractor import extract_facts
from skillmatch.services.matcher import match_user_to_job
from skillmatch.services.verifier import verify

__all__ = ["extract_facts", "match_user_to_job", "verify"]

"""Shared dependencies for API routes."""

from skillmatch.services.bullet_tailor import Generator
from skillmatch.services.gemini_client import generate_text


def get_generator() -> Generator:
    return generate_text

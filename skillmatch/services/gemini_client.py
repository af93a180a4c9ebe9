"""Google Gemini API wrapper used as the default bullet-rewrite generator."""

import logging

from google import genai
from google.genai import types

from skillmatch.config import settings

logger = logging.getLogger(__name__)

_client: genai.Client | None = None


def get_client() -> genai.Client | None:
    global _client
    if not settings.gemini_api_key:
        logger.warning("No SKILLMATCH_GEMINI_API_KEY set - bullet tailoring disabled")
        return None
    if _client is None:
        _client = genai.Client(api_key=settings.gemini_api_key)
    return _client


def generate_text(prompt: str) -> str | None:
    """Send a prompt to Gemini and return the plain-text reply.

    None when no key is configured or the call fails; callers keep the
    original text in that case.
    """
    client = get_client()
    if client is None:
        return None

    try:
        response = client.models.generate_content(
            model=settings.gemini_model,
            contents=prompt,
            config=types.GenerateContentConfig(
                temperature=0.3,  # low temperature limits invented detail
                max_output_tokens=1500,
            ),
        )
        text = response.text
        return text.strip() if text else None
    except Exception as e:
        logger.error("Gemini API error: %s", e)
        return None

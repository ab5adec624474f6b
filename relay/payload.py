"""Credential lookup and outbound payload construction."""

import structlog

from config import Settings
from relay.errors import ConfigurationError
from relay.models import GeminiContent, GeminiPart, GeminiPayload

logger = structlog.get_logger()


def resolve_api_key(settings: Settings) -> str:
    """Return the Gemini key or raise ConfigurationError if it is not set."""
    api_key = settings.gemini_api_key.get_secret_value() if settings.gemini_api_key else ""
    if not api_key:
        logger.error("gemini_api_key_missing", environment=settings.environment)
        raise ConfigurationError()
    return api_key


def build_payload(message: str) -> GeminiPayload:
    """Wrap the user message as a single content with a single text part."""
    return GeminiPayload(contents=[GeminiContent(parts=[GeminiPart(text=message)])])

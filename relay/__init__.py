"""Gemini relay feature."""

from .models import RelayRequest, GeminiPayload, ErrorResponse
from .errors import RelayError, InvalidRequestError, ConfigurationError, UpstreamError
from .gemini import GeminiClient, get_gemini_client
from .routes import router, relay_http_exception_handler

__all__ = [
    "RelayRequest", "GeminiPayload", "ErrorResponse",
    "RelayError", "InvalidRequestError", "ConfigurationError", "UpstreamError",
    "GeminiClient", "get_gemini_client", "router", "relay_http_exception_handler"
]

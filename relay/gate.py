"""Request gate: method checks, CORS preflight and body validation."""

from fastapi import Response
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError
import structlog

from relay.errors import InvalidRequestError
from relay.models import RelayRequest

logger = structlog.get_logger()

ALLOWED_METHODS = ("POST", "OPTIONS")


def cors_headers(allow_origin: str = "*") -> dict[str, str]:
    """Headers attached to every relay response."""
    return {
        "Access-Control-Allow-Origin": allow_origin,
        "Access-Control-Allow-Methods": ", ".join(ALLOWED_METHODS),
        "Access-Control-Allow-Headers": "Content-Type",
    }


def preflight_response(allow_origin: str = "*") -> Response:
    """Empty 200 answering a browser preflight."""
    return Response(status_code=200, headers=cors_headers(allow_origin))


def method_not_allowed_response(allow_origin: str = "*") -> PlainTextResponse:
    return PlainTextResponse(
        "Method Not Allowed",
        status_code=405,
        headers=cors_headers(allow_origin),
    )


def parse_relay_request(body: bytes) -> RelayRequest:
    """Parse the raw POST body into a RelayRequest.

    Invalid JSON, a non-object body and a missing, non-string or blank
    ``message`` all raise InvalidRequestError.
    """
    try:
        return RelayRequest.model_validate_json(body)
    except ValidationError as e:
        logger.info("relay_request_rejected", errors=e.error_count())
        raise InvalidRequestError() from e

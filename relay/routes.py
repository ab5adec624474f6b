"""Relay API routes."""

from fastapi import APIRouter, Depends, Request, Response
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import structlog

from config import Settings, get_settings
from relay.errors import RelayError
from relay.gate import cors_headers, method_not_allowed_response, parse_relay_request, preflight_response
from relay.gemini import GeminiClient, get_gemini_client
from relay.models import ErrorResponse
from relay.payload import build_payload, resolve_api_key

logger = structlog.get_logger()

router = APIRouter()


def error_response(error: RelayError, allow_origin: str = "*") -> JSONResponse:
    """Render a RelayError as ``{"error": ...}`` with CORS headers."""
    return JSONResponse(
        content=ErrorResponse(error=error.message).model_dump(),
        status_code=error.status_code,
        headers=cors_headers(allow_origin),
    )


@router.api_route("/{path:path}", methods=["POST", "OPTIONS"], include_in_schema=False)
async def relay(
    request: Request,
    settings: Settings = Depends(get_settings),
    gemini: GeminiClient = Depends(get_gemini_client),
):
    """Forward one message to Gemini and return its answer verbatim.

    Answers on every path. OPTIONS gets the preflight headers only.
    """
    allow_origin = settings.cors_allow_origin
    if request.method == "OPTIONS":
        return preflight_response(allow_origin)

    try:
        relay_request = parse_relay_request(await request.body())
        api_key = resolve_api_key(settings)
        payload = build_payload(relay_request.message)
        data = await gemini.generate_content(api_key, payload)
        logger.info("relay_completed", message_length=len(relay_request.message))
        return JSONResponse(content=data, status_code=200, headers=cors_headers(allow_origin))
    except RelayError as e:
        return error_response(e, allow_origin)
    except Exception as e:
        logger.exception("relay_unexpected_error", error=str(e))
        return error_response(RelayError(), allow_origin)


async def relay_http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Plain-text 405 with CORS headers for methods the relay does not serve."""
    if exc.status_code == 405:
        return method_not_allowed_response(get_settings().cors_allow_origin)
    return await http_exception_handler(request, exc)

"""Gemini API client for the generateContent call."""

from typing import Optional, Any
from fastapi import Depends
import httpx
import structlog

from config import Settings, get_settings
from relay.errors import UpstreamError
from relay.models import GeminiPayload

logger = structlog.get_logger()


class GeminiClient:
    """Async client for a single Gemini generateContent request."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = settings or get_settings()
        self.endpoint = settings.gemini_endpoint
        self.model = settings.gemini_model
        self.timeout = settings.gemini_timeout_seconds
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def generate_content(self, api_key: str, payload: GeminiPayload) -> Any:
        """POST the payload to Gemini and return the decoded JSON body.

        Raises:
            UpstreamError: Gemini answered with a non-2xx status.
            httpx.HTTPError: transport failure or timeout.
            ValueError: a success body that is not valid JSON.
        """
        client = await self._get_client()
        logger.debug(
            "gemini_request_sent",
            model=self.model,
            message_length=sum(len(p.text) for c in payload.contents for p in c.parts),
        )
        response = await client.post(
            self.endpoint,
            params={"key": api_key},
            json=payload.model_dump(),
        )

        if not response.is_success:
            # Upstream error bodies are not guaranteed to be JSON
            error_body = response.text
            logger.error(
                "gemini_api_error",
                status_code=response.status_code,
                body=error_body,
            )
            raise UpstreamError(response.status_code, error_body)

        return response.json()


# Dependency injection helper
async def get_gemini_client(settings: Settings = Depends(get_settings)) -> GeminiClient:
    """FastAPI dependency for GeminiClient."""
    client = GeminiClient(settings)
    try:
        yield client
    finally:
        await client.close()

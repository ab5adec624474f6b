"""Gemini Relay - Main Application."""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException
import structlog

from config import get_settings
from relay import router as relay_router, relay_http_exception_handler

logger = structlog.get_logger()
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    logger.info(
        "starting_gemini_relay",
        environment=settings.environment,
        model=settings.gemini_model,
        api_key_configured=settings.gemini_api_key is not None,
    )
    yield
    logger.info("shutting_down_gemini_relay")


app = FastAPI(
    title="Gemini Relay",
    version="1.0.0",
    description="Forwards a single chat message to the Gemini API using a server-held key",
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

app.add_exception_handler(StarletteHTTPException, relay_http_exception_handler)

# Catch-all relay route; serves every path
app.include_router(relay_router, tags=["Relay"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )

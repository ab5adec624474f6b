"""Relay data models."""

from pydantic import BaseModel, field_validator


class RelayRequest(BaseModel):
    """Inbound message from the browser."""
    message: str

    @field_validator("message")
    @classmethod
    def message_not_blank(cls, value: str) -> str:
        # Validate only; the text is forwarded untouched.
        if not value.strip():
            raise ValueError("message must not be blank")
        return value


class GeminiPart(BaseModel):
    text: str


class GeminiContent(BaseModel):
    parts: list[GeminiPart]


class GeminiPayload(BaseModel):
    """Body of a generateContent call."""
    contents: list[GeminiContent]


class ErrorResponse(BaseModel):
    """Error body returned to the caller."""
    error: str

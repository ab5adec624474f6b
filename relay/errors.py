"""Relay error types.

Each stage of the relay raises one of these; the route renders it as
``{"error": message}`` with ``status_code``.
"""


class RelayError(Exception):
    """Base class for failures with a caller-safe message."""

    status_code: int = 500
    message: str = "An internal server error occurred"

    def __init__(self, message: str | None = None, status_code: int | None = None):
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class InvalidRequestError(RelayError):
    """Body missing, unparseable, or without a usable message."""

    status_code = 400
    message = "Message is required in the request body"


class ConfigurationError(RelayError):
    """Server is missing the Gemini credential."""

    status_code = 500
    message = "API key configuration error on server"


class UpstreamError(RelayError):
    """Gemini answered with a non-success status."""

    def __init__(self, status_code: int, body: str = ""):
        self.body = body
        super().__init__(
            message=f"Gemini API failed with status {status_code}",
            status_code=status_code,
        )

"""
Application error taxonomy.

Each error carries the HTTP status it is surfaced with; the handlers
registered in ``main.py`` render them as ``{"error": message}``.
"""
from starlette import status


class AppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"error": self.message}


class ValidationError(AppError):
    """Malformed or missing input, duplicate email."""
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request"


class AuthenticationFailure(AppError):
    """Bad credentials, invalid or expired access token, invalid or expired session.

    The message is intentionally generic so callers cannot tell which check failed.
    """
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Could not validate credentials."


class NotFound(AppError):
    """Resource absent or owned by another user. Never surfaced as 403."""
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"

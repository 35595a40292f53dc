from slowapi import Limiter
from slowapi.util import get_remote_address
from fastapi import Request
from core.config import settings
from core.exceptions import AuthenticationFailure
from services.token_service import TokenService

def get_user_id(request: Request):
    """Rate-limit key: the authenticated user id, else the client address."""
    token = request.headers.get("x-access-token")
    if token:
        try:
            return str(TokenService.verify(token))
        except AuthenticationFailure:
            pass

    return get_remote_address(request)

limiter = Limiter(
    key_func=get_user_id,
    default_limits=["200/hour"],
    enabled=settings.ENV != "testing"
)

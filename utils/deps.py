from dataclasses import dataclass
from typing import Annotated
from fastapi import Depends, Request
from sqlalchemy.orm import Session
from core.database import SessionLocal
from core.exceptions import AuthenticationFailure
from models.users import User
from services.session_service import SessionService
from services.token_service import TokenService
from utils.logger import get_logger

logger = get_logger(__name__)

ACCESS_TOKEN_HEADER = "x-access-token"
REFRESH_TOKEN_HEADER = "x-refresh-token"
USER_ID_HEADER = "_id"


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

db_dependency = Annotated[Session, Depends(get_db)]


@dataclass(frozen=True)
class AccessContext:
    """Identity resolved by the access guard."""
    user_id: int


@dataclass(frozen=True)
class SessionContext:
    """Identity resolved by the session guard."""
    user: User
    user_id: int
    refresh_token: str
    expires_at: int


def get_current_user(request: Request) -> AccessContext:
    """
    Access guard: verifies the ``x-access-token`` header locally.

    Raises AuthenticationFailure (401) before the route handler runs when the
    header is missing or the token is malformed, forged or expired.
    """
    token = request.headers.get(ACCESS_TOKEN_HEADER)
    if not token:
        raise AuthenticationFailure()

    return AccessContext(user_id=TokenService.verify(token))


def get_current_session(request: Request, db: db_dependency) -> SessionContext:
    """
    Session guard: validates ``x-refresh-token`` + ``_id`` against the store.

    The user must exist, hold a session with exactly this token, and that
    session must not have expired.
    """
    refresh_token = request.headers.get(REFRESH_TOKEN_HEADER)
    raw_user_id = request.headers.get(USER_ID_HEADER)
    if not refresh_token or not raw_user_id:
        raise AuthenticationFailure()

    try:
        user_id = int(raw_user_id)
    except ValueError:
        raise AuthenticationFailure()

    found = SessionService.find_by_id_and_token(user_id, refresh_token, db)
    if found is None:
        logger.warning("Session lookup failed", extra={"user_id": user_id})
        raise AuthenticationFailure()

    user, user_session = found
    if SessionService.has_expired(user_session.expires_at):
        # Same generic failure as an unknown token
        logger.info("Expired session presented", extra={"user_id": user_id})
        raise AuthenticationFailure()

    return SessionContext(
        user=user,
        user_id=user.id,
        refresh_token=refresh_token,
        expires_at=user_session.expires_at,
    )


user_dependency = Annotated[AccessContext, Depends(get_current_user)]
session_dependency = Annotated[SessionContext, Depends(get_current_session)]

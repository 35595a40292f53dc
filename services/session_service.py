import asyncio
import hashlib
import secrets
import time
from datetime import timedelta
from sqlalchemy.orm import Session
from core.config import settings
from core.database import SessionLocal
from models.user_sessions import UserSession
from models.users import User
from utils.logger import get_logger

logger = get_logger(__name__)


class SessionService:
    """
    Refresh-token sessions: creation, lookup, expiry checks and removal.

    A refresh token is an opaque random string. It carries no signature; its
    only authority is a row in ``user_sessions`` holding its SHA-256 digest.
    """

    @staticmethod
    def generate_refresh_token() -> str:
        return secrets.token_hex(64)

    @staticmethod
    def hash_refresh_token(token: str) -> str:
        """Only this digest is persisted; the raw token goes back to the client once."""
        return hashlib.sha256(token.encode()).hexdigest()

    @staticmethod
    def refresh_token_expiry() -> int:
        lifetime = timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS)
        return int(time.time() + lifetime.total_seconds())

    @staticmethod
    def has_expired(expires_at: int) -> bool:
        return time.time() > expires_at

    @staticmethod
    def create_session(user_id: int, db: Session) -> tuple[str, int]:
        """
        Appends a new session to the user's session list.

        The append is a single INSERT, so two logins racing for the same user
        both persist their own token.

        Returns:
            Tuple of (refresh_token, expires_at)
        """
        token = SessionService.generate_refresh_token()
        expires_at = SessionService.refresh_token_expiry()

        db.add(UserSession(
            user_id=user_id,
            token_hash=SessionService.hash_refresh_token(token),
            expires_at=expires_at
        ))
        db.commit()

        logger.debug("Session created", extra={"user_id": user_id, "expires_at": expires_at})
        return token, expires_at

    @staticmethod
    def find_by_id_and_token(user_id: int, token: str, db: Session) -> tuple[User, UserSession] | None:
        """
        Returns the user and the session matching ``token`` exactly, or None
        when the user does not exist or holds no such session.
        """
        row = (
            db.query(User, UserSession)
            .join(UserSession, UserSession.user_id == User.id)
            .filter(User.id == user_id, UserSession.token_hash == SessionService.hash_refresh_token(token))
            .first()
        )
        if row is None:
            return None
        user, user_session = row
        return user, user_session

    @staticmethod
    def revoke_session(user_id: int, token: str, db: Session) -> bool:
        """
        Drops the session whose token matches (logout).

        Returns True when a session was removed.
        """
        deleted = (
            db.query(UserSession)
            .filter(
                UserSession.user_id == user_id,
                UserSession.token_hash == SessionService.hash_refresh_token(token)
            )
            .delete(synchronize_session=False)
        )
        db.commit()
        return deleted > 0

    @staticmethod
    def purge_expired(db: Session) -> int:
        """Deletes every expired session. Returns how many were removed."""
        deleted = (
            db.query(UserSession)
            .filter(UserSession.expires_at < int(time.time()))
            .delete(synchronize_session=False)
        )
        db.commit()
        return deleted


async def run_session_sweeper(interval_minutes: int):
    """
    Periodically purges expired sessions until cancelled.

    Validation never depends on this task; expired sessions are rejected
    whether or not they have been swept.
    """
    logger.info("Session sweeper started", extra={"interval_minutes": interval_minutes})
    while True:
        await asyncio.sleep(interval_minutes * 60)
        db = SessionLocal()
        try:
            removed = await asyncio.to_thread(SessionService.purge_expired, db)
            if removed:
                logger.info("Expired sessions purged", extra={"removed": removed})
        except Exception:
            logger.error("Session sweep failed", exc_info=True)
        finally:
            db.close()

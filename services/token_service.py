from datetime import datetime, timezone, timedelta
from jose import jwt, JWTError
from core.config import settings
from core.exceptions import AuthenticationFailure
from utils.logger import get_logger

logger = get_logger(__name__)

ACCESS_TOKEN_TYPE = "access"


class TokenService:
    """
    Issues and verifies short-lived access tokens.

    Tokens are HS256 JWTs signed with the process-wide ``SECRET_KEY``, so
    verification is purely local: no store lookup happens on the request path.
    """

    @staticmethod
    def issue(user_id: int, expires_delta: timedelta | None = None) -> tuple[str, datetime]:
        """
        Creates a signed access token for ``user_id``.

        Args:
            user_id: Id of the authenticated user
            expires_delta: Token lifetime (default: ACCESS_TOKEN_EXPIRE_MINUTES)

        Returns:
            Tuple of (token, expires_at)
        """
        if expires_delta is None:
            expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

        expires_at = datetime.now(timezone.utc) + expires_delta

        payload = {
            "_id": user_id,
            "type": ACCESS_TOKEN_TYPE,
            "exp": expires_at
        }

        token = jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
        return token, expires_at

    @staticmethod
    def verify(token: str) -> int:
        """
        Validates an access token and returns the user id it asserts.

        Raises:
            AuthenticationFailure: malformed token, bad signature, expired,
                wrong token type or missing user id
        """
        try:
            payload = jwt.decode(
                token,
                settings.SECRET_KEY,
                algorithms=[settings.ALGORITHM],
                options={"require_exp": True}
            )
        except JWTError as e:
            logger.debug("Access token rejected", extra={"reason": str(e)})
            raise AuthenticationFailure()

        if payload.get("type") != ACCESS_TOKEN_TYPE:
            raise AuthenticationFailure()

        user_id = payload.get("_id")
        if not isinstance(user_id, int) or isinstance(user_id, bool):
            raise AuthenticationFailure()

        return user_id

from fastapi import APIRouter, Request, Response
from starlette import status
from core.exceptions import NotFound
from schemas.user_schemas import CreateUserRequest, LoginRequest, UserResponse, AccessTokenResponse
from services.auth_service import AuthService
from services.session_service import SessionService
from services.token_service import TokenService
from middleware.rate_limiter import limiter
from utils.deps import (db_dependency, user_dependency, session_dependency,
                        ACCESS_TOKEN_HEADER, REFRESH_TOKEN_HEADER)
from utils.logger import get_logger

# Setup logger
logger = get_logger(__name__)


router = APIRouter(
    prefix="/users",
    tags=["users"]
)


def _attach_tokens(response: Response, user_id: int, db) -> None:
    """Issue a new session plus access token and expose both as response headers."""
    refresh_token, _ = SessionService.create_session(user_id, db)
    access_token, _ = TokenService.issue(user_id)

    response.headers[ACCESS_TOKEN_HEADER] = access_token
    response.headers[REFRESH_TOKEN_HEADER] = refresh_token


@router.post("", response_model=UserResponse, status_code=status.HTTP_200_OK)
@limiter.limit("5/minute")
async def signup(request: Request, response: Response, body: CreateUserRequest, db: db_dependency):
    """
    Sign up (public endpoint).

    Returns the new user and a fresh token pair in the
    ``x-access-token`` / ``x-refresh-token`` headers.
    """
    user = AuthService.create_user(body, db)
    _attach_tokens(response, user.id, db)

    logger.info(
        "User registered successfully",
        extra={"user_id": user.id, "email": user.email}
    )

    return user


@router.post("/login", response_model=UserResponse, status_code=status.HTTP_200_OK)
@limiter.limit("5/minute")
async def login(request: Request, response: Response, body: LoginRequest, db: db_dependency):
    """
    Log in (public endpoint). Same response shape as sign up.
    """
    user = AuthService.find_by_credentials(body.email, body.password, db)
    _attach_tokens(response, user.id, db)

    logger.info(
        "User logged in successfully",
        extra={"user_id": user.id, "email": user.email}
    )

    return user


@router.get("/me/access-token", response_model=AccessTokenResponse)
@limiter.limit("30/minute")
async def get_access_token(request: Request, response: Response, current: session_dependency):
    """
    Mint a new access token from a valid refresh-token session.
    """
    access_token, _ = TokenService.issue(current.user_id)
    response.headers[ACCESS_TOKEN_HEADER] = access_token

    logger.info("Access token refreshed", extra={"user_id": current.user_id})

    return AccessTokenResponse(access_token=access_token)


@router.get("/me", response_model=UserResponse)
async def get_me(request: Request, user: user_dependency, db: db_dependency):
    model = AuthService.get_user_by_id(user.user_id, db)

    # Token still valid but the account has been deleted
    if not model:
        raise NotFound("User not found")

    return model


@router.delete("/me/session", status_code=status.HTTP_200_OK)
async def logout(request: Request, current: session_dependency, db: db_dependency):
    """
    Log out: drop the session whose refresh token was presented.
    """
    SessionService.revoke_session(current.user_id, current.refresh_token, db)

    logger.info("User logged out", extra={"user_id": current.user_id})

    return {"message": "Logged out successfully"}


@router.delete("/me", status_code=status.HTTP_200_OK)
async def delete_me(request: Request, user: user_dependency, db: db_dependency):
    """
    Delete the account together with its sessions, lists and tasks.
    """
    if not AuthService.delete_user(user.user_id, db):
        raise NotFound("User not found")

    logger.info("User deleted", extra={"user_id": user.user_id})

    return {"message": "Account deleted"}

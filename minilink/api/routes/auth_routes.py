"""
Authentication Routes

POST /auth/user/register - Register new user, returns token
POST /auth/user/login - Login and get JWT token
GET /auth/user/me - Get current user info
"""

import logging
from fastapi import APIRouter, Depends

from minilink.api.deps import get_token_service, get_user_store
from minilink.core.auth import TokenService, get_current_user, hash_password, verify_password
from minilink.core.exceptions import EmailTaken, InternalError, InvalidCredentials
from minilink.schemas.schemas import AuthResponse, LoginRequest, RegisterRequest, UserResponse
from minilink.services.user_service import UserStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth/user", tags=["Authentication"])


@router.post("/register", response_model=AuthResponse)
def register(
    request: RegisterRequest,
    users: UserStore = Depends(get_user_store),
    tokens: TokenService = Depends(get_token_service)
):
    """
    Register a new user account.

    Returns a token right away, no separate login needed.
    """
    try:
        if users.email_exists(request.email):
            raise EmailTaken()
        user = users.create(request.name, request.email, hash_password(request.password))
        token = tokens.issue(user["_id"])
    except EmailTaken:
        raise
    except Exception:
        logger.exception("Registration failed")
        raise InternalError()

    return {"token": token, "user": user}


@router.post("/login", response_model=AuthResponse)
def login(
    request: LoginRequest,
    users: UserStore = Depends(get_user_store),
    tokens: TokenService = Depends(get_token_service)
):
    """
    Login and receive JWT access token.

    Include token in requests: Authorization: Bearer <token>
    """
    user = users.find_by_email(request.email)
    if not user or not verify_password(request.password, user.pop("password", "")):
        logger.warning("Failed login attempt")
        raise InvalidCredentials()

    return {"token": tokens.issue(user["_id"]), "user": user}


@router.get("/me", response_model=UserResponse)
def get_me(user: dict = Depends(get_current_user)):
    """Get current authenticated user's info."""
    return user

"""
Authentication Utility - JWT and Password handling.

Provides:
- Password hashing with bcrypt
- TokenService: signs and verifies session tokens
- get_current_user: FastAPI dependency guarding protected routes
"""

import logging
from typing import Optional
from jose import JWTError, jwt
from passlib.context import CryptContext
from fastapi import Request
from fastapi.concurrency import run_in_threadpool
from fastapi.security.utils import get_authorization_scheme_param

from minilink.core.exceptions import InvalidToken, Unauthenticated

logger = logging.getLogger(__name__)

# Password hashing
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    """Hash password with bcrypt."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against hash."""
    return pwd_context.verify(plain_password, hashed_password)


class TokenService:
    """
    Issues and verifies stateless session tokens.

    A token carries only the user id and no expiry; it stays valid for as
    long as the signing secret does.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256"):
        if not secret_key:
            raise ValueError("A JWT signing secret must be configured")
        self._secret_key = secret_key
        self.algorithm = algorithm

    def issue(self, user_id: str) -> str:
        """Create a signed token for a user id."""
        return jwt.encode({"id": str(user_id)}, self._secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> str:
        """
        Verify a token and return the user id it carries.

        Raises:
            InvalidToken: bad signature, wrong secret, malformed token,
                or no id in the payload
        """
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self.algorithm])
        except JWTError:
            raise InvalidToken()
        user_id = payload.get("id")
        if not isinstance(user_id, str) or not user_id:
            raise InvalidToken()
        return user_id


async def get_current_user(request: Request) -> Optional[dict]:
    """
    FastAPI dependency - Get current authenticated user.

    Expects `Authorization: Bearer <token>`. Returns the user document
    without the password hash. A user deleted after the token was issued
    comes back as None and is passed through.

    Usage:
        @router.get("/protected")
        def route(user: dict = Depends(get_current_user)):
            return user
    """
    header = request.headers.get("Authorization")
    if not header:
        raise Unauthenticated("No token")

    scheme, token = get_authorization_scheme_param(header)
    if scheme.lower() != "bearer" or not token:
        logger.info("Rejected malformed Authorization header on %s", request.url.path)
        raise Unauthenticated("Invalid token")

    tokens: TokenService = request.app.state.tokens
    try:
        user_id = tokens.verify(token)
    except InvalidToken:
        logger.info("Rejected invalid token on %s", request.url.path)
        raise Unauthenticated("Invalid token")

    return await run_in_threadpool(request.app.state.users.get_by_id, user_id)

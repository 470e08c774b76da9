"""
Schemas module - Request/Response schemas for API endpoints.
"""

from minilink.schemas.schemas import (
    AuthResponse,
    CompanyRef,
    ConnectionRequestResponse,
    JobResponse,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    UserResponse
)

__all__ = [
    "AuthResponse",
    "CompanyRef",
    "ConnectionRequestResponse",
    "JobResponse",
    "LoginRequest",
    "MessageResponse",
    "RegisterRequest",
    "UserResponse"
]

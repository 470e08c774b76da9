"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
Ids go over the wire as `_id` hex strings.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from typing import Optional, List

from minilink.services.connection_service import ConnectionStatus


class DocumentModel(BaseModel):
    """Base for responses built from MongoDB documents."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")


# ============================================================
# AUTH SCHEMAS
# ============================================================

class RegisterRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=1)

class LoginRequest(BaseModel):
    email: EmailStr
    password: str


# ============================================================
# USER SCHEMAS
# ============================================================

class UserResponse(DocumentModel):
    name: str
    email: str
    bio: str = ""
    skills: List[str] = []
    connections: List[str] = []

class AuthResponse(BaseModel):
    token: str
    user: UserResponse


# ============================================================
# CONNECTION SCHEMAS
# ============================================================

class ConnectionRequestResponse(DocumentModel):
    sender: str
    receiver: str
    status: ConnectionStatus = ConnectionStatus.pending


# ============================================================
# JOB SCHEMAS
# ============================================================

class CompanyRef(DocumentModel):
    name: Optional[str] = None

class JobResponse(DocumentModel):
    company: Optional[CompanyRef] = None
    title: str
    description: str = ""
    location: str = ""
    skills_required: List[str] = []
    applicants: List[str] = []


# ============================================================
# COMMON SCHEMAS
# ============================================================

class MessageResponse(BaseModel):
    message: str

"""
User Routes

GET /users/all?q= - Search users by name
"""

from fastapi import APIRouter, Depends, Query
from typing import List

from minilink.api.deps import get_user_store
from minilink.core.auth import get_current_user
from minilink.schemas.schemas import UserResponse
from minilink.services.user_service import UserStore

router = APIRouter(prefix="/users", tags=["Users"], dependencies=[Depends(get_current_user)])


@router.get("/all", response_model=List[UserResponse])
def search_users(
    q: str = Query("", description="Case-insensitive substring of the name"),
    users: UserStore = Depends(get_user_store)
):
    """List users whose name contains `q`. Empty `q` lists everyone."""
    return users.search_by_name(q)

"""
Connection Routes

POST /connections/request/{user_id} - Send a connection request
"""

from fastapi import APIRouter, Depends

from minilink.api.deps import get_connection_workflow, get_user_store
from minilink.core.auth import get_current_user
from minilink.core.exceptions import UserNotFound
from minilink.schemas.schemas import ConnectionRequestResponse
from minilink.services.connection_service import ConnectionWorkflow
from minilink.services.user_service import UserStore

router = APIRouter(prefix="/connections", tags=["Connections"])


@router.post("/request/{user_id}", response_model=ConnectionRequestResponse)
def request_connection(
    user_id: str,
    user: dict = Depends(get_current_user),
    users: UserStore = Depends(get_user_store),
    connections: ConnectionWorkflow = Depends(get_connection_workflow)
):
    """Send a pending connection request from the current user to `user_id`."""
    receiver = users.get_by_id(user_id)
    if receiver is None:
        raise UserNotFound()

    return connections.request_connection(user["_id"], receiver["_id"])

"""
Dependencies for FastAPI route injection.

The app factory puts the configured services on app.state;
these hand them to the routes.

Usage:
    @router.get("/users")
    def get_users(users: UserStore = Depends(get_user_store)):
        ...
"""

from fastapi import Request

from minilink.core.auth import TokenService
from minilink.services.connection_service import ConnectionWorkflow
from minilink.services.job_service import JobBoard
from minilink.services.user_service import UserStore


def get_user_store(request: Request) -> UserStore:
    return request.app.state.users


def get_token_service(request: Request) -> TokenService:
    return request.app.state.tokens


def get_connection_workflow(request: Request) -> ConnectionWorkflow:
    return request.app.state.connections


def get_job_board(request: Request) -> JobBoard:
    return request.app.state.jobs

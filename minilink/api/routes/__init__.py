"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from minilink.api.routes.auth_routes import router as auth_router
from minilink.api.routes.user_routes import router as user_router
from minilink.api.routes.connection_routes import router as connection_router
from minilink.api.routes.job_routes import router as job_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(auth_router)
api_router.include_router(user_router)
api_router.include_router(connection_router)
api_router.include_router(job_router)

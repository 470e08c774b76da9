"""
MiniLink - Main Application

FastAPI backend with:
- MongoDB for users, connection requests and jobs
- JWT bearer authentication
- bcrypt password hashing

Run: uvicorn minilink.main:create_app --factory --reload
 or: minilink
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pymongo.database import Database

from minilink.api.routes import api_router
from minilink.core.auth import TokenService
from minilink.core.config import Settings, get_settings
from minilink.core.exceptions import register_exception_handlers
from minilink.db.mongodb import (
    COLLECTIONS,
    create_mongo_client,
    get_mongo_db,
    init_mongo_indexes,
    test_mongo_connection
)
from minilink.services.connection_service import ConnectionWorkflow
from minilink.services.job_service import JobBoard
from minilink.services.user_service import UserStore

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """
    Build the application.

    Args:
        settings: configuration; read from the environment when omitted
        database: MongoDB database to use; a client is created from
            settings.mongodb_uri when omitted and closed on shutdown
    """
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    owned_client = None
    if database is None:
        owned_client = create_mongo_client(settings)
        database = get_mongo_db(owned_client, settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Initialize MongoDB indexes on startup."""
        try:
            init_mongo_indexes(database)
        except Exception as e:
            logger.warning("MongoDB index initialization failed: %s", e)
        yield
        if owned_client is not None:
            owned_client.close()

    app = FastAPI(
        title="MiniLink",
        description="""
        A minimal professional network backend.

        ## Features
        - **Authentication**: register/login returning a JWT bearer token
        - **Users**: search by name
        - **Connections**: send connection requests
        - **Jobs**: browse postings and apply
        """,
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )

    app.state.settings = settings
    app.state.db = database
    app.state.tokens = TokenService(settings.jwt_secret_key, settings.jwt_algorithm)
    app.state.users = UserStore(database[COLLECTIONS["users"]])
    app.state.connections = ConnectionWorkflow(
        database[COLLECTIONS["connection_requests"]],
        symmetric=settings.symmetric_connection_check
    )
    app.state.jobs = JobBoard(database[COLLECTIONS["jobs"]], database[COLLECTIONS["users"]])

    # CORS middleware (allow all)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include API routes
    app.include_router(api_router, prefix="/api")

    @app.get("/health", tags=["Health"])
    def health_check():
        """Detailed health check."""
        return {
            "status": "healthy",
            "mongodb": "connected" if test_mongo_connection(database) else "disconnected"
        }

    return app


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)

"""
MongoDB Connection Utility

MongoDB stores:
- users: credentials and profile
- connection_requests: sender/receiver pairs with a status
- jobs: postings and their applicant sets

The client is created by the app factory and handed to the stores;
there is no module-level connection.
"""
import logging

from pymongo import ASCENDING, MongoClient
from pymongo.database import Database

from minilink.core.config import Settings

logger = logging.getLogger(__name__)


# Collection name constants (avoid typos)
COLLECTIONS = {
    "users": "users",
    "connection_requests": "connection_requests",
    "jobs": "jobs"
}


def create_mongo_client(settings: Settings) -> MongoClient:
    """Create a MongoDB client. Connects lazily on first operation."""
    return MongoClient(settings.mongodb_uri)


def get_mongo_db(client: MongoClient, settings: Settings) -> Database:
    """Get the application database from a client."""
    return client[settings.mongodb_db]


def test_mongo_connection(db: Database) -> bool:
    """
    Test if MongoDB is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        # ping command checks connection
        db.client.admin.command('ping')
        return True
    except Exception as e:
        logger.warning("MongoDB connection failed: %s", e)
        return False


def init_mongo_indexes(db: Database) -> None:
    """
    Create the indexes the stores rely on for uniqueness.
    Call this once during app startup.
    """
    # One account per email
    db[COLLECTIONS["users"]].create_index("email", unique=True)

    # At most one request per ordered (sender, receiver) pair
    db[COLLECTIONS["connection_requests"]].create_index([
        ("sender", ASCENDING),
        ("receiver", ASCENDING)
    ], unique=True)

    db[COLLECTIONS["jobs"]].create_index("company")

    logger.info("MongoDB indexes created successfully")

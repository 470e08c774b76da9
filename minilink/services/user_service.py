"""
User Service - the credential store.

Holds identity, password hash and profile for every account.
Email uniqueness is enforced by the unique index on users.email.
"""

import logging
import re
from typing import List, Optional
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError

from minilink.core.exceptions import EmailTaken
from minilink.services.mongo_service import parse_object_id, serialize_doc, serialize_docs

logger = logging.getLogger(__name__)

# Never hand the hash out of the store except for login
PUBLIC_PROJECTION = {"password": 0}


class UserStore:
    """
    Reads and writes user documents.

    Every method returns plain dicts with ids as hex strings.
    """

    def __init__(self, collection: Collection):
        self.collection = collection

    def create(self, name: str, email: str, password_hash: str) -> dict:
        """
        Insert a new user with an empty profile.

        Raises:
            EmailTaken: another user already has this email
        """
        doc = {
            "name": name,
            "email": email,
            "password": password_hash,
            "bio": "",
            "skills": [],
            "connections": []
        }
        try:
            result = self.collection.insert_one(doc)
        except DuplicateKeyError:
            raise EmailTaken()
        doc["_id"] = result.inserted_id
        doc.pop("password")
        logger.info("Registered user %s", doc["_id"])
        return serialize_doc(doc)

    def email_exists(self, email: str) -> bool:
        return self.collection.find_one({"email": email}, {"_id": 1}) is not None

    def find_by_email(self, email: str) -> Optional[dict]:
        """Fetch a user including the password hash. Login only."""
        return serialize_doc(self.collection.find_one({"email": email}))

    def get_by_id(self, user_id: str) -> Optional[dict]:
        """Fetch a user without the hash. None if unknown or malformed id."""
        oid = parse_object_id(user_id)
        if oid is None:
            return None
        return serialize_doc(self.collection.find_one({"_id": oid}, PUBLIC_PROJECTION))

    def search_by_name(self, q: str = "") -> List[dict]:
        """Case-insensitive substring match on name. Empty query matches all."""
        cursor = self.collection.find(
            {"name": {"$regex": re.escape(q or ""), "$options": "i"}},
            PUBLIC_PROJECTION
        )
        return serialize_docs(list(cursor))

"""
Connection Service - connection requests between users.

A request is keyed by the ordered (sender, receiver) pair and starts out
pending. Duplicates are refused by a lookup before the insert; the unique
index on the pair backs that up when two identical requests race.

Only creation exists; there is no accept/reject/cancel transition.
"""

import logging
from enum import Enum
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError

from minilink.core.exceptions import DuplicateRequest
from minilink.services.mongo_service import parse_object_id, serialize_doc

logger = logging.getLogger(__name__)


class ConnectionStatus(str, Enum):
    pending = "pending"
    accepted = "accepted"
    rejected = "rejected"


class ConnectionWorkflow:
    """
    Creates connection requests.

    With symmetric=False a request B->A is allowed while A->B exists.
    With symmetric=True the inverse pair also counts as a duplicate.
    """

    def __init__(self, collection: Collection, symmetric: bool = False):
        self.collection = collection
        self.symmetric = symmetric

    def request_connection(self, sender_id: str, receiver_id: str) -> dict:
        """
        Create a pending request from sender to receiver.

        Raises:
            DuplicateRequest: a request for this pair already exists,
                whatever its status
        """
        sender = parse_object_id(sender_id)
        receiver = parse_object_id(receiver_id)

        if self.collection.find_one({"sender": sender, "receiver": receiver}, {"_id": 1}):
            logger.info("Duplicate connection request %s -> %s", sender_id, receiver_id)
            raise DuplicateRequest()

        if self.symmetric and self.collection.find_one(
            {"sender": receiver, "receiver": sender}, {"_id": 1}
        ):
            logger.info("Inverse connection request exists for %s -> %s", sender_id, receiver_id)
            raise DuplicateRequest()

        doc = {
            "sender": sender,
            "receiver": receiver,
            "status": ConnectionStatus.pending.value
        }
        try:
            result = self.collection.insert_one(doc)
        except DuplicateKeyError:
            logger.info("Duplicate connection request %s -> %s", sender_id, receiver_id)
            raise DuplicateRequest()

        doc["_id"] = result.inserted_id
        logger.info("Connection request %s created: %s -> %s", doc["_id"], sender_id, receiver_id)
        return serialize_doc(doc)

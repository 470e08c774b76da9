"""
Job Service - job postings and applications.

Jobs reference their company (a user) by id; reads populate the
company's name the way the listing endpoints return it.
"""

import logging
from typing import List, Optional
from pymongo.collection import Collection

from minilink.core.exceptions import JobNotFound
from minilink.services.mongo_service import parse_object_id, serialize_docs

logger = logging.getLogger(__name__)


class JobBoard:
    """
    Handles job posting storage and applicant sets.
    """

    def __init__(self, jobs: Collection, users: Collection):
        self.collection = jobs
        self.users = users

    def create(
        self,
        company_id: str,
        title: str,
        description: str = "",
        location: str = "",
        skills_required: Optional[List[str]] = None
    ) -> dict:
        """Insert a job posting for a company. Returns it with company populated."""
        doc = {
            "company": parse_object_id(company_id),
            "title": title,
            "description": description,
            "location": location,
            "skills_required": list(skills_required or []),
            "applicants": []
        }
        result = self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        logger.info("Job %s created for company %s", doc["_id"], company_id)
        return self._populate([doc])[0]

    def list_all(self) -> List[dict]:
        """All jobs, company name populated."""
        return self._populate(list(self.collection.find()))

    def get(self, job_id: str) -> dict:
        """
        Fetch one job with company populated.

        Raises:
            JobNotFound: unknown or malformed id
        """
        oid = parse_object_id(job_id)
        doc = self.collection.find_one({"_id": oid}) if oid else None
        if doc is None:
            raise JobNotFound()
        return self._populate([doc])[0]

    def apply(self, job_id: str, user_id: str) -> None:
        """
        Add the user to the job's applicants. Applying twice is a no-op.

        Raises:
            JobNotFound: unknown or malformed id
        """
        oid = parse_object_id(job_id)
        if oid is None:
            raise JobNotFound()
        result = self.collection.update_one(
            {"_id": oid},
            {"$addToSet": {"applicants": parse_object_id(user_id)}}
        )
        if result.matched_count == 0:
            raise JobNotFound()
        logger.info("User %s applied to job %s", user_id, job_id)

    def _populate(self, docs: List[dict]) -> List[dict]:
        """Replace each company id with {_id, name}. Unknown companies become None."""
        company_ids = {doc["company"] for doc in docs if doc.get("company")}
        companies = {
            c["_id"]: c
            for c in self.users.find({"_id": {"$in": list(company_ids)}}, {"name": 1})
        }
        for doc in docs:
            doc["company"] = companies.get(doc.get("company"))
        return serialize_docs(docs)

#!/usr/bin/env python3
"""
Seed a job posting for an existing company account.

There is no HTTP endpoint for creating jobs; use this instead.
Usage: python scripts/create_job.py company@example.org "Backend Engineer" --location Remote --skill python
"""
import argparse
import sys
sys.path.insert(0, '.')

from minilink.core.config import get_settings
from minilink.db.mongodb import COLLECTIONS, create_mongo_client, get_mongo_db
from minilink.services.job_service import JobBoard
from minilink.services.user_service import UserStore


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create a MiniLink job posting")
    parser.add_argument("company_email", help="Email of the user posting the job")
    parser.add_argument("title", help="Job title")
    parser.add_argument("--description", default="", help="Job description")
    parser.add_argument("--location", default="", help="Job location")
    parser.add_argument(
        "--skill",
        dest="skills",
        action="append",
        default=[],
        help="Required skill (repeatable)",
    )
    return parser.parse_args()


def main():
    args = parse_args()
    settings = get_settings()
    client = create_mongo_client(settings)
    db = get_mongo_db(client, settings)

    try:
        company = UserStore(db[COLLECTIONS["users"]]).find_by_email(args.company_email)
        if company is None:
            raise SystemExit(f"No user registered with email {args.company_email}")

        jobs = JobBoard(db[COLLECTIONS["jobs"]], db[COLLECTIONS["users"]])
        job = jobs.create(
            company["_id"],
            args.title,
            description=args.description,
            location=args.location,
            skills_required=args.skills,
        )
    finally:
        client.close()

    print(f"Created job {job['_id']} ({job['title']}) for {company['name']}")


if __name__ == "__main__":
    main()

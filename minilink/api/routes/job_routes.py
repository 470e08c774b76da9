"""
Job Routes

GET /jobs/all - List all jobs with company name
GET /jobs/{job_id} - Get job details
POST /jobs/apply/{job_id} - Apply to job
"""

from fastapi import APIRouter, Depends
from typing import List

from minilink.api.deps import get_job_board
from minilink.core.auth import get_current_user
from minilink.schemas.schemas import JobResponse, MessageResponse
from minilink.services.job_service import JobBoard

router = APIRouter(prefix="/jobs", tags=["Jobs"])


@router.get("/all", response_model=List[JobResponse], dependencies=[Depends(get_current_user)])
def list_jobs(jobs: JobBoard = Depends(get_job_board)):
    """List all job postings."""
    return jobs.list_all()


@router.get("/{job_id}", response_model=JobResponse, dependencies=[Depends(get_current_user)])
def get_job(job_id: str, jobs: JobBoard = Depends(get_job_board)):
    """Get details of a specific job."""
    return jobs.get(job_id)


@router.post("/apply/{job_id}", response_model=MessageResponse)
def apply_to_job(
    job_id: str,
    user: dict = Depends(get_current_user),
    jobs: JobBoard = Depends(get_job_board)
):
    """Apply to a job. Applying again changes nothing."""
    jobs.apply(job_id, user["_id"])
    return MessageResponse(message="Applied")

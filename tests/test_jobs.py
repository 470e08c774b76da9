import pytest
from bson import ObjectId

from minilink.core.exceptions import JobNotFound
from conftest import bearer, register


@pytest.fixture
def company(client):
    return register(client, "Acme", "hr@acme.com", "pw-acme")


@pytest.fixture
def candidate(client):
    return register(client, "Alice", "alice@x.com", "pw1")


@pytest.fixture
def job(app, company):
    return app.state.jobs.create(
        company["user"]["_id"],
        "Backend Engineer",
        description="Build APIs",
        location="Remote",
        skills_required=["python", "mongodb"],
    )


def test_list_jobs_populates_company_name(client, candidate, company, job):
    response = client.get("/api/jobs/all", headers=bearer(candidate["token"]))

    assert response.status_code == 200
    jobs = response.json()
    assert len(jobs) == 1
    assert jobs[0]["title"] == "Backend Engineer"
    assert jobs[0]["company"] == {"_id": company["user"]["_id"], "name": "Acme"}
    assert jobs[0]["skills_required"] == ["python", "mongodb"]


def test_get_job(client, candidate, job):
    response = client.get(f"/api/jobs/{job['_id']}", headers=bearer(candidate["token"]))

    assert response.status_code == 200
    assert response.json()["_id"] == job["_id"]
    assert response.json()["company"]["name"] == "Acme"


@pytest.mark.parametrize("job_id", [str(ObjectId()), "bogus"])
def test_get_unknown_job(client, candidate, job_id):
    response = client.get(f"/api/jobs/{job_id}", headers=bearer(candidate["token"]))

    assert response.status_code == 404
    assert response.json() == {"message": "Job not found"}


def test_apply_adds_applicant_once(client, app, candidate, job):
    headers = bearer(candidate["token"])

    for _ in range(2):
        response = client.post(f"/api/jobs/apply/{job['_id']}", headers=headers)
        assert response.status_code == 200
        assert response.json() == {"message": "Applied"}

    assert app.state.jobs.get(job["_id"])["applicants"] == [candidate["user"]["_id"]]


def test_apply_to_unknown_job(client, candidate):
    response = client.post(f"/api/jobs/apply/{ObjectId()}", headers=bearer(candidate["token"]))

    assert response.status_code == 404
    assert response.json() == {"message": "Job not found"}


def test_job_with_deleted_company_has_no_company(app, database, job, company):
    database["users"].delete_one({"_id": ObjectId(company["user"]["_id"])})

    assert app.state.jobs.get(job["_id"])["company"] is None


def test_get_malformed_id_raises(app):
    with pytest.raises(JobNotFound):
        app.state.jobs.get("bogus")

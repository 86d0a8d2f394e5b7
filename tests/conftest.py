"""
Pytest configuration and shared fixtures.
"""

import pytest
import json
from pathlib import Path
from typing import Dict, Any

from jobmatch.logger import reset_logger
from jobmatch.models import CandidateProfile, JobPosting


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run each test from a temp dir with file logging off and a fresh logger."""
    monkeypatch.chdir(tmp_path)
    for var in ("JOBMATCH_LOG_LEVEL", "JOBMATCH_LOG_DIR", "JOBMATCH_PRECISION"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("JOBMATCH_LOG_FILE", "false")
    reset_logger()
    yield
    reset_logger()


@pytest.fixture
def job_data() -> Dict[str, Any]:
    """Job posting as the web app sends it."""
    return {
        "title": "Backend Engineer",
        "company": "Acme",
        "skills": ["Python", "Go", "PostgreSQL", "Docker"],
        "location": "San Francisco, CA",
        "jobType": "full-time",
        "experienceLevel": "Mid",
        "salary": {"min": 50000, "max": 80000},
    }


@pytest.fixture
def profile_data() -> Dict[str, Any]:
    """Candidate profile with four prior roles (mid level)."""
    return {
        "name": "Sam Rivera",
        "skills": ["python", "GO", "postgresql", "docker", "terraform"],
        "preferredLocations": ["san francisco"],
        "preferredJobTypes": ["full-time", "contract"],
        "experience": [
            {"company": "A", "title": "Intern"},
            {"company": "B", "title": "Engineer"},
            {"company": "C", "title": "Engineer"},
            {"company": "D", "title": "Senior Engineer"},
        ],
        "expectedSalary": {"min": "60000", "max": "90000"},
    }


@pytest.fixture
def job(job_data) -> JobPosting:
    return JobPosting.model_validate(job_data)


@pytest.fixture
def profile(profile_data) -> CandidateProfile:
    return CandidateProfile.model_validate(profile_data)


@pytest.fixture
def job_file(tmp_path, job_data) -> Path:
    path = tmp_path / "job.json"
    path.write_text(json.dumps(job_data))
    return path


@pytest.fixture
def profile_file(tmp_path, profile_data) -> Path:
    path = tmp_path / "profile.json"
    path.write_text(json.dumps(profile_data))
    return path

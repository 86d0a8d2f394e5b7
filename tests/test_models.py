"""
Tests for matching records.
"""

import json

import pytest
from pydantic import ValidationError

from jobmatch.models import CandidateProfile, JobPosting, SalaryRange


class TestSalaryRange:
    """Salary range construction."""

    def test_int_amounts(self):
        r = SalaryRange(min=50000, max=80000)
        assert (r.min, r.max, r.span) == (50000, 80000, 30000)

    def test_string_amounts_parsed(self):
        r = SalaryRange.model_validate({"min": "50000", "max": " 80000 "})
        assert r.min == 50000
        assert r.max == 80000

    def test_float_amounts_truncated(self):
        r = SalaryRange(min=50000.9, max=80000.2)
        assert (r.min, r.max) == (50000, 80000)

    @pytest.mark.parametrize("bad", ["", "60k", "n/a", None])
    def test_invalid_amounts_rejected(self, bad):
        with pytest.raises(ValidationError):
            SalaryRange.model_validate({"min": bad, "max": 100})

    @pytest.mark.parametrize("bad", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_amounts_rejected(self, bad):
        """Infinite or NaN amounts are invalid, not an arithmetic crash."""
        with pytest.raises(ValidationError):
            SalaryRange.model_validate({"min": bad, "max": 100})

    def test_overflowing_json_number_rejected(self):
        """1e400 parses to inf in JSON."""
        with pytest.raises(ValidationError):
            SalaryRange.model_validate(json.loads('{"min": 1e400, "max": 10}'))

    @pytest.mark.parametrize("bad", [True, False])
    def test_boolean_amounts_rejected(self, bad):
        with pytest.raises(ValidationError):
            SalaryRange.model_validate({"min": bad, "max": 10})

    def test_missing_bound_rejected(self):
        with pytest.raises(ValidationError):
            SalaryRange.model_validate({"min": 100})

    def test_frozen(self):
        r = SalaryRange(min=1, max=2)
        with pytest.raises(ValidationError):
            r.min = 5


class TestJobPosting:
    """Job posting aliases and optional fields."""

    def test_camel_case_aliases(self, job_data):
        job = JobPosting.model_validate(job_data)
        assert job.job_type == "full-time"
        assert job.experience_level == "Mid"
        assert job.salary == SalaryRange(min=50000, max=80000)

    def test_snake_case_names(self):
        job = JobPosting(job_type="contract", experience_level="senior")
        assert job.job_type == "contract"

    def test_all_fields_optional(self):
        job = JobPosting()
        assert job.skills is None
        assert job.salary is None

    def test_skills_must_be_strings(self):
        with pytest.raises(ValidationError):
            JobPosting.model_validate({"skills": [1, 2]})


class TestCandidateProfile:
    """Candidate profile aliases and experience records."""

    def test_camel_case_aliases(self, profile_data):
        profile = CandidateProfile.model_validate(profile_data)
        assert profile.preferred_locations == ["san francisco"]
        assert profile.preferred_job_types == ["full-time", "contract"]
        assert profile.expected_salary == SalaryRange(min=60000, max=90000)
        assert len(profile.experience) == 4

    def test_experience_keeps_unknown_keys(self):
        profile = CandidateProfile.model_validate(
            {"experience": [{"title": "Engineer", "startDate": "2020-01", "team": "infra"}]}
        )
        entry = profile.experience[0]
        assert entry.start_date == "2020-01"
        assert entry.model_extra == {"team": "infra"}

    def test_empty_experience_is_not_none(self):
        assert CandidateProfile(experience=[]).experience == []

"""
Typed records consumed by the matcher.

Every field is optional: an absent value is None, never an empty
placeholder, so the scorer can tell "not provided" apart from "provided
but empty". Wire names from the web app (camelCase) are accepted as
aliases alongside the attribute names.
"""

import math
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SalaryRange(BaseModel):
    """Salary range in a single currency."""

    model_config = ConfigDict(frozen=True)

    min: int
    max: int

    @field_validator("min", "max", mode="before")
    @classmethod
    def _parse_amount(cls, v: Any) -> Any:
        # "50000" -> 50000, 50000.9 -> 50000; anything else is left to pydantic
        if isinstance(v, bool):
            raise ValueError("amount must be a number, not a boolean")
        if isinstance(v, str):
            return int(v.strip())
        if isinstance(v, float):
            if not math.isfinite(v):
                raise ValueError("amount must be finite")
            return int(v)
        return v

    @property
    def span(self) -> int:
        return self.max - self.min


class Experience(BaseModel):
    """A single prior role. Only the number of roles is used for scoring."""

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    company: Optional[str] = None
    title: Optional[str] = None
    start_date: Optional[str] = Field(None, alias="startDate")
    end_date: Optional[str] = Field(None, alias="endDate")
    description: Optional[str] = None


class JobPosting(BaseModel):
    """Job posting fields relevant to matching."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: Optional[str] = None
    company: Optional[str] = None
    skills: Optional[List[str]] = None
    location: Optional[str] = None
    job_type: Optional[str] = Field(None, alias="jobType")
    experience_level: Optional[str] = Field(None, alias="experienceLevel")
    salary: Optional[SalaryRange] = None


class CandidateProfile(BaseModel):
    """Candidate profile fields relevant to matching."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: Optional[str] = None
    skills: Optional[List[str]] = None
    preferred_locations: Optional[List[str]] = Field(None, alias="preferredLocations")
    preferred_job_types: Optional[List[str]] = Field(None, alias="preferredJobTypes")
    experience: Optional[List[Experience]] = None
    expected_salary: Optional[SalaryRange] = Field(None, alias="expectedSalary")

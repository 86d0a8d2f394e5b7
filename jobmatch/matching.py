"""
Job / candidate matching.

Responsibilities:
- Compute a deterministic compatibility score between a job posting and a
  candidate profile, with a per-component breakdown.
- Score salary range overlap and skills relevance on their own.
- Classify years of experience into a level label.

Non-Responsibilities:
- No I/O, no logging, no persistence.
- No ranking or filtering of result sets.

Invariant:
Missing data never raises; it contributes zero to the score.
Every score returned is within [0, 1].
"""

from dataclasses import asdict, dataclass
from typing import Any, Mapping, Optional, Sequence, Union

from .models import CandidateProfile, JobPosting, SalaryRange

WEIGHTS = {
    "skills": 0.5,
    "location": 0.2,
    "job_type": 0.15,
    "experience_level": 0.15,
}

EXPERIENCE_LEVELS = ("entry", "junior", "mid", "senior", "lead")

# (exclusive upper bound in years, label), ascending
_LEVEL_THRESHOLDS = ((1, "entry"), (3, "junior"), (5, "mid"), (8, "senior"))

SalaryInput = Union[SalaryRange, Mapping[str, Any]]


@dataclass(frozen=True)
class MatchBreakdown:
    """Weighted contribution of each component plus raw and clamped totals."""

    skills: float
    location: float
    job_type: float
    experience_level: float
    raw: float
    total: float

    def as_dict(self) -> dict:
        return asdict(self)


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return min(max(value, low), high)


def _matched_count(job_skills: Sequence[str], profile_skills: Sequence[str]) -> int:
    wanted = {s.lower() for s in profile_skills}
    return sum(1 for s in job_skills if s.lower() in wanted)


def _skills_component(job: JobPosting, profile: CandidateProfile) -> float:
    if job.skills is None or profile.skills is None:
        return 0.0
    if len(job.skills) == 0:
        return 0.0
    ratio = _matched_count(job.skills, profile.skills) / len(job.skills)
    return ratio * WEIGHTS["skills"]


def _location_component(job: JobPosting, profile: CandidateProfile) -> float:
    if not job.location or profile.preferred_locations is None:
        return 0.0
    location = job.location.lower()
    if any(pref.lower() in location for pref in profile.preferred_locations):
        return WEIGHTS["location"]
    return 0.0


def _job_type_component(job: JobPosting, profile: CandidateProfile) -> float:
    if not job.job_type or profile.preferred_job_types is None:
        return 0.0
    # exact, case-sensitive
    if job.job_type in profile.preferred_job_types:
        return WEIGHTS["job_type"]
    return 0.0


def level_index(label: str) -> int:
    """Ordinal of an experience label, or -1 when unrecognized."""
    try:
        return EXPERIENCE_LEVELS.index(label.lower())
    except ValueError:
        return -1


def _experience_component(job: JobPosting, profile: CandidateProfile) -> float:
    if not job.experience_level or profile.experience is None:
        return 0.0
    job_level = level_index(job.experience_level)
    profile_level = min(len(profile.experience) // 2, len(EXPERIENCE_LEVELS) - 1)
    # An unrecognized label (-1) can go negative here; the total is clamped.
    distance = abs(job_level - profile_level) / (len(EXPERIENCE_LEVELS) - 1)
    return (1 - distance) * WEIGHTS["experience_level"]


def score_breakdown(job: JobPosting, profile: CandidateProfile) -> MatchBreakdown:
    """
    Score a job against a candidate, component by component.

    Args:
        job: Job posting record
        profile: Candidate profile record

    Returns:
        MatchBreakdown whose ``total`` is the clamped match score
    """
    skills = _skills_component(job, profile)
    location = _location_component(job, profile)
    job_type = _job_type_component(job, profile)
    experience = _experience_component(job, profile)
    raw = skills + location + job_type + experience
    return MatchBreakdown(
        skills=skills,
        location=location,
        job_type=job_type,
        experience_level=experience,
        raw=raw,
        total=_clamp(raw),
    )


def calculate_match_score(job: JobPosting, profile: CandidateProfile) -> float:
    """
    Weighted compatibility score between a job and a candidate.

    Skills count for 50%, location 20%, job type 15% and experience
    level 15%. Components whose inputs are absent contribute nothing.

    Returns:
        Score between 0 and 1
    """
    return score_breakdown(job, profile).total


def get_experience_level(years: float) -> str:
    """Map years of experience to a level label (lower bounds inclusive)."""
    for upper, label in _LEVEL_THRESHOLDS:
        if years < upper:
            return label
    return "lead"


def _as_salary(value: Optional[SalaryInput]) -> Optional[SalaryRange]:
    if value is None or isinstance(value, SalaryRange):
        return value
    return SalaryRange.model_validate(value)


def calculate_salary_match(
    job_salary: Optional[SalaryInput],
    profile_salary: Optional[SalaryInput],
) -> float:
    """
    Overlap of two salary ranges relative to the narrower one.

    Mappings are parsed through SalaryRange, so string amounts such as
    "50000" are accepted; non-numeric amounts raise ValidationError.

    Returns:
        Score between 0 and 1; 0 when either range is missing or the
        ranges are disjoint
    """
    job_range = _as_salary(job_salary)
    profile_range = _as_salary(profile_salary)
    if job_range is None or profile_range is None:
        return 0.0

    overlap = min(job_range.max, profile_range.max) - max(job_range.min, profile_range.min)
    if overlap < 0:
        return 0.0

    narrower = min(job_range.span, profile_range.span)
    if narrower == 0:
        # A zero-width range that intersects the other lies inside it.
        return 1.0
    return min(overlap / narrower, 1.0)


def calculate_skills_relevance(
    job_skills: Optional[Sequence[str]],
    profile_skills: Optional[Sequence[str]],
) -> float:
    """Share of required job skills the candidate has (case-insensitive)."""
    if job_skills is None or profile_skills is None:
        return 0.0
    if len(job_skills) == 0 or len(profile_skills) == 0:
        return 0.0
    return _matched_count(job_skills, profile_skills) / len(job_skills)

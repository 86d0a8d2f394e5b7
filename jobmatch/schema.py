from typing import Any, Dict, List, Type, TypeVar

from pydantic import BaseModel, ValidationError

from .models import CandidateProfile, JobPosting

M = TypeVar("M", bound=BaseModel)


class RecordValidationError(ValueError):
    """Raised when a raw record cannot be turned into a model."""

    def __init__(self, kind: str, errors: List[str]):
        self.kind = kind
        self.errors = errors
        super().__init__(f"Invalid {kind}: " + "; ".join(errors))


def _format_errors(exc: ValidationError) -> List[str]:
    messages: List[str] = []
    for err in exc.errors():
        path = ".".join(str(p) for p in err["loc"]) or "record"
        messages.append(f"{path}: {err['msg']}")
    return messages


def _validate(model: Type[M], data: Any, kind: str) -> List[str]:
    if not isinstance(data, dict):
        return [f"{kind.capitalize()} must be a JSON object"]
    try:
        model.model_validate(data)
    except ValidationError as e:
        return _format_errors(e)
    return []


def validate_job(data: Dict[str, Any]) -> List[str]:
    """
    Returns a list of validation error messages. Empty list means valid.
    """
    return _validate(JobPosting, data, "job")


def validate_profile(data: Dict[str, Any]) -> List[str]:
    """
    Returns a list of validation error messages. Empty list means valid.
    """
    return _validate(CandidateProfile, data, "profile")


def parse_job(data: Dict[str, Any]) -> JobPosting:
    errors = validate_job(data)
    if errors:
        raise RecordValidationError("job", errors)
    return JobPosting.model_validate(data)


def parse_profile(data: Dict[str, Any]) -> CandidateProfile:
    errors = validate_profile(data)
    if errors:
        raise RecordValidationError("profile", errors)
    return CandidateProfile.model_validate(data)

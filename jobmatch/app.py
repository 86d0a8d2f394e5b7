import argparse
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from . import __version__
from .env import Settings, get_settings, load_env
from .logger import StructuredLogger, get_logger
from .matching import (
    calculate_salary_match,
    calculate_skills_relevance,
    get_experience_level,
    score_breakdown,
)
from .models import JobPosting
from .schema import RecordValidationError, parse_job, parse_profile, validate_job, validate_profile
from .storage import load_jobs, load_profile


def _split_csv(value: Optional[str]) -> List[str]:
    return [s.strip() for s in value.split(",") if s.strip()] if value else []


def _job_label(job: JobPosting, index: int) -> str:
    title = job.title or f"job #{index}"
    return f"{title} @ {job.company}" if job.company else title


def cmd_score(args: argparse.Namespace, settings: Settings, logger: StructuredLogger) -> None:
    try:
        raw_jobs = load_jobs(Path(args.job))
        raw_profile = load_profile(Path(args.profile))
    except (FileNotFoundError, ValueError) as e:
        logger.record_error(type(e).__name__)
        logger.error("Could not load input", error=str(e))
        raise SystemExit(str(e))

    try:
        profile = parse_profile(raw_profile)
    except RecordValidationError as e:
        logger.record_validation_failure("profile")
        print("Invalid profile:")
        for err in e.errors:
            print(f" - {err}")
        raise SystemExit(2)

    digits = settings.precision
    for i, raw in enumerate(raw_jobs, start=1):
        try:
            job = parse_job(raw)
        except RecordValidationError as e:
            logger.record_validation_failure("job")
            logger.warning("Skipping invalid job", index=i, errors=e.errors)
            print(f"[validation_error] job #{i} - {e.errors}")
            continue

        breakdown = score_breakdown(job, profile)
        logger.record_score(breakdown.total)
        logger.debug("Scored job", index=i, **breakdown.as_dict())
        print(f"{_job_label(job, i)}: {breakdown.total:.{digits}f}")

        if args.explain:
            print(f"  skills: {breakdown.skills:.{digits}f}")
            print(f"  location: {breakdown.location:.{digits}f}")
            print(f"  job_type: {breakdown.job_type:.{digits}f}")
            print(f"  experience_level: {breakdown.experience_level:.{digits}f}")
            if breakdown.raw != breakdown.total:
                print(f"  raw (unclamped): {breakdown.raw:.{digits}f}")
            if job.salary is not None and profile.expected_salary is not None:
                salary = calculate_salary_match(job.salary, profile.expected_salary)
                print(f"  salary: {salary:.{digits}f}")

    logger.log_metrics_summary()


def cmd_salary(args: argparse.Namespace, settings: Settings, logger: StructuredLogger) -> None:
    try:
        score = calculate_salary_match(
            {"min": args.job_min, "max": args.job_max},
            {"min": args.profile_min, "max": args.profile_max},
        )
    except ValidationError as e:
        logger.record_error(type(e).__name__)
        raise SystemExit(f"Salary amounts must be whole numbers: {e.error_count()} invalid value(s)")
    print(f"{score:.{settings.precision}f}")


def cmd_skills(args: argparse.Namespace, settings: Settings, logger: StructuredLogger) -> None:
    score = calculate_skills_relevance(_split_csv(args.job), _split_csv(args.profile))
    print(f"{score:.{settings.precision}f}")


def cmd_level(args: argparse.Namespace, settings: Settings, logger: StructuredLogger) -> None:
    print(get_experience_level(args.years))


def cmd_validate(args: argparse.Namespace, settings: Settings, logger: StructuredLogger) -> None:
    if args.job:
        kind, path, validator = "job", Path(args.job), validate_job
    else:
        kind, path, validator = "profile", Path(args.profile), validate_profile
    try:
        records = load_jobs(path) if kind == "job" else [load_profile(path)]
    except (FileNotFoundError, ValueError) as e:
        logger.error("Could not load input", error=str(e))
        raise SystemExit(str(e))

    errors: List[str] = []
    for i, record in enumerate(records, start=1):
        prefix = f"{kind} #{i}: " if len(records) > 1 else ""
        errors.extend(prefix + err for err in validator(record))
    if errors:
        logger.record_validation_failure(kind)
        print("Invalid:")
        for e in errors:
            print(f" - {e}")
        raise SystemExit(2)
    print("Valid")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="jobmatch", description="Job / candidate match scoring")
    parser.add_argument("--version", action="store_true", help="Show version")

    subparsers = parser.add_subparsers(dest="command")
    scr = subparsers.add_parser("score", help="Score job(s) from a JSON file against a candidate profile")
    scr.add_argument("--job", required=True, help="Path to job JSON (object, list, or {\"jobs\": [...]})")
    scr.add_argument("--profile", required=True, help="Path to candidate profile JSON")
    scr.add_argument("--explain", action="store_true", help="Print per-component breakdown and salary match")
    scr.set_defaults(func=cmd_score)

    sal = subparsers.add_parser("salary", help="Score overlap of two salary ranges")
    sal.add_argument("--job-min", required=True, help="Job salary minimum")
    sal.add_argument("--job-max", required=True, help="Job salary maximum")
    sal.add_argument("--profile-min", required=True, help="Expected salary minimum")
    sal.add_argument("--profile-max", required=True, help="Expected salary maximum")
    sal.set_defaults(func=cmd_salary)

    skl = subparsers.add_parser("skills", help="Share of required skills a candidate has")
    skl.add_argument("--job", required=True, help="Comma-separated required skills")
    skl.add_argument("--profile", required=True, help="Comma-separated candidate skills")
    skl.set_defaults(func=cmd_skills)

    lvl = subparsers.add_parser("level", help="Experience level label for a number of years")
    lvl.add_argument("--years", required=True, type=float, help="Years of experience")
    lvl.set_defaults(func=cmd_level)

    val = subparsers.add_parser("validate", help="Validate a job or profile JSON file")
    target = val.add_mutually_exclusive_group(required=True)
    target.add_argument("--job", help="Path to job JSON input")
    target.add_argument("--profile", help="Path to profile JSON input")
    val.set_defaults(func=cmd_validate)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    # Load .env if present (JOBMATCH_LOG_LEVEL, JOBMATCH_LOG_DIR, etc.)
    load_env()
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(__version__)
        return

    if not hasattr(args, "func"):
        parser.print_help()
        return

    settings = get_settings()
    logger = get_logger(
        level=settings.log_level,
        log_dir=settings.log_dir,
        enable_file=settings.log_to_file,
    )
    args.func(args, settings, logger)


if __name__ == "__main__":
    main()

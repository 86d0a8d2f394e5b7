import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

FALSY = {"0", "false", "no", "off"}
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    log_dir: Path = Path("logs")
    log_to_file: bool = True
    precision: int = 3


def load_env(env_path: Optional[Path] = None) -> None:
    """Load .env from project root if present. Existing variables win."""
    env_path = env_path or Path.cwd() / ".env"
    if not env_path.exists():
        return
    load_dotenv(dotenv_path=env_path, override=False)


def get_settings() -> Settings:
    """Build settings from JOBMATCH_* environment variables."""
    defaults = Settings()
    try:
        precision = int(os.getenv("JOBMATCH_PRECISION", defaults.precision))
    except ValueError:
        precision = defaults.precision
    log_level = os.getenv("JOBMATCH_LOG_LEVEL", defaults.log_level).strip().upper()
    if log_level not in LOG_LEVELS:
        log_level = defaults.log_level
    return Settings(
        log_level=log_level,
        log_dir=Path(os.getenv("JOBMATCH_LOG_DIR", str(defaults.log_dir))),
        log_to_file=os.getenv("JOBMATCH_LOG_FILE", "true").strip().lower() not in FALSY,
        precision=precision,
    )

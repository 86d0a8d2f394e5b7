import json
from pathlib import Path
from typing import Any, Dict, List


def load_json(path: Path) -> Any:
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        content = f.read().strip()
    if not content:
        raise ValueError(f"Input file is empty: {path}")
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e


def load_jobs(path: Path) -> List[Dict[str, Any]]:
    """
    Load job records. Accepts a single job object, a list of jobs,
    or an object with a "jobs" list.
    """
    data = load_json(path)
    if isinstance(data, dict) and isinstance(data.get("jobs"), list):
        return data["jobs"]
    if isinstance(data, list):
        return data
    return [data]


def load_profile(path: Path) -> Dict[str, Any]:
    data = load_json(path)
    if isinstance(data, dict) and isinstance(data.get("profile"), dict):
        return data["profile"]
    return data

import json
import os

from models import JobRecord


def write_feed(jobs: list[JobRecord], path: str) -> str:
    """Overwrite the feed file with a JSON array of records. Returns the path.

    Errors creating the directory or writing the file are not caught.
    """
    out_dir = os.path.dirname(path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        json.dump([job.to_dict() for job in jobs], f, indent=2, ensure_ascii=False)

    return path


def read_feed(path: str) -> list[JobRecord]:
    """Load a feed file, either a bare array or an object with a "jobs" array."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("jobs", [])
    return [JobRecord.from_dict(row) for row in data]

"""Load the company list from companies.json. Read once per run."""

import json
import os
import shutil
import threading

import config
from models import CompanyEntry

_dir = os.path.dirname(__file__)
_EXAMPLE_PATH = os.path.join(_dir, "companies.example.json")

_companies = None
_lock = threading.Lock()


def load_companies(path: str) -> list[CompanyEntry]:
    """Parse a companies file: a JSON array, or an object with a "companies" array."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("companies", [])
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of companies")
    return [CompanyEntry.from_dict(item) for item in data]


def get_companies(path: str | None = None) -> list[CompanyEntry]:
    """Get the cached company list, loading from disk on first access.

    Only the default companies.json is seeded from companies.example.json
    when missing; an explicit path must exist.
    """
    global _companies
    with _lock:
        if _companies is None:
            if path is None:
                path = config.COMPANIES_PATH
                if not os.path.exists(path) and os.path.exists(_EXAMPLE_PATH):
                    shutil.copy2(_EXAMPLE_PATH, path)
            _companies = load_companies(path)
        return _companies


def reload_companies():
    """Clear the cache so the next get_companies() re-reads from disk."""
    global _companies
    with _lock:
        _companies = None

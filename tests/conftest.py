"""Shared test fixtures for the jobfeed test suite."""

import json
import os

import pytest

from models import CompanyEntry, JobRecord

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures")


@pytest.fixture(autouse=True)
def sample_companies(monkeypatch):
    """Autouse fixture that injects the sample company list for every test.

    Sets companies._companies so get_companies() never touches the real
    companies.json.
    """
    import companies

    entries = companies.load_companies(os.path.join(FIXTURES_DIR, "sample_companies.json"))
    monkeypatch.setattr(companies, "_companies", entries)
    yield entries


@pytest.fixture
def make_record():
    """Factory fixture for creating JobRecord instances with defaults."""

    def _make(**overrides):
        defaults = {
            "source": "greenhouse",
            "company": "TestCorp",
            "req_id": "1",
            "title": "Customer Success Manager",
            "apply_url": "https://example.com/job/1",
            "location": "Remote - US",
            "remote": True,
        }
        defaults.update(overrides)
        return JobRecord(**defaults)

    return _make


@pytest.fixture
def make_entry():
    """Factory fixture for CompanyEntry from a plain config dict."""

    def _make(**data):
        return CompanyEntry.from_dict(data)

    return _make


@pytest.fixture
def fixture_path():
    """Return the path to the fixtures directory."""
    return FIXTURES_DIR


def load_fixture(filename):
    """Load a fixture file by name."""
    path = os.path.join(FIXTURES_DIR, filename)
    with open(path) as f:
        if filename.endswith(".json"):
            return json.load(f)
        return f.read()

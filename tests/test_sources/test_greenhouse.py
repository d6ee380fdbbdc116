"""Tests for sources/greenhouse.py — token-board connector."""

import logging
from unittest.mock import MagicMock

import requests
import responses

import config
from sources.greenhouse import GreenhouseSource
from tests.conftest import load_fixture

API_BASE = "https://boards-api.greenhouse.io/v1/boards"


def _fetch(make_entry, token="sentinellabs", company="SentinelOne"):
    entry = make_entry(company=company, type="greenhouse", token=token)
    return GreenhouseSource().fetch(entry)


@responses.activate
def test_fetch_maps_all_jobs(make_entry):
    """Every job in the board becomes a record, in board order."""
    fixture = load_fixture("greenhouse_response.json")
    responses.add(responses.GET, f"{API_BASE}/sentinellabs/jobs", json=fixture, status=200)

    jobs = _fetch(make_entry)

    assert len(responses.calls) == 1
    assert [j.req_id for j in jobs] == ["4012345", "4012399", "4012400"]
    assert all(j.company == "SentinelOne" for j in jobs)
    assert all(j.source == "greenhouse" for j in jobs)


@responses.activate
def test_field_mapping(make_entry):
    """Department, employment type, tags and url come from the board payload."""
    fixture = load_fixture("greenhouse_response.json")
    responses.add(responses.GET, f"{API_BASE}/sentinellabs/jobs", json=fixture, status=200)

    job = _fetch(make_entry)[0]

    assert job.title == "Application Support Manager"
    assert job.department == "Customer Experience"
    assert job.location == "Remote - US"
    assert job.remote is True
    assert job.employment_type == "Full-time"
    assert job.apply_url == "https://boards.greenhouse.io/sentinellabs/jobs/4012345"
    assert job.tags == ["Customer Experience", "Support"]
    assert job.description_html is None


@responses.activate
def test_posted_at_prefers_updated(make_entry):
    """updated_at wins over created_at; created_at is the fallback; no reformatting."""
    fixture = load_fixture("greenhouse_response.json")
    responses.add(responses.GET, f"{API_BASE}/sentinellabs/jobs", json=fixture, status=200)

    jobs = _fetch(make_entry)

    assert jobs[0].posted_at == "2026-02-17T14:03:22-05:00"
    assert jobs[1].posted_at == "2026-02-12T11:30:00-05:00"
    assert jobs[2].posted_at is None


@responses.activate
def test_missing_optional_fields(make_entry):
    """No location, departments or metadata → nulls and empty tags."""
    fixture = load_fixture("greenhouse_response.json")
    responses.add(responses.GET, f"{API_BASE}/sentinellabs/jobs", json=fixture, status=200)

    jobs = _fetch(make_entry)
    engineer, csm = jobs[1], jobs[2]

    assert engineer.department is None
    assert engineer.employment_type is None
    assert engineer.tags == []
    assert engineer.remote is False
    assert csm.location is None
    assert csm.remote is False


@responses.activate
def test_remote_detection_case_insensitive(make_entry):
    """remote is true iff the location text contains 'remote' in any case."""
    data = {"jobs": [
        {"id": 1, "title": "A", "absolute_url": "u1", "location": {"name": "REMOTE"}},
        {"id": 2, "title": "B", "absolute_url": "u2", "location": {"name": "Hybrid / remote-friendly"}},
        {"id": 3, "title": "C", "absolute_url": "u3", "location": {"name": "New York, NY"}},
    ]}
    responses.add(responses.GET, f"{API_BASE}/sentinellabs/jobs", json=data, status=200)

    jobs = _fetch(make_entry)
    assert [j.remote for j in jobs] == [True, True, False]


@responses.activate
def test_employment_type_needs_exact_key(make_entry):
    """Only metadata named exactly 'Employment Type' is used."""
    data = {"jobs": [{
        "id": 7, "title": "A", "absolute_url": "u",
        "metadata": [{"name": "employment type", "value": "Contract"}],
    }]}
    responses.add(responses.GET, f"{API_BASE}/sentinellabs/jobs", json=data, status=200)

    assert _fetch(make_entry)[0].employment_type is None


@responses.activate
def test_http_error_returns_empty(make_entry, caplog):
    """HTTP 500 → [] with a warning naming the company, no exception."""
    responses.add(responses.GET, f"{API_BASE}/sentinellabs/jobs", status=500)

    with caplog.at_level(logging.WARNING):
        jobs = _fetch(make_entry)

    assert jobs == []
    assert "SentinelOne" in caplog.text
    assert "500" in caplog.text


@responses.activate
def test_connection_error_returns_empty(make_entry):
    """Transport errors are swallowed the same way as bad statuses."""
    responses.add(
        responses.GET,
        f"{API_BASE}/sentinellabs/jobs",
        body=requests.ConnectionError("connection refused"),
    )

    assert _fetch(make_entry) == []


@responses.activate
def test_empty_response(make_entry):
    """API returns {"jobs": []} → empty list."""
    responses.add(responses.GET, f"{API_BASE}/sentinellabs/jobs", json={"jobs": []}, status=200)
    assert _fetch(make_entry) == []


@responses.activate
def test_token_in_url(make_entry):
    """The board token, not the company name, selects the endpoint."""
    responses.add(responses.GET, f"{API_BASE}/acme123/jobs", json={"jobs": []}, status=200)

    _fetch(make_entry, token="acme123", company="Acme")

    assert responses.calls[0].request.url.startswith(f"{API_BASE}/acme123/jobs")
    assert responses.calls[0].request.headers["Accept"] == "application/json"


@responses.activate
def test_sends_configured_user_agent(make_entry):
    """The session's default python-requests agent is replaced."""
    responses.add(responses.GET, f"{API_BASE}/sentinellabs/jobs", json={"jobs": []}, status=200)

    _fetch(make_entry)

    assert responses.calls[0].request.headers["User-Agent"] == config.USER_AGENT


def test_close_closes_session(make_entry):
    source = GreenhouseSource(session=MagicMock(headers={}))
    source.close()
    source.session.close.assert_called_once()

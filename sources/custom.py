"""Fallback connector for companies without a supported ATS.

The actual fetching is delegated to a strategy: any callable taking the
CompanyEntry and the connector's requests.Session and returning rows
already shaped like the feed (JobRecord instances or camelCase dicts).
Strategies are looked up by company name among those injected into
CustomSource, then in the module registry by the entry's "strategy"
param or company name.
"""

import logging
from typing import Callable

import requests

import config as config
from models import CompanyEntry, JobRecord
from normalize import is_remote, normalize
from sources.base import BaseSource, CustomSourceError

logger = logging.getLogger(__name__)

Strategy = Callable[[CompanyEntry, requests.Session], list]

STRATEGIES: dict[str, Strategy] = {}

# Optional canonical attributes a json_feed "fields" mapping may fill
FEED_FIELDS = ("department", "location", "employment_type", "posted_at", "apply_url", "description_html")


def register_strategy(name: str):
    """Decorator adding a fetch strategy to the registry under `name`."""

    def _register(func: Strategy) -> Strategy:
        STRATEGIES[name] = func
        return func

    return _register


class CustomSource(BaseSource):
    name = "custom"

    def __init__(self, strategies: dict[str, Strategy] | None = None, session: requests.Session | None = None):
        super().__init__(session)
        self.strategies = strategies or {}

    def fetch(self, entry: CompanyEntry) -> list[JobRecord]:
        strategy = self._resolve(entry)
        rows = strategy(entry, self.session)
        return [self._to_record(entry, row) for row in rows]

    def _resolve(self, entry: CompanyEntry) -> Strategy:
        if entry.company in self.strategies:
            return self.strategies[entry.company]
        key = entry.params.get("strategy", entry.company)
        if key in STRATEGIES:
            return STRATEGIES[key]
        raise CustomSourceError(f"No custom fetch strategy for {entry.company} (type={entry.type!r})")

    def _to_record(self, entry: CompanyEntry, row) -> JobRecord:
        if isinstance(row, JobRecord):
            return row
        data = {"source": self.name, "company": entry.company, **row}
        return JobRecord.from_dict(data)


def _lookup(item: dict, path: str):
    """Follow a dotted key path through nested dicts."""
    value = item
    for part in path.split("."):
        if not isinstance(value, dict):
            return None
        value = value.get(part)
    return value


@register_strategy("json_feed")
def json_feed(entry: CompanyEntry, session: requests.Session) -> list[JobRecord]:
    """Static JSON feed described entirely by the company entry.

    Params: url, optional jobs_key (dotted path to the list, top level when
    absent) and fields (canonical attribute -> dotted source key).
    """
    url = entry.params.get("url")
    if not url:
        raise CustomSourceError(f"{entry.company}: json_feed needs a url")
    fields = entry.params.get("fields", {})

    try:
        resp = session.get(
            url,
            headers={"Accept": "application/json"},
            timeout=config.REQUEST_TIMEOUT,
        )
        resp.raise_for_status()
        data = resp.json()
    except (requests.RequestException, ValueError) as e:
        raise CustomSourceError(f"{entry.company}: json_feed fetch failed: {e}") from e

    jobs_key = entry.params.get("jobs_key")
    items = _lookup(data, jobs_key) if jobs_key else data
    if not isinstance(items, list):
        raise CustomSourceError(f"{entry.company}: no job list at {jobs_key or 'top level'}")

    jobs = []
    for item in items:
        mapped = {attr: _lookup(item, key) for attr, key in fields.items()}
        req_id = mapped.get("req_id")
        jobs.append(normalize(
            source=CustomSource.name,
            company=entry.company,
            req_id=str(req_id) if req_id is not None else None,
            title=mapped.get("title"),
            remote=is_remote(mapped.get("location")),
            tags=mapped.get("tags"),
            **{attr: mapped.get(attr) for attr in FEED_FIELDS},
        ))

    logger.info(f"[custom/{entry.company}] json_feed returned {len(jobs)} jobs")
    return jobs

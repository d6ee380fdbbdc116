import logging

import requests

import config as config
from models import CompanyEntry, JobRecord
from normalize import is_remote, normalize
from sources.base import BaseSource

logger = logging.getLogger(__name__)

API_BASE = "https://boards-api.greenhouse.io/v1/boards/{board}/jobs"


class GreenhouseSource(BaseSource):
    """Token-based board API: one GET per company.

    Any non-success status or transport error yields an empty list. The
    failure only shows up in the log.
    """

    name = "greenhouse"

    def fetch(self, entry: CompanyEntry) -> list[JobRecord]:
        board_token = entry.params["token"]
        url = API_BASE.format(board=board_token)
        try:
            resp = self.session.get(
                url,
                headers={"Accept": "application/json"},
                timeout=config.REQUEST_TIMEOUT,
            )
        except requests.RequestException as e:
            logger.warning(f"[greenhouse/{entry.company}] Request failed: {e}")
            return []
        if not resp.ok:
            logger.warning(f"[greenhouse/{entry.company}] HTTP {resp.status_code} from {url}")
            return []

        data = resp.json()
        return [self._to_record(entry.company, item) for item in data.get("jobs") or []]

    def _to_record(self, company: str, item: dict) -> JobRecord:
        location = self._extract_location(item)
        departments = item.get("departments") or []

        return normalize(
            source=self.name,
            company=company,
            req_id=str(item.get("id")),
            title=item.get("title"),
            department=departments[0].get("name") if departments else None,
            location=location,
            remote=is_remote(location),
            employment_type=self._metadata_value(item, "Employment Type"),
            posted_at=item.get("updated_at") or item.get("created_at"),
            apply_url=item.get("absolute_url"),
            tags=[d.get("name") for d in departments],
        )

    def _extract_location(self, item: dict) -> str | None:
        location = item.get("location")
        return location.get("name") if isinstance(location, dict) else None

    def _metadata_value(self, item: dict, key: str) -> str | None:
        for meta in item.get("metadata") or []:
            if meta.get("name") == key:
                return meta.get("value")
        return None

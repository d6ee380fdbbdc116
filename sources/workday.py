"""Workday career sites via the tenant's public cxs search API."""

import logging
from urllib.parse import urlparse

import requests

import config as config
from models import CompanyEntry, JobRecord
from normalize import is_remote, normalize
from sources.base import BaseSource

logger = logging.getLogger(__name__)

SEARCH_URL = "https://{tenant}.wd1.myworkdayjobs.com/wday/cxs/{tenant}/{site}/jobs"
PAGE_SIZE = 100


def derive_search_url(base: str) -> str:
    """Build the search endpoint from a career-site URL.

    https://cvshealth.wd1.myworkdayjobs.com/CVS_Health_Careers ->
    https://cvshealth.wd1.myworkdayjobs.com/wday/cxs/cvshealth/CVS_Health_Careers/jobs

    Assumes every tenant lives on wd1.
    """
    parsed = urlparse(base)
    if not parsed.hostname:
        raise ValueError(f"No host in Workday base URL: {base!r}")
    tenant = parsed.hostname.split(".")[0]
    segments = [s for s in parsed.path.split("/") if s]
    if not segments:
        raise ValueError(f"No site segment in Workday base URL: {base!r}")
    return SEARCH_URL.format(tenant=tenant, site=segments[0])


class WorkdaySource(BaseSource):
    """Offset-paginated search, PAGE_SIZE rows per POST.

    A short page ends the loop. A non-success status or transport error also
    ends it, keeping whatever pages were already collected.
    """

    name = "workday"

    def fetch(self, entry: CompanyEntry) -> list[JobRecord]:
        base = entry.params["base"]
        api = derive_search_url(base)

        jobs = []
        offset = 0
        while True:
            postings = self._search_page(entry.company, api, offset)
            if postings is None:
                break
            jobs.extend(self._to_record(entry.company, base, p) for p in postings)
            if len(postings) < PAGE_SIZE:
                break
            offset += PAGE_SIZE

        return jobs

    def _search_page(self, company: str, api: str, offset: int) -> list[dict] | None:
        try:
            resp = self.session.post(
                api,
                json={"limit": PAGE_SIZE, "offset": offset, "searchText": ""},
                headers={"Content-Type": "application/json"},
                timeout=config.REQUEST_TIMEOUT,
            )
        except requests.RequestException as e:
            logger.warning(f"[workday/{company}] Search failed at offset={offset}: {e}")
            return None
        if not resp.ok:
            logger.warning(f"[workday/{company}] HTTP {resp.status_code} at offset={offset}, keeping partial results")
            return None
        return resp.json().get("jobPostings") or []

    def _to_record(self, company: str, base: str, posting: dict) -> JobRecord:
        external_path = posting.get("externalPath")
        category = posting.get("category")

        return normalize(
            source=self.name,
            company=company,
            req_id=external_path or posting.get("id") or posting.get("jobPostingId"),
            title=posting.get("title"),
            department=posting.get("businessLine") or posting.get("primaryLocation"),
            location=posting.get("locationsText") or posting.get("primaryLocation"),
            remote=is_remote(posting.get("locationsText")),
            employment_type=posting.get("timeType"),
            posted_at=posting.get("postedOn"),
            apply_url=f"{base}/{external_path}" if external_path else base,
            tags=[category] if category else [],
        )

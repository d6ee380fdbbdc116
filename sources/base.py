import logging
from abc import ABC, abstractmethod

import requests

import config as config
from models import CompanyEntry, JobRecord

logger = logging.getLogger(__name__)


class SourceError(Exception):
    """A connector could not fetch or parse its upstream."""


class CustomSourceError(SourceError):
    """Raised by custom fetch strategies on transport or parse failure."""


class BaseSource(ABC):
    """Abstract base class for all job connectors."""

    name: str = "base"

    def __init__(self, session: requests.Session | None = None):
        self.session = session or requests.Session()
        self.session.headers["User-Agent"] = config.USER_AGENT

    def close(self):
        self.session.close()

    @abstractmethod
    def fetch(self, entry: CompanyEntry) -> list[JobRecord]:
        """Fetch one company's postings as canonical records."""
        ...

    def safe_fetch(self, entry: CompanyEntry) -> list[JobRecord]:
        """Fetch with error handling so one company's failure doesn't kill the run."""
        try:
            jobs = self.fetch(entry)
            logger.info(f"{entry.company}: {len(jobs)} jobs")
            return jobs
        except Exception as e:
            logger.error(f"{entry.company} failed: {e}", exc_info=True)
            return []

"""Map loosely-typed source fields onto the canonical JobRecord."""

import re

from models import JobRecord

REMOTE_PATTERN = re.compile(r"remote", re.IGNORECASE)


def is_remote(location: str | None) -> bool:
    """True when the location text mentions remote work."""
    return bool(REMOTE_PATTERN.search(location or ""))


def normalize(
    source: str,
    company: str,
    req_id: str,
    title: str,
    department: str | None = None,
    location: str | None = None,
    remote: bool | None = None,
    employment_type: str | None = None,
    posted_at: str | None = None,
    apply_url: str | None = None,
    description_html: str | None = None,
    tags: list[str] | None = None,
) -> JobRecord:
    """Fill in defaults for a canonical record.

    Missing optional fields become None, remote becomes False unless supplied
    and tags becomes a fresh list, with a lone string wrapped as one tag.
    Nothing is validated: a malformed req_id or title passes through untouched.
    """
    return JobRecord(
        source=source,
        company=company,
        req_id=req_id,
        title=title,
        department=department or None,
        location=location or None,
        remote=bool(remote),
        employment_type=employment_type or None,
        posted_at=posted_at or None,
        apply_url=apply_url,
        description_html=description_html or None,
        tags=[tags] if tags and isinstance(tags, str) else list(tags or []),
    )

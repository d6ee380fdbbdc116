from models import JobRecord


def dedupe_key(job: JobRecord) -> tuple[str, str]:
    """Identity of a posting in the feed: the employer plus its requisition id."""
    return (job.company, job.req_id)


def dedupe(jobs: list[JobRecord]) -> list[JobRecord]:
    """Keep the first record seen for each (company, req_id), preserving order.

    Records without a stable req_id collide with each other; that is left as is.
    """
    seen = set()
    unique = []
    for job in jobs:
        key = dedupe_key(job)
        if key in seen:
            continue
        seen.add(key)
        unique.append(job)
    return unique

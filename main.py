#!/usr/bin/env python3
"""Job feed aggregation: fetch every configured company, dedupe, write the feed."""

import argparse
import logging
import sys
from concurrent.futures import ThreadPoolExecutor

import config
from companies import get_companies, load_companies
from dedup import dedupe
from feed import write_feed
from models import CompanyEntry, JobRecord
from sources.base import BaseSource
from sources.custom import CustomSource
from sources.greenhouse import GreenhouseSource
from sources.workday import WorkdaySource

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)

CONNECTORS = {
    **{name: GreenhouseSource for name in config.GREENHOUSE_TYPES},
    **{name: WorkdaySource for name in config.WORKDAY_TYPES},
}


def select_source(entry: CompanyEntry, custom_strategies: dict | None = None) -> BaseSource:
    """Pick the connector for a company by its declared type; unknown types are custom."""
    source_cls = CONNECTORS.get(entry.type)
    if source_cls is None:
        return CustomSource(strategies=custom_strategies)
    return source_cls()


def run_pipeline(
    companies: list[CompanyEntry] | None = None,
    feed_path: str = config.FEED_PATH,
    max_workers: int = config.MAX_WORKERS,
    custom_strategies: dict | None = None,
) -> list[JobRecord]:
    """Fetch all companies, dedupe by (company, req_id) and overwrite the feed."""
    if companies is None:
        companies = get_companies()

    # --- Phase 1: Fetch ---
    logger.info(f"=== FETCH: {len(companies)} companies ===")
    plan = [(entry, select_source(entry, custom_strategies)) for entry in companies]

    try:
        with ThreadPoolExecutor(max_workers=max(1, max_workers)) as ex:
            futures = [ex.submit(source.safe_fetch, entry) for entry, source in plan]
            # Collected in configuration order, not completion order
            results = [fut.result() for fut in futures]
    finally:
        for _, source in plan:
            source.close()

    all_jobs = [job for jobs in results for job in jobs]
    empty = sum(1 for jobs in results if not jobs)
    logger.info(f"Fetched {len(all_jobs)} jobs ({empty} companies returned none)")

    # --- Phase 2: Dedupe ---
    unique = dedupe(all_jobs)
    logger.info(f"After dedup: {len(unique)} of {len(all_jobs)} remain")

    # --- Phase 3: Write ---
    path = write_feed(unique, feed_path)
    logger.info(f"Wrote {len(unique)} jobs -> {path}")

    return unique


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Aggregate career-site job postings into one JSON feed.")
    p.add_argument("--companies", default=None, help="Path to companies.json.")
    p.add_argument("--out", default=config.FEED_PATH, help="Output feed path.")
    p.add_argument("--workers", type=int, default=config.MAX_WORKERS, help="Companies fetched in parallel.")
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        companies = load_companies(args.companies) if args.companies else get_companies()
        run_pipeline(companies, feed_path=args.out, max_workers=args.workers)
    except KeyboardInterrupt:
        logger.info("Run interrupted by user")
        return 1
    except Exception as e:
        logger.error(f"Run failed: {e}", exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

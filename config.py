"""Runtime settings. Paths can be overridden from the environment."""

import os

_dir = os.path.dirname(__file__)

COMPANIES_PATH = os.environ.get("JOBFEED_COMPANIES", os.path.join(_dir, "companies.json"))
FEED_PATH = os.environ.get("JOBFEED_OUTPUT", os.path.join(_dir, "public", "jobs.json"))

REQUEST_TIMEOUT = 30
USER_AGENT = "JobFeed/1.0"
MAX_WORKERS = int(os.environ.get("JOBFEED_WORKERS", "4"))

# Connector type names accepted in companies.json. Anything else is custom.
GREENHOUSE_TYPES = ("greenhouse", "token-board")
WORKDAY_TYPES = ("workday", "tenant-search")

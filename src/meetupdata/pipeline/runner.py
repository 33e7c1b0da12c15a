"""
Entry point for a full fetch run.

Exit codes:
    0  every group was fetched and saved
    1  at least one group failed, or the run itself crashed
"""

from __future__ import annotations

import logging
import sys
from typing import Iterable, Optional

from ..config import build_groups
from ..data.fetch.fetchers import fetch_all_groups
from ..log import configure_logging
from ..settings import Settings

logger = logging.getLogger(__name__)


def run_pipeline(
    settings: Optional[Settings] = None, slugs: Optional[Iterable[str]] = None
) -> int:
    """
    Fetch the configured groups and map the outcome to a process exit code.
    """
    try:
        settings = settings or Settings()
        groups = build_groups(settings, slugs)
        results = fetch_all_groups(groups, settings)
    except Exception as e:
        logger.exception("Unexpected error: %s", e)
        return 1

    if any(not r.success for r in results):
        return 1

    logger.info("All data fetched successfully!")
    return 0


def main() -> None:
    """Console-script entry point (``meetupdata-fetch``)."""
    settings = Settings()
    configure_logging(settings.log_level)
    sys.exit(run_pipeline(settings))


if __name__ == "__main__":
    main()

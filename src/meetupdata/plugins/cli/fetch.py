"""
CLI command: fetch

Fetches event data for all groups, or for the groups named on the command line.
"""

import logging
from typing import Optional, Tuple

import click

from meetupdata.pipeline.runner import run_pipeline
from meetupdata.settings import Settings

# Configure module-level logger
logger = logging.getLogger("meetupdata.cli.fetch")


@click.command("fetch")
@click.argument("slugs", nargs=-1, type=click.STRING)
@click.option("--retries", type=click.IntRange(min=0), help="Retries per group")
@click.option("--timeout", type=click.FloatRange(min=0, min_open=True), help="Seconds per request")
@click.pass_context
def cli(
    ctx, slugs: Tuple[str, ...], retries: Optional[int], timeout: Optional[float]
) -> None:
    """
    Fetch events for the given group SLUGS, or for every group when none are given.

    Exits with status 1 when any group fails.
    """
    overrides = {}
    if retries is not None:
        overrides["max_retries"] = retries
    if timeout is not None:
        overrides["request_timeout"] = timeout
    settings = Settings(**overrides)

    target = ", ".join(slugs) if slugs else "all groups"
    logger.info("Fetching %s...", target)

    code = run_pipeline(settings, slugs or None)
    if code == 0:
        click.echo("✓ All data fetched successfully")
    else:
        click.echo("✗ Some groups failed; see logs for details")
    ctx.exit(code)

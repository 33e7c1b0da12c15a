"""
CLI command: info

Displays the meetupdata package version and the configured groups.
"""

import logging
from importlib.metadata import PackageNotFoundError, version

import click

from meetupdata.config import build_groups
from meetupdata.settings import Settings

# Configure module-level logger
logger = logging.getLogger("meetupdata.cli.info")


@click.command("info")
def cli() -> None:
    """
    Show package metadata and configured groups.
    """
    # Retrieve package version, fallback if not installed
    try:
        pkg_version = version("mauritius-meetups-data")
        logger.debug("Retrieved package version: %s", pkg_version)
    except PackageNotFoundError:
        pkg_version = "0.0.0-dev"
        logger.warning(
            "Package 'mauritius-meetups-data' not found; using development version placeholder."
        )

    click.echo(f"meetupdata version: {pkg_version}")

    groups = build_groups(Settings())
    click.echo(f"\nConfigured groups ({len(groups)}):")
    for group in groups:
        click.echo(f"  - {group.slug}")

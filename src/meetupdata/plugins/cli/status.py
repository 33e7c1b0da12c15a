"""
CLI command: status

Shows the metadata ledger: when each group last ran and last updated.
"""

import logging

import click

from meetupdata.data.ledger import MetadataLedger
from meetupdata.settings import Settings

# Configure module-level logger
logger = logging.getLogger("meetupdata.cli.status")


@click.command("status")
def cli() -> None:
    """
    Show last run and last successful update per group.
    """
    settings = Settings()
    ledger = MetadataLedger(settings.metadata_file).load()

    if not ledger:
        click.echo(f"No metadata recorded yet ({settings.metadata_file})")
        return

    click.echo(f"{'Group':<16} {'Last run':<26} Last updated")
    for slug in sorted(ledger):
        entry = ledger[slug] if isinstance(ledger[slug], dict) else {}
        last_run = entry.get("lastRun") or "never"
        last_updated = entry.get("lastUpdated") or "never"
        click.echo(f"{slug:<16} {last_run:<26} {last_updated}")

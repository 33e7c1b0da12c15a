"""
CLI command: groups

Lists the configured community groups.
"""

import click

from meetupdata.config import build_groups
from meetupdata.settings import Settings


@click.command("groups")
def cli() -> None:
    """
    List configured groups with their endpoints and output files.
    """
    groups = build_groups(Settings())
    click.echo("Configured groups:")
    for group in groups:
        click.echo(f"  - {group.slug}")
        click.echo(f"      endpoint: {group.endpoint}")
        click.echo(f"      output:   {group.output_path}")

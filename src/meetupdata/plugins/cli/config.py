"""
CLI command: config

Configuration management commands.
"""

import click

from meetupdata.settings import Settings


@click.group("config")
def cli():
    """
    Configuration management commands.
    """
    pass


@cli.command("show")
def show_config():
    """
    Show current configuration.
    """
    settings = Settings()

    click.echo("meetupdata Configuration")
    click.echo("=" * 30)
    click.echo(f"Root Directory: {settings.root_dir}")
    click.echo(f"Data Directory: {settings.data_dir}")
    click.echo(f"Metadata File: {settings.metadata_file}")
    click.echo(f"Groups File: {settings.groups_file or '(built-in)'}")
    click.echo(f"API Base URL: {settings.api_base_url}")
    click.echo(f"Request Timeout: {settings.request_timeout}s")
    click.echo(f"Max Retries: {settings.max_retries}")
    click.echo(f"Retry Delay: {settings.retry_delay}s")
    click.echo(f"Log Level: {settings.log_level}")

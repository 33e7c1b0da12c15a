"""
CLI tool to trigger the data-fetch workflow remotely.

Sends a repository dispatch event to the GitHub API so the workflow that runs
``meetupdata-fetch`` starts out of band. External services can call the same
endpoint directly.
"""

import logging
import sys
from datetime import datetime, timezone
from typing import Optional, Sequence

import click
import requests

from meetupdata.settings import DEFAULT_GITHUB_REPO, TriggerSettings

logger = logging.getLogger(__name__)

GITHUB_API_URL = "https://api.github.com"
EVENT_TYPE = "fetch-meetup-data"

HELP_TEXT = f"""
Mauritius Meetups GitHub Action Trigger

Usage:
  meetupdata-trigger [command]

Commands:
  trigger   Trigger GitHub Action directly via API (default)
  help      Show this help message

Environment Variables:
  GITHUB_TOKEN      GitHub personal access token (required)
  GITHUB_REPO       GitHub repository (default: {DEFAULT_GITHUB_REPO})

Examples:
  # Trigger GitHub Action
  GITHUB_TOKEN=ghp_xxxx meetupdata-trigger trigger

  # Or just run without command (defaults to trigger)
  GITHUB_TOKEN=ghp_xxxx meetupdata-trigger

External services can trigger the GitHub Action by calling:
  POST {GITHUB_API_URL}/repos/{DEFAULT_GITHUB_REPO}/dispatches

With headers:
  Authorization: Bearer YOUR_GITHUB_TOKEN
  Accept: application/vnd.github.v3+json
  Content-Type: application/json

Body:
  {{"event_type": "{EVENT_TYPE}"}}
"""


def dispatch_workflow(token: str, repo: str, timeout: float = 30.0) -> requests.Response:
    """
    POST a repository dispatch event for ``repo``.
    """
    url = f"{GITHUB_API_URL}/repos/{repo}/dispatches"
    payload = {
        "event_type": EVENT_TYPE,
        "client_payload": {
            "triggered_by": "cli-tool",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "source": "direct-api-call",
        },
    }
    headers = {
        "Accept": "application/vnd.github.v3+json",
        "Authorization": f"Bearer {token}",
        "Content-Type": "application/json",
        "User-Agent": "mauritius-meetups-trigger/1.0.0",
        "X-GitHub-Api-Version": "2022-11-28",
    }
    return requests.post(url, json=payload, headers=headers, timeout=timeout)


def trigger_workflow(settings: Optional[TriggerSettings] = None) -> bool:
    """
    Trigger the workflow, reporting progress on the terminal.

    Returns:
        True when GitHub accepted the dispatch
    """
    settings = settings or TriggerSettings()

    if not settings.github_token:
        click.echo(
            "❌ GITHUB_TOKEN environment variable is required for direct GitHub API calls",
            err=True,
        )
        click.echo(
            '   Set it with: export GITHUB_TOKEN="your_personal_access_token"', err=True
        )
        return False

    click.echo("🚀 Triggering GitHub Action directly...")
    click.echo(f"📍 Repository: {settings.github_repo}")

    try:
        response = dispatch_workflow(settings.github_token, settings.github_repo)
    except requests.RequestException as e:
        logger.error("Dispatch request failed: %s", e)
        click.echo(f"❌ Error triggering GitHub Action: {e}", err=True)
        return False

    if response.ok:
        click.echo("✅ GitHub Action triggered successfully!")
        click.echo("🔍 Check the Actions tab in your repository to see the workflow run")
        return True

    click.echo(
        f"❌ Failed to trigger GitHub Action: {response.status_code} {response.reason}",
        err=True,
    )
    click.echo(f"Response: {response.text}", err=True)
    return False


@click.group(invoke_without_command=True, add_help_option=False)
@click.pass_context
def cli(ctx):
    """
    Trigger the meetup data workflow via repository dispatch.
    """
    if ctx.invoked_subcommand is None:
        ctx.invoke(trigger)


@cli.command("trigger")
@click.pass_context
def trigger(ctx):
    """
    Trigger GitHub Action directly via API (default).
    """
    ctx.exit(0 if trigger_workflow() else 1)


# Kept for backward compatibility
cli.add_command(trigger, name="direct")


@cli.command("help")
@click.pass_context
def show_help(ctx):
    """
    Show this help message.
    """
    click.echo(HELP_TEXT)
    ctx.exit(0)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Console-script entry point (``meetupdata-trigger``).

    Unknown commands print the help text and exit with status 1.
    """
    args = list(argv) if argv is not None else sys.argv[1:]
    if args:
        args[0] = args[0].lower()
        if args[0] in ("--help", "-h"):
            args[0] = "help"
    try:
        rv = cli.main(args=args, prog_name="meetupdata-trigger", standalone_mode=False)
    except click.UsageError as e:
        click.echo(f"❌ Unknown command: {e.format_message()}", err=True)
        click.echo(HELP_TEXT)
        return 1
    return rv or 0


if __name__ == "__main__":
    raise SystemExit(main())

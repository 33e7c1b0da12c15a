"""
Core meetupdata CLI: dynamically loads commands from plugins/cli.
"""

import importlib
import logging
import pathlib
import pkgutil

import click

from meetupdata.log import configure_logging
from meetupdata.settings import Settings

logger = logging.getLogger(__name__)

# Load global settings
settings = Settings()


@click.group()
@click.option("--log-level", default=settings.log_level, help="Set logging level")
@click.pass_context
def main(ctx, log_level):
    """
    meetupdata CLI
    """
    ctx.ensure_object(dict)
    ctx.obj["log_level"] = log_level

    configure_logging(log_level)


def load_commands():
    """
    Auto-discover and register click commands from src/meetupdata/plugins/cli/*.py
    Each plugin module must define a top-level `cli` click.Command.
    """
    plugins_path = pathlib.Path(__file__).parent / "plugins" / "cli"
    package = "meetupdata.plugins.cli"
    for _, module_name, _ in pkgutil.iter_modules([str(plugins_path)]):
        full_name = f"{package}.{module_name}"
        try:
            module = importlib.import_module(full_name)
            cmd = getattr(module, "cli", None)
            if isinstance(cmd, click.Command):
                main.add_command(cmd)
        except Exception as e:
            logger.error(f"Failed to load plugin {full_name}: {e}")


# Load all plugin commands
load_commands()

if __name__ == "__main__":
    main()

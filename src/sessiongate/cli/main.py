"""sessiongate CLI main entry point.

Command-line front end over ``AuthenticatedApiClient``. Each invocation runs
in a single session: the cookie jar and CSRF token live only as long as the
process, so commands that need an authenticated session log in first.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from sessiongate import __version__
from sessiongate.constants import EXIT_USAGE_ERROR
from sessiongate.core.config import ClientConfig, ConfigManager, ConfigurationError, LogLevel
from sessiongate.logging import configure_logging

from .commands import csrf, login, logout, process

logger = logging.getLogger(__name__)

VERBOSITY_LEVELS = {1: LogLevel.INFO, 2: LogLevel.DEBUG}


@click.group()
@click.version_option(version=__version__, prog_name="sessiongate")
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Configuration file path"
)
@click.option("--base-url", type=str, help="Backend base URL (overrides configuration)")
@click.option(
    "--verbose", "-v",
    count=True,
    help="Increase verbosity (-v for INFO, -vv for DEBUG)"
)
@click.option(
    "--log-format",
    type=click.Choice(["console", "json", "rich"]),
    help="Log output format"
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[Path],
    base_url: Optional[str],
    verbose: int,
    log_format: Optional[str],
) -> None:
    """sessiongate: CSRF-aware client for session-cookie backends.

    \b
    Examples:
        sessiongate csrf
        sessiongate login -u alice@example.com
        sessiongate process 5 --params '{"a": 1}' -u alice@example.com
        sessiongate --base-url http://localhost:4200 logout -u alice@example.com
    """
    ctx.ensure_object(dict)

    try:
        settings = ConfigManager(config).load_config()
        updates = {}
        if base_url:
            updates["base_url"] = base_url
        client_config = ClientConfig(**{**settings.client.model_dump(), **updates})
    except (ConfigurationError, ValueError) as e:
        Console(stderr=True).print(f"[red]Configuration error:[/red] {e}")
        ctx.exit(EXIT_USAGE_ERROR)

    logging_updates = {}
    if verbose:
        logging_updates["level"] = VERBOSITY_LEVELS.get(min(verbose, 2))
    if log_format:
        logging_updates["format"] = log_format
    configure_logging(settings.logging.model_copy(update=logging_updates), version=__version__)

    logger.debug(f"Using backend {client_config.base_url}")
    ctx.obj["client_config"] = client_config


cli.add_command(csrf)
cli.add_command(login)
cli.add_command(logout)
cli.add_command(process)


def main() -> None:
    """Console script entry point."""
    sys.exit(cli(obj={}))


if __name__ == "__main__":
    main()

"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from patternplayer import __version__

from .commands import config

logger = logging.getLogger(__name__)


def resolve_log_path(debug: bool, log_file: Optional[Path]) -> Path:
    """Pick the log file for the given flags."""
    if log_file:
        return log_file
    if debug:
        return Path.cwd() / "patternplayer-debug.log"
    return Path.home() / ".patternplayer" / "logs" / "patternplayer.log"


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> Path:
    """
    Configure logging for the application.

    Standard output carries the player report, so logs always go to a file.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging in the current directory
        log_file: Custom log file path (optional)
        log_level: Log level used with a custom log file

    Returns:
        Path of the log file
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Override with explicit log level if provided
    if log_file and not debug:
        level = getattr(logging, log_level.upper())

    log_path = resolve_log_path(debug, log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Keeps last 5 files, max 10MB each
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")
    return log_path


def report_error(error: Exception, log_path: Optional[Path] = None) -> None:
    """Print a framed error message and recovery hint to stderr."""
    from patternplayer.exceptions import format_error_for_display

    user_message, recovery_hint = format_error_for_display(error)

    click.echo("\n" + "=" * 70, err=True)
    click.echo(f"ERROR: {user_message}", err=True)
    click.echo("=" * 70, err=True)

    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)

    if log_path:
        click.echo(f"\nFor details, check the log file: {log_path}", err=True)


@click.group(invoke_without_command=True)
@click.pass_context
@click.version_option(version=__version__, prog_name="patternplayer")
@click.option(
    '--config',
    '-c',
    'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Load player configuration from a JSON file (default: built-in demo configuration)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./patternplayer-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
def cli(
    ctx,
    config_path: Optional[Path],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    Pattern Player - a media player built from adapter, bridge, decorator,
    composite and proxy components.

    Running without a subcommand loads the media source, shows the playlist
    and plays the file through the renderer and enabled features.

    \b
    Examples:
      # Run the built-in demo configuration
      patternplayer

      # Run with a configuration file
      patternplayer --config ./player.json

      # Write a configuration file to edit
      patternplayer config init ./player.json

      # Enable debug logging
      patternplayer --debug
    """
    if ctx.invoked_subcommand is not None:
        return

    from patternplayer.exceptions import ErrorContext
    from patternplayer.models import PlayerConfig
    from patternplayer.orchestration import Orchestrator

    log_path = setup_logging(verbose, debug, log_file, log_level)
    logger.info("Starting patternplayer")

    # Failures are logged by the ErrorContext of the step that raised them
    try:
        with ErrorContext("load configuration", logger_instance=logger, log_level=logging.INFO):
            if config_path is not None:
                player_config = PlayerConfig.load(config_path)
            else:
                player_config = PlayerConfig()

        Orchestrator(config=player_config).run()

    except click.Abort:
        raise
    except Exception as e:
        report_error(e, log_path)
        sys.exit(1)


cli.add_command(config)

if __name__ == "__main__":
    cli()

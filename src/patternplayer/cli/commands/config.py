"""
Config commands.

Commands:
    - config show [--config PATH]     # Display the effective configuration
    - config init PATH [--force]      # Write the default configuration
    - config validate PATH            # Validate a configuration file
"""

import sys
from pathlib import Path
from typing import Optional

import click

from patternplayer.exceptions import PatternPlayerError
from patternplayer.models import PlayerConfig
from patternplayer.utils.persistence import PydanticPersistence


@click.group(name="config")
def config():
    """Inspect and manage player configuration files."""


@config.command("show")
@click.option(
    '--config',
    '-c',
    'config_path',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help='Configuration file to show (default: built-in demo configuration)'
)
def show(config_path: Optional[Path]):
    """Display the effective configuration as JSON."""
    try:
        player_config = PlayerConfig.load(config_path) if config_path else PlayerConfig()
    except PatternPlayerError as e:
        click.echo(f"Error: {e.get_full_message()}", err=True)
        sys.exit(1)

    click.echo(player_config.model_dump_json(indent=2))


@config.command("init")
@click.argument('path', type=click.Path(dir_okay=False, path_type=Path))
@click.option('--force', is_flag=True, help='Overwrite an existing file (a .bak copy is kept)')
def init(path: Path, force: bool):
    """Write the default configuration to PATH."""
    if path.exists() and not force:
        click.echo(f"Error: {path} already exists (use --force to overwrite)", err=True)
        sys.exit(1)

    PlayerConfig().save(path)
    click.echo(f"Wrote default configuration to {path}")


@config.command("validate")
@click.argument('path', type=click.Path(dir_okay=False, path_type=Path))
def validate(path: Path):
    """Check that PATH holds a valid configuration."""
    is_valid, error = PydanticPersistence.validate_json(path, PlayerConfig)
    if is_valid:
        click.echo(f"[OK] {path}")
        return

    click.echo(f"[FAIL] {path}: {error}")
    sys.exit(1)

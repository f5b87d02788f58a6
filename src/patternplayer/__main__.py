"""Allow running with `python -m patternplayer`."""

from patternplayer.cli.main import cli

if __name__ == "__main__":
    cli()

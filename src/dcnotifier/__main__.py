"""Main entry point for ``python -m dcnotifier``."""

from dcnotifier.cli import cli

if __name__ == "__main__":
    cli()

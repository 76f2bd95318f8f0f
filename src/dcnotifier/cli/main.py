"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from dcnotifier import __version__

logger = logging.getLogger(__name__)


class UsbIdParamType(click.ParamType):
    """USB vendor/product ID given in decimal or 0x-prefixed hex."""

    name = "usb_id"

    def convert(self, value, param, ctx):
        if isinstance(value, int):
            return value
        try:
            number = int(value, 0)
        except ValueError:
            self.fail(f"{value!r} is not a decimal or 0x-prefixed hex number", param, ctx)
        if not 0 <= number <= 0xFFFF:
            self.fail(f"{value!r} is outside 0x0000-0xFFFF", param, ctx)
        return number


USB_ID = UsbIdParamType()


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, log at DEBUG and also write ./dcnotifier-debug.log
        log_file: Custom log file path (optional)
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    root_logger.addHandler(console_handler)

    log_path = None
    if debug and not log_file:
        log_path = Path.cwd() / "dcnotifier-debug.log"
        file_level = logging.DEBUG
    elif log_file:
        log_path = log_file
        file_level = getattr(logging, log_level.upper())

    if log_path is not None:
        # Rotating file handler (keeps last 5 files, max 10MB each)
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=10 * 1024 * 1024,
            backupCount=5
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
        level = min(level, file_level)

    root_logger.setLevel(level)
    logger.debug(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")


@click.command(context_settings={"ignore_unknown_options": True})
@click.version_option(version=__version__, prog_name="dcnotifier")
@click.argument("red")
@click.argument("green")
@click.argument("blue")
@click.argument("activation", required=False)
@click.option(
    '--vendor-id',
    type=USB_ID,
    default=None,
    help='USB vendor ID to drive (default: 0x1D34)'
)
@click.option(
    '--product-id',
    type=USB_ID,
    default=None,
    help='USB product ID to drive (default: 0x0004)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./dcnotifier-debug.log)'
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
    red: str,
    green: str,
    blue: str,
    activation: Optional[str],
    vendor_id: Optional[int],
    product_id: Optional[int],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    Dream Cheeky Notifier - set the LED color of every attached webmail notifier.

    R, G and B are intensities from 0 (off) to 31 (fully on). A is optional:
    0 (the default) sends the LED activation report once before the first
    color report, any other value skips it.

    \b
    Examples:
      # Full red
      dcnotifier 31 0 0

      # Dim white, skip activation
      dcnotifier 4 4 4 1

      # Turn the LED off with debug logging
      dcnotifier 0 0 0 --debug
    """
    from dcnotifier.devices import set_notifier_color
    from dcnotifier.exceptions import InputError, NotifierError, format_error_for_display
    from dcnotifier.models import ColorRequest, NotifierConfig

    setup_logging(verbose, debug, log_file, log_level)

    try:
        request = ColorRequest.from_args(red, green, blue, activation)

        overrides = {}
        if vendor_id is not None:
            overrides["vendor_id"] = vendor_id
        if product_id is not None:
            overrides["product_id"] = product_id
        config = NotifierConfig(**overrides)

        summary = set_notifier_color(request, config)

    except click.Abort:
        raise
    except NotifierError as e:
        logger.debug(f"Run aborted: {e.technical_message}")
        click.echo(f"ERROR: {e.get_full_message()}", err=True)

        sys.exit(2 if isinstance(e, InputError) else 1)
    except Exception as e:
        logger.exception("Error running dcnotifier")
        user_message, _ = format_error_for_display(e)
        click.echo(f"ERROR: {user_message}", err=True)
        sys.exit(1)

    for device in summary.skipped:
        click.echo(f"skipping device {device.name}")

    if not summary.devices:
        click.echo(f"No Dream Cheeky notifier found (looking for {config.identity})")
        return

    for device in summary.devices:
        click.echo(f"device = {device.name}")

    click.echo(f"Set color {request.color} on {len(summary.devices)} device(s)")
    for operation, error in summary.failures:
        click.echo(f"WARNING: {operation} failed: {error}", err=True)


if __name__ == "__main__":
    cli()

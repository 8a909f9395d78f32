"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from airpods_pro import __version__
from airpods_pro.exceptions import ConfigurationError
from airpods_pro.models import AppConfig

from .commands import activate, list_devices, set_mode
from .context import CliContext
from .errors import EXIT_ERROR, echo_error

logger = logging.getLogger(__name__)

DEFAULT_LOG_DIR = Path.home() / ".airpods-pro" / "logs"

_installed_handlers: list[logging.Handler] = []


def resolve_log_path(debug: bool, log_file: Optional[Path]) -> Path:
    """Pick the log file: --log-file, ./airpods-pro-debug.log with --debug, else the user log dir."""
    if log_file:
        return log_file
    if debug:
        return Path.cwd() / "airpods-pro-debug.log"
    return DEFAULT_LOG_DIR / "airpods-pro.log"


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> Path:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG); with -v
                 log records are also echoed to stderr
        debug: If True, enable debug mode with file logging in the current directory
        log_file: Custom log file path (optional)
        log_level: Log level for file logging when log_file is given

    Returns:
        Path of the log file
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    if log_file:
        level = getattr(logging, log_level.upper())

    log_path = resolve_log_path(debug, log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    # Repeated invocations in one process (tests) must not stack handlers
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    # Rotating file handler (keeps last 5 files, max 10MB each)
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    _installed_handlers.append(file_handler)

    if verbose:
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setLevel(level)
        stream_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        _installed_handlers.append(stream_handler)

    root_logger.setLevel(level)
    for handler in _installed_handlers:
        root_logger.addHandler(handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")
    return log_path


@click.group()
@click.pass_context
@click.version_option(version=__version__, prog_name="airpods-pro")
@click.option(
    '--config',
    'config_path',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help='Config file to read (default: ~/.airpods-pro/config.json)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG), also echoed to stderr'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./airpods-pro-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
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
    Control available AirPods Pro devices.

    \b
    Examples:
      # List devices as a table or as JSON
      airpods-pro list
      airpods-pro list --format Json

      # Change the listening mode only
      airpods-pro set-mode "Eli's AirPods Pro" --mode Transparency

      # Power on, connect, set mode and route audio to the device
      airpods-pro activate "Eli's AirPods Pro" --mode NoiseCancellation --audio Both
    """
    log_path = setup_logging(verbose, debug, log_file, log_level)

    try:
        config = AppConfig.load_or_default(config_path)
    except ConfigurationError as e:
        logger.error(f"Could not load configuration: {e.technical_message}")
        echo_error(e, log_path)
        sys.exit(EXIT_ERROR)

    ctx.obj = CliContext(config, log_path=log_path)


cli.add_command(list_devices)
cli.add_command(set_mode)
cli.add_command(activate)


def main():
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()

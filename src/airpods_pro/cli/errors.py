"""Error reporting and exit codes for CLI commands."""

import logging
import sys
from functools import wraps
from typing import Callable, Optional

import click

from airpods_pro.exceptions import (
    AirPodsProError,
    DeviceNotFoundError,
    WaitCancelledError,
    format_error_for_display,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130


def echo_error(error: Exception, log_path: Optional[object] = None) -> None:
    """Print an error banner with its recovery hint to stderr."""
    user_message, recovery_hint = format_error_for_display(error)

    click.echo("\n" + "=" * 70, err=True)
    click.echo(f"ERROR: {user_message}", err=True)
    click.echo("=" * 70, err=True)

    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)

    if log_path is not None:
        click.echo(f"\nFor details, check the log file: {log_path}", err=True)


def handle_command_errors(operation_name: str) -> Callable:
    """
    Decorator that turns exceptions from a command into exit codes.

    - DeviceNotFoundError: message on stdout, exit 0
    - WaitCancelledError / Ctrl+C: exit 130
    - other AirPodsProError: error banner, exit 1
    - anything else: logged with traceback, error banner, exit 1

    The decorated command must take the click context as its first argument
    (use ``@click.pass_context``).
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(ctx: click.Context, *args, **kwargs):
            log_path = getattr(ctx.obj, "log_path", None)
            try:
                return func(ctx, *args, **kwargs)

            except DeviceNotFoundError as e:
                logger.info(f"{operation_name}: {e.technical_message}")
                click.echo(e.user_message)
                return None

            except (KeyboardInterrupt, WaitCancelledError) as e:
                logger.info(f"{operation_name} interrupted: {e}")
                click.echo("\nInterrupted.", err=True)
                sys.exit(EXIT_INTERRUPTED)

            except AirPodsProError as e:
                logger.error(f"Failed to {operation_name}: {e.log_message}")
                echo_error(e, log_path)
                sys.exit(EXIT_ERROR)

            except (click.exceptions.Exit, click.Abort):
                raise

            except Exception as e:
                logger.exception(f"Unexpected error during {operation_name}")
                echo_error(e, log_path)
                sys.exit(EXIT_ERROR)

            finally:
                if ctx.obj is not None and hasattr(ctx.obj, "disarm_deadline"):
                    ctx.obj.disarm_deadline()

        return wrapper
    return decorator

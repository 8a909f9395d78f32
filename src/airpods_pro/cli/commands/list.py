"""List command implementation."""

import click

from airpods_pro.cli.errors import handle_command_errors
from airpods_pro.models import OutputFormat
from airpods_pro.utils.formatting import format_devices


@click.command(name="list")
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.TEXT.value,
    show_default=True,
    help="The format of the generated results",
)
@click.pass_context
@handle_command_errors("list devices")
def list_devices(ctx: click.Context, output_format: str):
    """List available AirPods Pro devices."""
    devices = ctx.obj.orchestrator().list_devices()

    if not devices:
        click.echo("There are no AirPods Pro devices available")
        return

    click.echo(format_devices(devices, OutputFormat(output_format)))

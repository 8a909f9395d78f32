"""Set-mode command implementation."""

import click

from airpods_pro.cli.errors import handle_command_errors
from airpods_pro.models import ListeningMode

MODE_CHOICE = click.Choice([m.value for m in ListeningMode], case_sensitive=False)


@click.command(name="set-mode")
@click.argument("name")
@click.option("--mode", type=MODE_CHOICE, required=True, help="The listening mode to set")
@click.option(
    "--power-on/--no-power-on",
    default=True,
    show_default=True,
    help="Turn Bluetooth on first if it is off",
)
@click.pass_context
@handle_command_errors("set listening mode")
def set_mode(ctx: click.Context, name: str, mode: str, power_on: bool):
    """Set the listening mode of the device called NAME."""
    listening_mode = ListeningMode(mode)
    device = ctx.obj.orchestrator().set_mode_only(name, listening_mode, power_on=power_on)
    click.echo(f"{device.name}: listening mode set to {listening_mode.value}")

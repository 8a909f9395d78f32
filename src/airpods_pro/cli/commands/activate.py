"""Activate command implementation."""

from typing import Optional

import click

from airpods_pro.cli.errors import handle_command_errors
from airpods_pro.models import ActivationRequest, AudioChannel, ListeningMode

from .set_mode import MODE_CHOICE


@click.command(name="activate")
@click.argument("name")
@click.option("--mode", type=MODE_CHOICE, required=True, help="The listening mode to set")
@click.option(
    "--audio",
    type=click.Choice([c.value for c in AudioChannel], case_sensitive=False),
    default=AudioChannel.BOTH.value,
    show_default=True,
    help="Which default audio devices to bind",
)
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Seconds to wait for Bluetooth power and audio registration",
)
@click.option(
    "--poll-interval",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Seconds between state checks while waiting",
)
@click.option(
    "--deadline",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Give up on any remaining wait after this many seconds overall",
)
@click.pass_context
@handle_command_errors("activate device")
def activate(
    ctx: click.Context,
    name: str,
    mode: str,
    audio: str,
    timeout: Optional[float],
    poll_interval: Optional[float],
    deadline: Optional[float],
):
    """
    Turn on Bluetooth, connect NAME, set its mode and make it the default audio device.

    \b
    Examples:
      airpods-pro activate "Eli's AirPods Pro" --mode NoiseCancellation
      airpods-pro activate "Eli's AirPods Pro" --mode Transparency --audio Output
    """
    request = ActivationRequest(
        device_name=name,
        mode=ListeningMode(mode),
        channel=AudioChannel(audio),
    )
    orchestrator = ctx.obj.orchestrator(
        wait_timeout=timeout,
        audio_wait_timeout=timeout,
        poll_interval=poll_interval,
    )

    ctx.obj.arm_deadline(deadline)
    result = orchestrator.activate(request)

    click.echo(f"{result.device.name}: listening mode set to {request.mode.value}")
    for endpoint, role in result.bindings:
        click.echo(f"  default {role.value}: {endpoint.name}")

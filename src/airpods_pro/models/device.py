"""Device, audio endpoint and activation request models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .enums import ActivationStage, AudioChannel, AudioRole, ConnectionState, ListeningMode


class Device(BaseModel):
    """
    A paired noise-cancelling Bluetooth accessory.

    Devices are discovered fresh on every command and discarded afterwards.
    `handle` is the underlying radio-subsystem object (an IOBluetoothDevice
    in production, anything the fake directory likes in tests).
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str = Field(description="Device name (lookup key, not guaranteed unique)")
    state: ConnectionState = Field(description="Connection state at discovery time")
    mode: ListeningMode = Field(description="Listening mode at discovery time")
    handle: Any = Field(default=None, exclude=True, repr=False, description="Backend device object")

    @property
    def is_connected(self) -> bool:
        """Check if the device was connected when discovered."""
        return self.state == ConnectionState.CONNECTED


class AudioEndpoint(BaseModel):
    """An input and/or output device registered with the audio subsystem."""

    name: str = Field(description="Endpoint name as shown by the audio subsystem")
    is_input: bool = Field(default=False, description="Endpoint can capture audio")
    is_output: bool = Field(default=False, description="Endpoint can play audio")

    @property
    def is_input_only(self) -> bool:
        return self.is_input and not self.is_output

    @property
    def is_output_only(self) -> bool:
        return self.is_output and not self.is_input


class ActivationRequest(BaseModel):
    """Everything the orchestrator needs to activate one device."""

    device_name: str = Field(description="Name of the device to activate")
    mode: ListeningMode = Field(description="Listening mode to set")
    channel: AudioChannel = Field(default=AudioChannel.BOTH, description="Audio roles to bind")


class ActivationResult(BaseModel):
    """Outcome of a completed activation."""

    device: Device = Field(description="The device that was activated")
    stage: ActivationStage = Field(description="Last stage reached")
    bindings: list[tuple[AudioEndpoint, AudioRole]] = Field(
        default_factory=list, description="Endpoints set as default, with their role"
    )

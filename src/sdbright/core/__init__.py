"""
sdbright Core - Models + Controller

Models: data classes and error types (DeviceDescriptor, Command, Outcome)
Controllers: BrightnessController, the composition root for one invocation

Note: the controller is NOT re-exported here to avoid circular imports
(constants → core.models → core.__init__ → controllers → constants).
Import it directly: `from sdbright.core.controllers import BrightnessController`
"""

from .models import (
    BrightnessError,
    Command,
    DeviceDescriptor,
    DeviceNotFound,
    DeviceUnavailable,
    Outcome,
    ReadFailed,
    UsageError,
    WriteFailed,
)

__all__ = [
    'BrightnessError',
    'Command',
    'DeviceDescriptor',
    'DeviceNotFound',
    'DeviceUnavailable',
    'Outcome',
    'ReadFailed',
    'UsageError',
    'WriteFailed',
]

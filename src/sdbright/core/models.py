"""
sdbright Models - Pure data classes and error types.

No HID or CLI dependencies; everything else in the package imports these.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

# =============================================================================
# Device description
# =============================================================================


@dataclass(frozen=True)
class DeviceDescriptor:
    """USB identity and brightness range of a supported display."""
    vendor_id: int
    product_id: int
    min_brightness: int
    max_brightness: int

    def __post_init__(self):
        for name in ('vendor_id', 'product_id', 'min_brightness', 'max_brightness'):
            value = getattr(self, name)
            if not 0 <= value <= 0xFFFF:
                raise ValueError(f"{name} must fit in 16 bits, got {value}")
        if self.min_brightness >= self.max_brightness:
            raise ValueError(
                f"min_brightness ({self.min_brightness}) must be below "
                f"max_brightness ({self.max_brightness})"
            )

    def in_range(self, value: int) -> bool:
        return self.min_brightness <= value <= self.max_brightness

    @property
    def vid_pid(self) -> str:
        """'05ac:1114' style identifier for messages."""
        return f"{self.vendor_id:04x}:{self.product_id:04x}"


# =============================================================================
# Commands and results
# =============================================================================


class Command(Enum):
    """What one invocation does after reading the current brightness."""
    REPORT = auto()     # print current value
    INCREASE = auto()   # one step up
    DECREASE = auto()   # one step down


@dataclass
class Outcome:
    """Result of one controller run.

    ``target`` is None when no step was available (already at the
    boundary).  ``written`` is True only when a SET_FEATURE succeeded.
    """
    command: Command
    current: int
    target: Optional[int] = None
    written: bool = False

    @property
    def at_boundary(self) -> bool:
        return self.command is not Command.REPORT and self.target is None


# =============================================================================
# Errors
# =============================================================================


class BrightnessError(RuntimeError):
    """Base for every failure that ends an invocation."""
    message = "Brightness control failed."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)


class DeviceNotFound(BrightnessError):
    message = "Could not find matching device/interface."


class DeviceUnavailable(BrightnessError):
    message = "Could not open device."


class ReadFailed(BrightnessError):
    message = "Could not read current brightness."


class WriteFailed(BrightnessError):
    message = "Could not set brightness."


class UsageError(BrightnessError):
    message = "Unrecognized command."

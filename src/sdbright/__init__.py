"""
sdbright - Studio Display brightness control

Reads and steps the brightness of an Apple Studio Display (2022) over
its HID brightness interface.

Features:
- Device discovery by VID:PID and HID interface number
- GET/SET of the vendor brightness feature report
- Stepping through the display's calibrated brightness table

Usage:
    # As a library
    from sdbright import BrightnessController, Command, default_interface
    controller = BrightnessController(interface=default_interface())
    controller.run(Command.INCREASE)

    # Command line
    sdbright              # Show current brightness
    sdbright --increase   # One step up
    sdbright --decrease   # One step down
"""

from sdbright.__version__ import __version__

# Core exports
from sdbright.constants import STUDIO_DISPLAY, default_interface
from sdbright.core.controllers import BrightnessController, parse_command
from sdbright.core.models import (
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
from sdbright.device_detector import detect_devices, find_device_path
from sdbright.device_hid import BrightnessSession, FeatureTransport, HidApiTransport
from sdbright.step_table import STUDIO_DISPLAY_STEPS, StepTable

__all__ = [
    # Version
    "__version__",
    # Core
    "BrightnessController",
    "BrightnessSession",
    "Command",
    "Outcome",
    "parse_command",
    # Device
    "DeviceDescriptor",
    "STUDIO_DISPLAY",
    "STUDIO_DISPLAY_STEPS",
    "StepTable",
    "default_interface",
    "detect_devices",
    "find_device_path",
    # Transport
    "FeatureTransport",
    "HidApiTransport",
    # Errors
    "BrightnessError",
    "DeviceNotFound",
    "DeviceUnavailable",
    "ReadFailed",
    "UsageError",
    "WriteFailed",
]

"""
Device constants for the Apple Studio Display (2022) brightness interface.

Values captured from the display's HID feature reports.  The brightness
codes are HID ordinals, not nits; the step table below is the set the
firmware steps through from the macOS brightness keys.
"""

import sys

from .core.models import DeviceDescriptor

# USB IDs
STUDIO_DISPLAY_VID = 0x05AC
STUDIO_DISPLAY_PID = 0x1114

STUDIO_DISPLAY = DeviceDescriptor(
    vendor_id=STUDIO_DISPLAY_VID,
    product_id=STUDIO_DISPLAY_PID,
    min_brightness=400,
    max_brightness=60000,
)

# Calibration points, not evenly spaced
STUDIO_DISPLAY_STEP_VALUES = (
    400, 1424, 2395, 3566, 4985, 6693, 8733, 11152, 14000,
    17331, 21019, 25689, 30854, 36778, 43547, 51254, 60000,
)

# Feature report layout: [report_id, lo, hi, 0, 0, 0, 0]
BRIGHTNESS_REPORT_ID = 0x01
BRIGHTNESS_REPORT_SIZE = 7

# The brightness interface index depends on how the host enumerates the
# display's HID interfaces.
INTERFACE_LINUX = 7
INTERFACE_WINDOWS = 7
INTERFACE_MACOS = 12


def default_interface(platform: str = sys.platform) -> int:
    """HID interface number carrying brightness control on *platform*."""
    if platform == 'darwin':
        return INTERFACE_MACOS
    if platform.startswith('win'):
        return INTERFACE_WINDOWS
    return INTERFACE_LINUX

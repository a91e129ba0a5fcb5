"""
Brightness feature report codec.

Wire layout (7 bytes, report ID 0x01)::

    [0x01, lo, hi, 0x00, 0x00, 0x00, 0x00]

Bytes 1-2 hold the brightness as a little-endian uint16.  On reads the
report ID and trailing bytes are ignored.  No range checks here; callers
validate against the DeviceDescriptor.
"""

import struct

from .constants import BRIGHTNESS_REPORT_ID

# report id, uint16 LE value, 4 reserved zero bytes
_REPORT_FORMAT = '<BH4x'


def encode(value: int) -> bytes:
    """Pack *value* into a SET_FEATURE buffer."""
    return struct.pack(_REPORT_FORMAT, BRIGHTNESS_REPORT_ID, value)


def decode(buffer: bytes) -> int:
    """Extract the brightness from a GET_FEATURE buffer.

    Raises:
        struct.error: If *buffer* is shorter than 3 bytes.
    """
    return struct.unpack_from('<H', bytes(buffer), 1)[0]

#!/usr/bin/env python3
"""
HID Device Detector
Finds the brightness-control HID interface of a supported display.

Supported devices:
- Apple Studio Display (2022): VID=0x05AC, PID=0x1114
  Brightness lives on HID interface 7 (Linux/Windows) or 12 (macOS).

The display exposes several HID interfaces under the same VID:PID, so
enumeration is filtered by interface number and the first match in the
order reported by the platform wins.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

import hid as hidapi

log = logging.getLogger(__name__)

# hidapi.enumerate(vid, pid) -> list of dicts
EnumerateFn = Callable[[int, int], Iterable[dict]]


@dataclass
class HidDeviceEntry:
    """One HID interface reported by the platform."""
    path: bytes
    vendor_id: int
    product_id: int
    interface_number: int = -1
    manufacturer: str = ""
    product: str = ""
    serial: str = ""
    release: int = 0
    usage_page: int = 0
    usage: int = 0

    @classmethod
    def from_hidapi(cls, info: dict) -> 'HidDeviceEntry':
        """Build an entry from one hidapi.enumerate() dict."""
        path = info.get('path') or b''
        if isinstance(path, str):
            path = path.encode()
        return cls(
            path=path,
            vendor_id=info.get('vendor_id', 0),
            product_id=info.get('product_id', 0),
            interface_number=info.get('interface_number', -1),
            manufacturer=info.get('manufacturer_string') or "",
            product=info.get('product_string') or "",
            serial=info.get('serial_number') or "",
            release=info.get('release_number', 0),
            usage_page=info.get('usage_page', 0),
            usage=info.get('usage', 0),
        )


def detect_devices(
    vendor_id: int,
    product_id: int,
    enumerate_fn: Optional[EnumerateFn] = None,
) -> List[HidDeviceEntry]:
    """List every HID interface matching *vendor_id*:*product_id*.

    Order is whatever the platform reports.  No handles are opened.
    """
    enumerate_fn = enumerate_fn or hidapi.enumerate
    log.debug("Enumerating HID devices %04x:%04x...", vendor_id, product_id)
    entries = [
        HidDeviceEntry.from_hidapi(info)
        for info in enumerate_fn(vendor_id, product_id) or []
        # hidapi treats 0 as a wildcard; keep the match exact
        if info.get('vendor_id') == vendor_id and info.get('product_id') == product_id
    ]
    log.debug("Found %d matching HID interface(s)", len(entries))
    return entries


def find_device_path(
    vendor_id: int,
    product_id: int,
    interface_id: int,
    enumerate_fn: Optional[EnumerateFn] = None,
) -> Optional[bytes]:
    """Return the path of the first interface numbered *interface_id*.

    Returns None when nothing matches; an absent device is a normal
    outcome, not an error.
    """
    for entry in detect_devices(vendor_id, product_id, enumerate_fn):
        log.debug("Candidate %r on interface %d", entry.path, entry.interface_number)
        if entry.interface_number == interface_id:
            log.debug("Selected %r", entry.path)
            return entry.path
    log.debug("No interface %d on %04x:%04x", interface_id, vendor_id, product_id)
    return None


def format_device(entry: HidDeviceEntry) -> str:
    """Multi-line human-readable description of *entry*."""
    return "\n".join([
        f"path:         {entry.path.decode(errors='replace')}",
        f"manufacturer: {entry.manufacturer}",
        f"product:      {entry.product}",
        f"serial:       {entry.serial}",
        f"release:      {entry.release}",
        f"interface:    {entry.interface_number}",
        f"usage page:   {entry.usage_page}",
        f"usage:        {entry.usage}",
    ])

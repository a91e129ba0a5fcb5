#!/usr/bin/env python3
"""
HID feature-report layer for display brightness.

The display exposes brightness as vendor feature report 0x01 on its
brightness interface (see device_detector).  Reads and writes are plain
GET_FEATURE / SET_FEATURE requests carrying the 7-byte layout from
feature_report.

The ``FeatureTransport`` ABC abstracts the raw HID I/O so that:
  • Tests can inject a mock transport (no real hardware needed).
  • ``HidApiTransport`` provides real HID via HIDAPI.

Every call is blocking with no timeout and no retry; the first I/O
failure is surfaced to the caller.

Linux dependencies:
  • hidapi: ``pip install hidapi`` (needs libhidapi: ``apt install libhidapi-dev``)
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

import hid as hidapi

from . import feature_report
from .constants import BRIGHTNESS_REPORT_ID, BRIGHTNESS_REPORT_SIZE, STUDIO_DISPLAY
from .core.models import DeviceDescriptor, DeviceUnavailable, ReadFailed, WriteFailed

log = logging.getLogger(__name__)

# Errors hidapi raises for I/O failures and closed/invalid handles
HID_ERRORS = (OSError, ValueError)


# =========================================================================
# Abstract HID transport
# =========================================================================

class FeatureTransport(ABC):
    """Abstract HID feature-report transport, mockable for testing."""

    @abstractmethod
    def open(self, path: bytes) -> None:
        """Open the HID interface at *path*."""

    @abstractmethod
    def close(self) -> None:
        """Close the handle.  Safe to call more than once."""

    @abstractmethod
    def get_feature_report(self, report_id: int, length: int) -> bytes:
        """GET_FEATURE.  Returned data starts with the report ID."""

    @abstractmethod
    def send_feature_report(self, data: bytes) -> int:
        """SET_FEATURE.  *data* starts with the report ID.  Returns bytes sent."""

    @property
    @abstractmethod
    def is_open(self) -> bool:
        """Whether a handle is currently open."""


# =========================================================================
# Real transport: HIDAPI
# =========================================================================

class HidApiTransport(FeatureTransport):
    """Feature-report transport using HIDAPI (hidapi library).

    HIDAPI goes through the OS HID driver (hidraw on Linux), so the
    display can be driven without detaching any kernel driver.

    Requires: ``pip install hidapi`` + ``apt install libhidapi-dev``
    """

    def __init__(self):
        self._device = None

    def open(self, path: bytes) -> None:
        """Open HID device by path."""
        device = hidapi.device()
        device.open_path(path)
        self._device = device

    def close(self) -> None:
        """Close HID device."""
        if self._device is not None:
            self._device.close()
            self._device = None

    def get_feature_report(self, report_id: int, length: int) -> bytes:
        if self._device is None:
            raise RuntimeError("Transport not open")
        data = self._device.get_feature_report(report_id, length)
        return bytes(data) if data else b''

    def send_feature_report(self, data: bytes) -> int:
        if self._device is None:
            raise RuntimeError("Transport not open")
        return self._device.send_feature_report(data)

    @property
    def is_open(self) -> bool:
        return self._device is not None


# =========================================================================
# Brightness session
# =========================================================================

class BrightnessSession:
    """One open brightness channel to one display.

    Use as a context manager so the handle is released on every path::

        with BrightnessSession().open(path) as session:
            session.set_brightness(session.get_brightness())
    """

    def __init__(
        self,
        descriptor: DeviceDescriptor = STUDIO_DISPLAY,
        transport: Optional[FeatureTransport] = None,
    ):
        self.descriptor = descriptor
        self.transport = transport if transport is not None else HidApiTransport()

    def open(self, path: bytes) -> 'BrightnessSession':
        """Open the interface at *path*.

        Raises:
            DeviceUnavailable: If the path is stale or the device is busy.
        """
        try:
            self.transport.open(path)
        except HID_ERRORS as e:
            log.debug("Open %r failed: %s", path, e)
            raise DeviceUnavailable() from e
        log.debug("Opened %r", path)
        return self

    def close(self) -> None:
        if self.transport.is_open:
            self.transport.close()
            log.debug("Closed HID handle")

    @property
    def is_open(self) -> bool:
        return self.transport.is_open

    def get_brightness(self) -> int:
        """Read the current brightness code.

        Raises:
            ReadFailed: On any transport error or a short report.
        """
        try:
            data = self.transport.get_feature_report(
                BRIGHTNESS_REPORT_ID, BRIGHTNESS_REPORT_SIZE)
        except HID_ERRORS as e:
            raise ReadFailed() from e
        log.debug("GET_FEATURE -> %s", data.hex())
        if len(data) < 3:
            log.debug("Short brightness report (%d bytes)", len(data))
            raise ReadFailed()
        return feature_report.decode(data)

    def set_brightness(self, value: int) -> None:
        """Write *value*, which must lie in the descriptor's range.

        Raises:
            ValueError: If *value* is out of range (caller bug).
            WriteFailed: On any transport error.
        """
        if not self.descriptor.in_range(value):
            raise ValueError(
                f"Brightness {value} outside "
                f"[{self.descriptor.min_brightness}, {self.descriptor.max_brightness}]"
            )
        data = feature_report.encode(value)
        log.debug("SET_FEATURE <- %s", data.hex())
        try:
            sent = self.transport.send_feature_report(data)
        except HID_ERRORS as e:
            raise WriteFailed() from e
        if sent < 0:
            raise WriteFailed()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

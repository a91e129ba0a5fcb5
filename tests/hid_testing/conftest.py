"""Shared HID fixtures: a mock feature transport reporting a given brightness."""
from unittest.mock import MagicMock

import pytest

from sdbright.device_hid import FeatureTransport


def make_mock_transport(brightness: int = 8733) -> MagicMock:
    """MagicMock satisfying FeatureTransport, returning *brightness* on GET_FEATURE."""
    t = MagicMock(spec=FeatureTransport)
    t.is_open = False

    def _open(path):
        t.is_open = True

    def _close():
        t.is_open = False

    t.open.side_effect = _open
    t.close.side_effect = _close
    t.get_feature_report.return_value = bytes(
        [0x01, brightness & 0xFF, brightness >> 8, 0, 0, 0, 0])
    t.send_feature_report.return_value = 7
    return t


@pytest.fixture
def mock_transport():
    return make_mock_transport()


@pytest.fixture
def make_transport():
    """Factory fixture: make_transport(brightness) -> mock transport."""
    return make_mock_transport

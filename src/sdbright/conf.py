"""Config persistence for sdbright.

Config is stored at ~/.config/sdbright/config.json (XDG-compliant).
Only device-selection settings live here; brightness is never saved.

Usage:
    from sdbright.conf import resolve_interface

    resolve_interface()      # CLI override > config > platform default
    resolve_interface(12)    # explicit override wins

    # Low-level config access
    from sdbright.conf import load_config, save_config
"""
from __future__ import annotations

import json
import logging
import os
from typing import Optional

from .constants import default_interface

log = logging.getLogger(__name__)

# =========================================================================
# Config file location (XDG-compliant)
# =========================================================================

_XDG_CONFIG = os.environ.get('XDG_CONFIG_HOME', os.path.expanduser('~/.config'))
CONFIG_DIR = os.path.join(_XDG_CONFIG, 'sdbright')
CONFIG_PATH = os.path.join(CONFIG_DIR, 'config.json')


# =========================================================================
# Low-level config persistence
# =========================================================================

def load_config() -> dict:
    """Load user config from disk. Returns empty dict on missing/corrupt file."""
    try:
        with open(CONFIG_PATH, 'r') as f:
            config = json.load(f)
    except FileNotFoundError:
        return {}
    except (json.JSONDecodeError, OSError) as e:
        log.warning("Ignoring unreadable config %s: %s", CONFIG_PATH, e)
        return {}
    return config if isinstance(config, dict) else {}


def save_config(config: dict):
    """Save user config to disk."""
    os.makedirs(CONFIG_DIR, exist_ok=True)
    with open(CONFIG_PATH, 'w') as f:
        json.dump(config, f, indent=2)


# =========================================================================
# HID interface selection
# =========================================================================

def get_saved_interface() -> Optional[int]:
    """Get the configured HID interface number. Returns None if unset or invalid."""
    value = load_config().get('interface')
    if isinstance(value, bool) or not isinstance(value, int):
        if value is not None:
            log.warning("Ignoring non-integer 'interface' in config: %r", value)
        return None
    return value


def save_interface(interface: int):
    """Persist a HID interface override."""
    config = load_config()
    config['interface'] = interface
    save_config(config)


def resolve_interface(override: Optional[int] = None) -> int:
    """Pick the HID interface number: *override* > config > platform default."""
    if override is not None:
        return override
    saved = get_saved_interface()
    if saved is not None:
        return saved
    return default_interface()

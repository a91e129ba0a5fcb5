"""sdbright version information."""

__version__ = "0.3.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history:
# 0.1.0 - Initial release: read brightness, step up/down over the calibrated table
# 0.2.0 - Per-platform HID interface default, --interface override, config file
# 0.3.0 - --list device dump, -v/-vv logging, write failures logged as warnings

#!/usr/bin/env python3
"""
sdbright - Command Line Interface

Entry point for the sdbright package.

    sdbright              Print current brightness
    sdbright --increase   One step brighter (any '--inc...' prefix)
    sdbright --decrease   One step dimmer (any '--dec...' prefix)
"""

import argparse
import logging
import sys
from typing import List, Optional

from .__version__ import __version__
from .conf import resolve_interface, save_interface
from .constants import STUDIO_DISPLAY
from .core.controllers import BrightnessController, parse_command
from .core.models import BrightnessError, Command, UsageError
from .device_detector import detect_devices, format_device


def _setup_logging(verbose: int = 0):
    """Configure root logging from the -v count."""
    if verbose >= 2:
        logging.basicConfig(level=logging.DEBUG, format='[%(levelname)s] %(name)s: %(message)s')
    elif verbose == 1:
        logging.basicConfig(level=logging.INFO, format='[%(levelname)s] %(message)s')
    else:
        logging.basicConfig(level=logging.WARNING, format='[%(levelname)s] %(message)s')


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sdbright",
        description="Studio Display brightness control",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        # '--inc'/'--dec' tokens must not be taken as abbreviations
        allow_abbrev=False,
        epilog="""
Examples:
    sdbright                  Show current brightness
    sdbright --increase       Step brightness up
    sdbright --dec            Step brightness down
    sdbright --list           List the display's HID interfaces
    sdbright --interface 12   Use interface 12 (macOS numbering)
        """
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v, -vv)"
    )
    parser.add_argument(
        "--interface",
        type=int,
        default=None,
        help="HID interface number carrying brightness (default: per platform)"
    )
    parser.add_argument(
        "--save-interface",
        type=int,
        metavar="N",
        help="Remember N as the HID interface number and exit"
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List all HID interfaces of the display and exit"
    )
    return parser


def usage(prog: str) -> str:
    return f"Usage: {prog} [--increase|--decrease]"


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args, tokens = parser.parse_known_args(argv)
    _setup_logging(args.verbose)

    # Parse the command before touching the device or the config
    try:
        if len(tokens) > 1:
            raise UsageError()
        command = parse_command(tokens[0] if tokens else None)
        if tokens and (args.list or args.save_interface is not None):
            raise UsageError()
    except UsageError:
        print(usage(parser.prog))
        return 1

    if args.save_interface is not None:
        save_interface(args.save_interface)
        print(f"Saved HID interface {args.save_interface}")
        return 0

    interface = resolve_interface(args.interface)

    if args.list:
        return list_devices(interface)

    return run(command, interface)


def run(command: Command, interface: int) -> int:
    """Run one brightness command; print the result or the failure."""
    controller = BrightnessController(interface=interface)
    try:
        outcome = controller.run(command)
    except BrightnessError as e:
        print(e)
        return 1

    if command is Command.REPORT:
        print(f"current brightness: {outcome.current}")
    return 0


def list_devices(interface: int) -> int:
    """Print every HID interface of the display, marking the selected one."""
    d = STUDIO_DISPLAY
    entries = detect_devices(d.vendor_id, d.product_id)
    if not entries:
        print(f"No HID device {d.vid_pid} found.")
        return 1

    for entry in entries:
        marker = "*" if entry.interface_number == interface else " "
        print(f"{marker} {format_device(entry)}")
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
sdbright Controllers - One brightness invocation, start to finish.

The controller wires the pieces together:

    device_detector.find_device_path → BrightnessSession.open
    → get_brightness → StepTable.next/previous → set_brightness

It prints nothing; callers get an Outcome or a BrightnessError.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

from ..constants import STUDIO_DISPLAY
from ..device_detector import find_device_path
from ..device_hid import BrightnessSession
from ..step_table import STUDIO_DISPLAY_STEPS, StepTable
from .models import (
    Command,
    DeviceDescriptor,
    DeviceNotFound,
    Outcome,
    UsageError,
    WriteFailed,
)

log = logging.getLogger(__name__)

# Command tokens match by prefix ('--inc', '--increase', '--incr' ...)
_TOKEN_PREFIXES = (
    ('--inc', Command.INCREASE),
    ('--dec', Command.DECREASE),
)


def parse_command(token: Optional[str]) -> Command:
    """Map a CLI token to a Command.

    Raises:
        UsageError: If *token* is not a recognized prefix.
    """
    if token is None:
        return Command.REPORT
    for prefix, command in _TOKEN_PREFIXES:
        if token.startswith(prefix):
            return command
    raise UsageError(f"Unrecognized command: {token}")


class BrightnessController:
    """Read, step up or step down the brightness of one display.

    Collaborators are injectable so tests can run without HID hardware:
    ``find_path(vid, pid, interface)`` returns a path or None, and
    ``session_factory(descriptor)`` returns an unopened BrightnessSession.
    """

    def __init__(
        self,
        interface: int,
        descriptor: DeviceDescriptor = STUDIO_DISPLAY,
        steps: StepTable = STUDIO_DISPLAY_STEPS,
        find_path: Callable[[int, int, int], Optional[bytes]] = find_device_path,
        session_factory: Callable[[DeviceDescriptor], BrightnessSession] = BrightnessSession,
    ):
        if not steps.matches(descriptor):
            raise ValueError(f"{steps!r} does not span the range of {descriptor}")
        self.interface = interface
        self.descriptor = descriptor
        self.steps = steps
        self._find_path = find_path
        self._session_factory = session_factory

    def target_for(self, command: Command, current: int) -> Optional[int]:
        """Next step for *command* from *current*; None if none applies."""
        if command is Command.INCREASE:
            return self.steps.next(current)
        if command is Command.DECREASE:
            return self.steps.previous(current)
        return None

    def run(self, command: Command) -> Outcome:
        """Execute *command* against the display.

        Raises:
            DeviceNotFound: No interface matched during enumeration.
            DeviceUnavailable: The interface could not be opened.
            ReadFailed: The current brightness could not be read.
        """
        d = self.descriptor
        path = self._find_path(d.vendor_id, d.product_id, self.interface)
        if path is None:
            raise DeviceNotFound()

        with self._session_factory(d).open(path) as session:
            current = session.get_brightness()
            log.debug("Current brightness: %d", current)
            outcome = Outcome(command=command, current=current)
            if command is Command.REPORT:
                return outcome

            outcome.target = self.target_for(command, current)
            if outcome.at_boundary:
                log.info("Brightness %d already at the %s step", current,
                         'top' if command is Command.INCREASE else 'bottom')
                return outcome

            try:
                session.set_brightness(outcome.target)
            except WriteFailed as e:
                log.warning("%s (%d -> %d)", e, current, outcome.target)
                return outcome
            outcome.written = True
            log.info("Brightness %d -> %d", current, outcome.target)
            return outcome

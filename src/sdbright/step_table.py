"""
Brightness step table.

The display only accepts a fixed set of brightness codes.  Stepping moves
to the nearest tabulated value strictly above or below the current one,
so a current value between two entries (firmware drift, another panel
variant) still steps correctly without snapping.
"""

import bisect
from typing import Iterable, Iterator, Optional, Tuple

from .constants import STUDIO_DISPLAY_STEP_VALUES
from .core.models import DeviceDescriptor


class StepTable:
    """Immutable, strictly increasing sequence of 16-bit brightness codes."""

    __slots__ = ('_values',)

    def __init__(self, values: Iterable[int]):
        values = tuple(int(v) for v in values)
        if not values:
            raise ValueError("Step table must not be empty")
        for v in values:
            if not 0 <= v <= 0xFFFF:
                raise ValueError(f"Step value out of 16-bit range: {v}")
        for lo, hi in zip(values, values[1:]):
            if lo >= hi:
                raise ValueError(f"Step table not strictly increasing at {lo} -> {hi}")
        self._values: Tuple[int, ...] = values

    @property
    def values(self) -> Tuple[int, ...]:
        return self._values

    @property
    def minimum(self) -> int:
        return self._values[0]

    @property
    def maximum(self) -> int:
        return self._values[-1]

    def next(self, value: int) -> Optional[int]:
        """Smallest step strictly greater than *value*, or None at the top."""
        i = bisect.bisect_right(self._values, value)
        return self._values[i] if i < len(self._values) else None

    def previous(self, value: int) -> Optional[int]:
        """Largest step strictly smaller than *value*, or None at the bottom."""
        i = bisect.bisect_left(self._values, value)
        return self._values[i - 1] if i > 0 else None

    def matches(self, descriptor: DeviceDescriptor) -> bool:
        """True if the table spans exactly the descriptor's brightness range."""
        return (self.minimum == descriptor.min_brightness
                and self.maximum == descriptor.max_brightness)

    def __contains__(self, value: object) -> bool:
        return value in self._values

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"StepTable({self.minimum}..{self.maximum}, {len(self)} steps)"


STUDIO_DISPLAY_STEPS = StepTable(STUDIO_DISPLAY_STEP_VALUES)

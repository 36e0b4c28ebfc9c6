"""Windowed actions-per-minute accumulation."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from ..actions.constants import ACTIVITY_INTERVAL_MS

_MINUTE_MS = 60000


@dataclass
class ActivityWindow:
    """Raw action count for the open interval plus closed per-minute samples.

    The window never schedules itself; the caller closes an interval once per
    elapsed interval of game time.
    """

    current: int = 0
    samples: list[int] = field(default_factory=list)

    def record(self) -> None:
        self.current += 1

    def close(self, interval_ms: int = ACTIVITY_INTERVAL_MS) -> int:
        """Close the open interval and return its per-minute sample."""
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        sample = self.current * _MINUTE_MS // interval_ms
        self.samples.append(sample)
        self.current = 0
        return sample

    def rate(self) -> int | None:
        """Mean of all samples rounded half up, or None with no samples."""
        if not self.samples:
            return None
        return math.floor(sum(self.samples) / len(self.samples) + 0.5)

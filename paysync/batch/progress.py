import math
from collections.abc import Callable

ProgressCallback = Callable[[int], None]


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


class ProgressTracker:
    """Percentage of settled items, held below 100 until the batch drains."""

    def __init__(self, total: int, callback: ProgressCallback | None = None) -> None:
        self._total = total
        self._settled = 0
        self._percent = 0
        self._callback = callback

    @property
    def percent(self) -> int:
        return self._percent

    @property
    def settled(self) -> int:
        return self._settled

    @property
    def drained(self) -> bool:
        return self._settled >= self._total

    def settle(self) -> int:
        """Count one finished item (success or failure) and report."""
        self._settled += 1
        if self.drained:
            percent = 100
        else:
            percent = min(99, _round_half_up(self._settled / self._total * 100))
        self._report(max(self._percent, percent))
        return self._percent

    def finish_empty(self) -> int:
        """An empty batch is drained from the start."""
        self._report(100)
        return self._percent

    def _report(self, percent: int) -> None:
        self._percent = percent
        if self._callback is not None:
            self._callback(percent)

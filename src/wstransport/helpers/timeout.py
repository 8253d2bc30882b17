"""Timeout range policy."""

from dataclasses import dataclass
from datetime import timedelta

INFINITE_TIMEOUT = timedelta(milliseconds=-1)
MAX_WAIT = timedelta(milliseconds=2**31 - 1)


@dataclass(frozen=True)
class TimeoutPolicy:
    """
    Bounds applied to timeout-like durations.

    ``infinite`` is the sentinel that disables the timeout. ``timedelta.max``
    is also accepted as "never" and is exempt from the ``max_wait`` bound.
    """

    infinite: timedelta = INFINITE_TIMEOUT
    max_wait: timedelta = MAX_WAIT

    def is_negative(self, value: timedelta) -> bool:
        """True for durations below zero other than the infinite sentinel."""
        return value < timedelta(0) and value != self.infinite

    def is_too_large(self, value: timedelta) -> bool:
        """True for durations above max_wait other than timedelta.max."""
        return value > self.max_wait and value != timedelta.max

    @property
    def max_wait_ms(self) -> int:
        return self.max_wait // timedelta(milliseconds=1)


DEFAULT_TIMEOUT_POLICY = TimeoutPolicy()

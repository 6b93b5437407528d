"""
Backoff schedule for retries.

Delays come from an explicit list indexed by attempt number. Once the list
is exhausted the last delay is reused (constant backoff, no growth and no
jitter). An empty list means no wait at all.
"""

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class BackoffSchedule:
    """
    Maps a 1-indexed attempt number to a wait in seconds.

    Attributes:
        delays: Delay in seconds per attempt (possibly empty)

    Example:
        >>> schedule = BackoffSchedule.of([1.0, 3.0, 5.0])
        >>> [schedule.delay_for(a) for a in (1, 2, 3, 4, 5)]
        [1.0, 3.0, 5.0, 5.0, 5.0]
    """

    delays: tuple[float, ...] = ()

    def __post_init__(self) -> None:
        for delay in self.delays:
            if delay < 0:
                raise ValueError(f"retry delays must be >= 0, got {delay}")

    @classmethod
    def of(cls, delays: Sequence[float]) -> "BackoffSchedule":
        return cls(tuple(float(d) for d in delays))

    def delay_for(self, attempt: int) -> float:
        """
        Get the delay before the given retry attempt.

        Args:
            attempt: Retry attempt number (1-indexed)

        Returns:
            Delay in seconds (0.0 when no delays are configured)
        """
        if attempt < 1:
            raise ValueError(f"attempt must be >= 1, got {attempt}")
        if not self.delays:
            return 0.0
        if attempt - 1 < len(self.delays):
            return self.delays[attempt - 1]
        return self.delays[-1]

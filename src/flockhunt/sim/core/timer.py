from __future__ import annotations

from dataclasses import dataclass


@dataclass
class FlockUpdateTimer:
    """Gates the expensive flocking pass to once per `interval` seconds.

    Elapsed time accumulates across ticks. When it reaches the interval the
    timer fires for that tick and keeps only the remainder, so one tick fires
    at most once no matter how long it was.
    """

    interval: float
    elapsed: float = 0.0

    def tick(self, seconds: float) -> bool:
        self.elapsed += seconds
        if self.elapsed < self.interval:
            return False
        self.elapsed %= self.interval
        return True

    def reset(self) -> None:
        self.elapsed = 0.0

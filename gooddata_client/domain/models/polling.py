"""
Domain models for polling asynchronous server-side operations.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Optional


class PollTimeout:
    """Signal returned when a poll exhausts its budget. A value, not an error."""

    _instance: Optional["PollTimeout"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "POLL_TIMEOUT"


POLL_TIMEOUT = PollTimeout()


@dataclass
class PollTask:
    """Observation producer, completion predicate and the iterations left to spend."""
    producer: Callable[[], Any]
    predicate: Callable[[Any], bool]
    remaining: int
    attempts: int = 0
    last_observation: Any = None

    @property
    def exhausted(self) -> bool:
        return self.remaining <= 0

    def observe(self) -> bool:
        """Spend one iteration: obtain an observation and test it."""
        self.remaining -= 1
        self.attempts += 1
        self.last_observation = self.producer()
        return bool(self.predicate(self.last_observation))

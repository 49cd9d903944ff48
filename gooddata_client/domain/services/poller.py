"""
Poller - Domain service driving an asynchronous server-side operation to completion.

Observations are taken at a constant interval until the predicate holds or the
iteration budget runs out. Running out is reported with ``POLL_TIMEOUT``; whether
that is fatal is up to the caller.
"""

from __future__ import annotations
import logging
import time
from typing import Any, Callable, Optional, Union

from ..models.polling import POLL_TIMEOUT, PollTask, PollTimeout

# About one hour at one observation per second
DEFAULT_BUDGET = 3600
DEFAULT_INTERVAL = 1.0


class Poller:
    """Constant-interval, fixed-budget blocking poll loop."""

    def __init__(
        self,
        interval: float = DEFAULT_INTERVAL,
        budget: int = DEFAULT_BUDGET,
        sleep: Callable[[float], None] = time.sleep,
        logger: Optional[logging.Logger] = None
    ):
        self._interval = interval
        self._budget = budget
        self._sleep = sleep
        self._logger = logger or logging.getLogger(__name__)

    @property
    def budget(self) -> int:
        return self._budget

    def poll(
        self,
        producer: Callable[[], Any],
        predicate: Callable[[Any], bool],
        budget: Optional[int] = None,
    ) -> Union[Any, PollTimeout]:
        """Call ``producer`` until ``predicate`` accepts its result.

        Returns the accepted observation, or ``POLL_TIMEOUT`` once ``budget``
        observations were rejected. Exceptions from ``producer`` propagate.
        """
        task = PollTask(
            producer=producer,
            predicate=predicate,
            remaining=self._budget if budget is None else budget,
        )
        return self.run(task)

    def run(self, task: PollTask) -> Union[Any, PollTimeout]:
        """Drive an existing ``PollTask`` until it completes or is exhausted."""
        while not task.exhausted:
            if task.observe():
                self._logger.debug(f"Poll finished after {task.attempts} observation(s)")
                return task.last_observation
            self._logger.debug(f"Poll observation {task.attempts} not final, {task.remaining} left")
            if not task.exhausted:
                self._sleep(self._interval)

        self._logger.warning(f"Poll budget exhausted after {task.attempts} observation(s)")
        return POLL_TIMEOUT

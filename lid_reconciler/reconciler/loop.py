"""
Lid Monitor Loop — the always-on half of the reconciler.

Polls the lid sensor at a fixed interval and reconciles only on transition
edges:

  read -> (known and different from previous?) -> reconcile -> previous = current

A state has to persist across a full poll interval to be observed, which is
all the debouncing the loop needs. The previous state is threaded through
each iteration rather than held globally, so the loop can be driven one
reading at a time.
"""

import asyncio
import logging
from collections import deque
from datetime import datetime
from typing import Deque, List, Optional, Tuple

from lid_reconciler.models.execution import CycleOutcome
from lid_reconciler.models.lid import LidState, PollCycle
from lid_reconciler.models.reconciler import ReconcilerConfig
from lid_reconciler.reconciler.reconcile import LidReconciler
from lid_reconciler.sensors.lid import LidStateReader

logger = logging.getLogger(__name__)


class LidMonitorLoop:
    """
    The continuous monitor.

    States:
      OPEN <-> CLOSED (UNKNOWN is a read failure, not a state)
    The initial state is whatever the first read returns; no action fires
    for it.
    """

    def __init__(
        self,
        reader: LidStateReader,
        reconciler: LidReconciler,
        config: Optional[ReconcilerConfig] = None,
    ):
        self.reader = reader
        self.reconciler = reconciler
        self.config = config or ReconcilerConfig()

        self._history: Deque[CycleOutcome] = deque(maxlen=self.config.history_size)
        self._running = False

    @property
    def status(self) -> str:
        return "running" if self._running else "stopped"

    @property
    def history(self) -> List[CycleOutcome]:
        """Outcomes of the most recent transitions, oldest first."""
        return list(self._history)

    def start(self) -> LidState:
        """Take the baseline reading. Never acts."""
        initial = self.reader.read()
        logger.info("Lid monitor started, initial state: %s", initial.value)
        return initial

    def observe(
        self,
        previous: LidState,
        current: LidState,
        current_time: Optional[datetime] = None,
    ) -> Tuple[LidState, Optional[CycleOutcome]]:
        """
        Apply one reading. Returns the state to compare the next reading
        against and the outcome, if a transition fired.
        """
        cycle = PollCycle(
            previous=previous,
            current=current,
            observed_at=current_time or datetime.now(),
        )

        if not cycle.is_transition:
            if previous == LidState.UNKNOWN and current.is_known:
                logger.info("Lid state now readable: %s", current.value)
            return cycle.next_previous(), None

        logger.info("Lid state changed from %s to %s", previous.value, current.value)
        outcome = self.reconciler.reconcile(current)
        self._history.append(outcome)
        return cycle.next_previous(), outcome

    def poll_once(
        self, previous: LidState, current_time: Optional[datetime] = None
    ) -> Tuple[LidState, Optional[CycleOutcome]]:
        """Read the sensor once and apply the reading."""
        return self.observe(previous, self.reader.read(), current_time)

    async def run_async(self, stop_event: Optional[asyncio.Event] = None) -> None:
        """Poll until the stop event is set."""
        self._running = True
        if stop_event is None:
            stop_event = asyncio.Event()

        previous = self.start()
        try:
            while not stop_event.is_set():
                previous, _ = self.poll_once(previous)
                try:
                    await asyncio.wait_for(
                        stop_event.wait(),
                        timeout=self.config.poll_interval_seconds,
                    )
                except asyncio.TimeoutError:
                    continue
        finally:
            self._running = False
            logger.info("Lid monitor stopped")

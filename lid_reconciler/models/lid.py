"""Lid State — the normalised reading of the physical lid sensor."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel


class LidState(str, Enum):
    OPEN = "open"
    CLOSED = "closed"
    UNKNOWN = "unknown"     # Sensor unreadable; never acted upon

    @property
    def is_known(self) -> bool:
        return self is not LidState.UNKNOWN


class PollCycle(BaseModel):
    """
    One pair of consecutive lid observations.

    An UNKNOWN previous state means nothing has been observed yet, so the
    first known reading only establishes the baseline.
    """

    previous: LidState
    current: LidState
    observed_at: datetime

    @property
    def is_transition(self) -> bool:
        return (
            self.previous.is_known
            and self.current.is_known
            and self.current != self.previous
        )

    def next_previous(self) -> LidState:
        """The state to compare the next reading against."""
        if self.current.is_known:
            return self.current
        return self.previous

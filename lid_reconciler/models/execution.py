"""Action Result — outcome reported by the Action Executor."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from lid_reconciler.models.decision import Decision
from lid_reconciler.models.lid import LidState
from lid_reconciler.models.topology import Topology


class ActionResult(BaseModel):
    """Outcome of applying one decision."""

    decision: Decision
    success: bool
    commands: List[str] = []                # Human-readable commands issued
    error: Optional[str] = None
    executed_at: datetime
    duration_seconds: float


class CycleOutcome(BaseModel):
    """Everything that happened while reconciling one lid state."""

    lid: LidState
    topology: Optional[Topology] = None
    decision: Optional[Decision] = None
    result: Optional[ActionResult] = None
    skipped_reason: Optional[str] = None    # Set when no action was attempted
    completed_at: datetime

    @property
    def acted(self) -> bool:
        return self.result is not None

    @property
    def success(self) -> bool:
        return self.result is not None and self.result.success

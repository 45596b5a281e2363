"""Lid reconciler data models."""

from lid_reconciler.models.decision import Decision, DecisionKind
from lid_reconciler.models.execution import ActionResult, CycleOutcome
from lid_reconciler.models.lid import LidState, PollCycle
from lid_reconciler.models.reconciler import ReconcilerConfig
from lid_reconciler.models.topology import (
    DisplayOutput,
    OutputMode,
    OutputRole,
    Topology,
)

__all__ = [
    "ActionResult",
    "CycleOutcome",
    "Decision",
    "DecisionKind",
    "DisplayOutput",
    "LidState",
    "OutputMode",
    "OutputRole",
    "PollCycle",
    "ReconcilerConfig",
    "Topology",
]

"""
Reconciliation Policy — maps (lid state, topology) to a Decision.

    lid     external   decision
    closed  yes        disable-built-in
    closed  no         hibernate
    open    yes        enable-built-in-dual
    open    no         enable-built-in-solo

Closing with no alternate display hibernates rather than leaving the machine
dark. Opening always restores the same fixed mode regardless of history, so
repeated opens issue identical commands.

Behavioral Contract:
- Pure: no I/O, no state
- Total over {OPEN, CLOSED} x {external present, absent}
- Raises PolicyError for UNKNOWN
"""

from typing import Callable, Dict, Tuple

from lid_reconciler.errors import PolicyError
from lid_reconciler.models.decision import Decision, DecisionKind
from lid_reconciler.models.lid import LidState
from lid_reconciler.models.topology import OutputMode, Topology

# (lid state, external present) -> decision kind
DECISION_TABLE: Dict[Tuple[LidState, bool], DecisionKind] = {
    (LidState.CLOSED, True): DecisionKind.DISABLE_BUILTIN,
    (LidState.CLOSED, False): DecisionKind.HIBERNATE,
    (LidState.OPEN, True): DecisionKind.ENABLE_BUILTIN_DUAL,
    (LidState.OPEN, False): DecisionKind.ENABLE_BUILTIN_SOLO,
}


def _disable_builtin(topology: Topology, mode: OutputMode) -> Decision:
    return Decision(
        kind=DecisionKind.DISABLE_BUILTIN,
        builtin=topology.builtin.name,
        external=topology.external.name,
    )


def _hibernate(topology: Topology, mode: OutputMode) -> Decision:
    return Decision(kind=DecisionKind.HIBERNATE, builtin=topology.builtin.name)


def _enable_dual(topology: Topology, mode: OutputMode) -> Decision:
    return Decision(
        kind=DecisionKind.ENABLE_BUILTIN_DUAL,
        builtin=topology.builtin.name,
        external=topology.external.name,
        mode=mode,
    )


def _enable_solo(topology: Topology, mode: OutputMode) -> Decision:
    return Decision(
        kind=DecisionKind.ENABLE_BUILTIN_SOLO,
        builtin=topology.builtin.name,
        mode=mode,
    )


_BUILDERS: Dict[DecisionKind, Callable[[Topology, OutputMode], Decision]] = {
    DecisionKind.DISABLE_BUILTIN: _disable_builtin,
    DecisionKind.HIBERNATE: _hibernate,
    DecisionKind.ENABLE_BUILTIN_DUAL: _enable_dual,
    DecisionKind.ENABLE_BUILTIN_SOLO: _enable_solo,
}


def decide(lid: LidState, topology: Topology, mode: OutputMode) -> Decision:
    """Resolve the action for a known lid state against the current topology."""
    if not lid.is_known:
        raise PolicyError("Cannot decide on an unknown lid state")

    kind = DECISION_TABLE[(lid, topology.has_external)]
    return _BUILDERS[kind](topology, mode)

"""
Reconcile one lid state against the live display topology.

Shared by both front ends: the one-shot switch and the continuous monitor.
  detect topology -> decide -> execute -> CycleOutcome
"""

import logging
from datetime import datetime

from lid_reconciler.errors import DetectionError
from lid_reconciler.execution.executor import ActionExecutor
from lid_reconciler.models.execution import CycleOutcome
from lid_reconciler.models.lid import LidState
from lid_reconciler.models.topology import OutputMode
from lid_reconciler.policy.engine import decide
from lid_reconciler.topology.detector import TopologyDetector

logger = logging.getLogger(__name__)


class LidReconciler:
    """Turns a known lid state into at most one applied action."""

    def __init__(
        self,
        detector: TopologyDetector,
        executor: ActionExecutor,
        mode: OutputMode,
    ):
        self.detector = detector
        self.executor = executor
        self.mode = mode

    def reconcile(self, lid: LidState) -> CycleOutcome:
        if not lid.is_known:
            logger.warning("Lid state unknown, no action taken")
            return CycleOutcome(
                lid=lid,
                skipped_reason="lid state unknown",
                completed_at=datetime.now(),
            )

        try:
            topology = self.detector.detect()
        except DetectionError as e:
            logger.error("Lid %s: topology detection failed, skipping action: %s", lid.value, e)
            return CycleOutcome(
                lid=lid,
                skipped_reason=f"detection failed: {e}",
                completed_at=datetime.now(),
            )

        if topology.external:
            logger.info("Lid %s: external output detected: %s", lid.value, topology.external.name)
        else:
            logger.info("Lid %s: no external output detected", lid.value)

        decision = decide(lid, topology, self.mode)
        logger.info("Decision: %s (%s)", decision.describe(), topology.describe())

        result = self.executor.execute(decision)
        return CycleOutcome(
            lid=lid,
            topology=topology,
            decision=decision,
            result=result,
            completed_at=datetime.now(),
        )

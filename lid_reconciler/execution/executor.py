"""
Action Executor — applies Decisions through the display and power controllers.

Behavioral Contract:
- One decision, one or two controller calls, one ActionResult
- Controller failures are logged and reported, never raised
- No retries: the next lid transition is the next opportunity
- Hibernation is requested and not awaited
"""

import logging
import time
from datetime import datetime
from typing import Callable, Dict, List

from lid_reconciler.controllers.base import DisplayController, PowerController
from lid_reconciler.errors import ControllerError
from lid_reconciler.models.decision import Decision, DecisionKind
from lid_reconciler.models.execution import ActionResult

logger = logging.getLogger(__name__)

Handler = Callable[[Decision], List[str]]


class ActionExecutor:
    """Dispatches each decision kind to its registered handler."""

    def __init__(self, display: DisplayController, power: PowerController):
        self.display = display
        self.power = power
        self._handlers: Dict[DecisionKind, Handler] = {}
        self._register_default_handlers()

    def _register_default_handlers(self) -> None:
        self._handlers[DecisionKind.DISABLE_BUILTIN] = self._disable_builtin
        self._handlers[DecisionKind.HIBERNATE] = self._hibernate
        self._handlers[DecisionKind.ENABLE_BUILTIN_DUAL] = self._enable_builtin
        self._handlers[DecisionKind.ENABLE_BUILTIN_SOLO] = self._enable_builtin

    def register_handler(self, kind: DecisionKind, handler: Handler) -> None:
        """Replace the handler for a decision kind."""
        self._handlers[kind] = handler

    def execute(self, decision: Decision) -> ActionResult:
        handler = self._handlers.get(decision.kind)
        start = time.monotonic()
        commands: List[str] = []
        error = None

        if handler is None:
            error = f"No handler registered for decision: {decision.kind.value}"
        else:
            try:
                commands = handler(decision)
            except ControllerError as e:
                error = str(e)

        elapsed = time.monotonic() - start
        result = ActionResult(
            decision=decision,
            success=error is None,
            commands=commands,
            error=error,
            executed_at=datetime.now(),
            duration_seconds=round(elapsed, 3),
        )

        if result.success:
            logger.info("Action %s succeeded: %s", decision.kind.value, "; ".join(commands))
        else:
            logger.error(
                "Action %s failed (output=%s, requested=%s): %s",
                decision.kind.value,
                decision.builtin,
                _requested_state(decision),
                error,
            )
        return result

    # --- Handlers ---

    def _disable_builtin(self, decision: Decision) -> List[str]:
        logger.info(
            "Disabling %s, %s remains as primary", decision.builtin, decision.external
        )
        return [self.display.disable(decision.builtin)]

    def _enable_builtin(self, decision: Decision) -> List[str]:
        if decision.mode is None:
            raise ControllerError(f"No mode given to enable {decision.builtin}")
        if decision.external:
            logger.info(
                "Restoring dual output layout: %s alongside %s",
                decision.builtin,
                decision.external,
            )
        else:
            logger.info("Enabling %s as the only output", decision.builtin)
        return [self.display.enable(decision.builtin, decision.mode)]

    def _hibernate(self, decision: Decision) -> List[str]:
        logger.info("No external output, requesting hibernation")
        return [self.power.hibernate()]


def _requested_state(decision: Decision) -> str:
    if decision.kind == DecisionKind.DISABLE_BUILTIN:
        return "disabled"
    if decision.kind == DecisionKind.HIBERNATE:
        return "hibernate"
    return decision.mode.to_mode_string() if decision.mode else "enabled"

"""
Controller capabilities — the only way the reconciler touches the compositor
or the power manager.

Production implementations shell out to the real command-line tools; the
in-memory implementations record calls so the reconciler can be exercised
without a compositor or hardware.
"""

from typing import List, Protocol

from lid_reconciler.models.topology import DisplayOutput, OutputMode


class DisplayController(Protocol):
    """Query and reconfigure compositor outputs."""

    def list_outputs(self) -> List[DisplayOutput]:
        """Outputs, disabled ones included, in the compositor's listing order."""
        ...

    def disable(self, name: str) -> str: ...

    def enable(self, name: str, mode: OutputMode) -> str: ...


class PowerController(Protocol):
    """Request system power-state transitions."""

    def hibernate(self) -> str: ...

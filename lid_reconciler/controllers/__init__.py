"""Display and power controllers."""

from lid_reconciler.controllers.base import DisplayController, PowerController
from lid_reconciler.controllers.hyprland import HyprctlDisplayController
from lid_reconciler.controllers.memory import (
    InMemoryDisplayController,
    RecordingPowerController,
)
from lid_reconciler.controllers.power import SystemctlPowerController
from lid_reconciler.controllers.runner import CommandRunner

__all__ = [
    "CommandRunner",
    "DisplayController",
    "HyprctlDisplayController",
    "InMemoryDisplayController",
    "PowerController",
    "RecordingPowerController",
    "SystemctlPowerController",
]

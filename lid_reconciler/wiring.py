"""Builds the reconciler components from a ReconcilerConfig."""

from dataclasses import dataclass
from typing import Optional

from lid_reconciler.controllers.base import DisplayController, PowerController
from lid_reconciler.controllers.hyprland import HyprctlDisplayController
from lid_reconciler.controllers.power import SystemctlPowerController
from lid_reconciler.controllers.runner import CommandRunner
from lid_reconciler.execution.executor import ActionExecutor
from lid_reconciler.models.reconciler import ReconcilerConfig
from lid_reconciler.reconciler.loop import LidMonitorLoop
from lid_reconciler.reconciler.reconcile import LidReconciler
from lid_reconciler.sensors.lid import LidStateReader
from lid_reconciler.topology.detector import TopologyDetector


@dataclass
class Components:
    config: ReconcilerConfig
    reader: LidStateReader
    detector: TopologyDetector
    reconciler: LidReconciler


def build_components(
    config: ReconcilerConfig,
    display: Optional[DisplayController] = None,
    power: Optional[PowerController] = None,
    dry_run: bool = False,
) -> Components:
    """Wire the reader, detector, executor and reconciler together."""
    runner = CommandRunner(timeout_seconds=config.command_timeout_seconds, dry_run=dry_run)
    if display is None:
        display = HyprctlDisplayController(config.hyprctl_bin, runner)
    if power is None:
        power = SystemctlPowerController(config.systemctl_bin, runner)

    detector = TopologyDetector(display, config.builtin_prefixes, config.external_prefixes)
    executor = ActionExecutor(display, power)
    return Components(
        config=config,
        reader=LidStateReader(config.lid_state_path, config.lid_state_glob),
        detector=detector,
        reconciler=LidReconciler(detector, executor, config.output_mode),
    )


def build_monitor(components: Components) -> LidMonitorLoop:
    return LidMonitorLoop(components.reader, components.reconciler, components.config)

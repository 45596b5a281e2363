"""Lid reconciliation: the shared reconcile routine and the monitor loop."""

from lid_reconciler.reconciler.loop import LidMonitorLoop
from lid_reconciler.reconciler.reconcile import LidReconciler

__all__ = ["LidMonitorLoop", "LidReconciler"]

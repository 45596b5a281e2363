"""Reconciliation policy."""

from lid_reconciler.policy.engine import DECISION_TABLE, decide

__all__ = ["DECISION_TABLE", "decide"]

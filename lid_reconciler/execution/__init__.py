"""Action execution."""

from lid_reconciler.execution.executor import ActionExecutor

__all__ = ["ActionExecutor"]

"""Lid reconciler: keeps compositor outputs in step with the laptop lid."""

__version__ = "0.1.0"

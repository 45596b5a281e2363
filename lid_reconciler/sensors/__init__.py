"""Hardware state readers."""

from lid_reconciler.sensors.lid import LidStateReader, parse_lid_text

__all__ = ["LidStateReader", "parse_lid_text"]

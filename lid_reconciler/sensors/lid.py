"""
Lid State Reader.

Reads the ACPI lid button state. A specific device path is tried first,
then every device matched by a wildcard. An unreadable source yields
UNKNOWN instead of an error so the daemon survives suspend/resume races.
"""

import glob
import logging
from pathlib import Path
from typing import List, Optional

from lid_reconciler.models.lid import LidState

logger = logging.getLogger(__name__)

DEFAULT_LID_PATH = "/proc/acpi/button/lid/LID0/state"
DEFAULT_LID_GLOB = "/proc/acpi/button/lid/*/state"


def parse_lid_text(text: str) -> LidState:
    """ACPI reports e.g. "state:      closed"; anything without "closed" is open."""
    if "closed" in text.lower():
        return LidState.CLOSED
    return LidState.OPEN


def _safe_read_text(path: Path) -> Optional[str]:
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError:
        return None


class LidStateReader:
    """Reads the current lid position. Never raises."""

    def __init__(self, path: str = DEFAULT_LID_PATH, pattern: str = DEFAULT_LID_GLOB):
        self.path = path
        self.pattern = pattern

    def sources(self) -> List[str]:
        """Candidate source files that currently exist, in reading order."""
        found = []
        if Path(self.path).is_file():
            found.append(self.path)
        for candidate in sorted(glob.glob(self.pattern)):
            if candidate not in found:
                found.append(candidate)
        return found

    def read(self) -> LidState:
        """
        The specific device decides on its own when readable; otherwise any
        wildcard device reporting closed makes the lid closed.
        """
        readings = []
        for candidate in self.sources():
            text = _safe_read_text(Path(candidate))
            if text is None:
                continue
            if candidate == self.path:
                return parse_lid_text(text)
            readings.append(parse_lid_text(text))

        if not readings:
            logger.debug("No readable lid state at %s or %s", self.path, self.pattern)
            return LidState.UNKNOWN
        if LidState.CLOSED in readings:
            return LidState.CLOSED
        return LidState.OPEN

"""Subprocess helper shared by the command-line controllers."""

import logging
import shlex
import subprocess
from typing import List, Optional

from lid_reconciler.errors import ControllerError

logger = logging.getLogger(__name__)


def format_command(cmd: List[str]) -> str:
    return " ".join(shlex.quote(c) for c in cmd)


class CommandRunner:
    """
    Runs external commands with a bounded timeout.

    Every failure mode (missing binary, timeout, non-zero exit) surfaces as a
    ControllerError. In dry-run mode, commands that change state are logged
    instead of executed; read-only queries still run.
    """

    def __init__(self, timeout_seconds: Optional[float] = 10.0, dry_run: bool = False):
        self.timeout_seconds = timeout_seconds
        self.dry_run = dry_run

    def run(self, cmd: List[str], mutating: bool = True) -> str:
        """Run a command to completion and return its stdout."""
        rendered = format_command(cmd)
        if self.dry_run and mutating:
            logger.info("[dry-run] %s", rendered)
            return ""

        logger.debug("Running: %s", rendered)
        try:
            proc = subprocess.run(
                cmd,
                check=False,
                capture_output=True,
                text=True,
                timeout=self.timeout_seconds,
            )
        except subprocess.TimeoutExpired:
            raise ControllerError(
                f"{rendered}: timed out after {self.timeout_seconds}s"
            )
        except OSError as e:
            raise ControllerError(f"{rendered}: {type(e).__name__}: {e}")

        if proc.returncode != 0:
            msg = (proc.stderr or proc.stdout or "").strip() or f"rc={proc.returncode}"
            raise ControllerError(f"{rendered}: {msg}")
        return proc.stdout

    def spawn(self, cmd: List[str]) -> None:
        """Start a command without waiting for it to finish."""
        rendered = format_command(cmd)
        if self.dry_run:
            logger.info("[dry-run] %s", rendered)
            return

        try:
            subprocess.Popen(
                cmd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as e:
            raise ControllerError(f"{rendered}: {type(e).__name__}: {e}")

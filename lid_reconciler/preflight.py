"""Startup checks. A failure here is the only way the daemon exits non-zero."""

import logging
import os
import shutil
from typing import Mapping, Optional

from lid_reconciler.errors import PreflightError
from lid_reconciler.models.reconciler import ReconcilerConfig

logger = logging.getLogger(__name__)


def run_preflight(
    config: ReconcilerConfig,
    environ: Optional[Mapping[str, str]] = None,
) -> None:
    """Raise PreflightError if the compositor cannot be controlled at all."""
    env = os.environ if environ is None else environ

    if shutil.which(config.hyprctl_bin) is None:
        raise PreflightError(f"{config.hyprctl_bin} not found on PATH; is Hyprland installed?")

    session = env.get("XDG_SESSION_TYPE", "")
    if session != "wayland":
        logger.warning("XDG_SESSION_TYPE is %r, expected 'wayland'", session or "unset")
    if not env.get("HYPRLAND_INSTANCE_SIGNATURE"):
        logger.warning("HYPRLAND_INSTANCE_SIGNATURE is unset; hyprctl may not reach the compositor")

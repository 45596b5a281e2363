"""Hyprland display controller, driven through hyprctl."""

from typing import List, Optional

from lid_reconciler.controllers.runner import CommandRunner, format_command
from lid_reconciler.models.topology import DisplayOutput, OutputMode
from lid_reconciler.topology.parser import parse_output_listing


class HyprctlDisplayController:
    """
    Lists outputs with `hyprctl monitors all` (disabled outputs included) and
    reconfigures them with `hyprctl keyword monitor ...`.
    """

    def __init__(self, hyprctl_bin: str = "hyprctl", runner: Optional[CommandRunner] = None):
        self.hyprctl_bin = hyprctl_bin
        self.runner = runner or CommandRunner()

    def list_command(self) -> List[str]:
        return [self.hyprctl_bin, "monitors", "all"]

    def disable_command(self, name: str) -> List[str]:
        return [self.hyprctl_bin, "keyword", "monitor", f"{name},disable"]

    def enable_command(self, name: str, mode: OutputMode) -> List[str]:
        return [
            self.hyprctl_bin,
            "keyword",
            "monitor",
            f"{name},{mode.to_mode_string()}",
        ]

    def list_outputs(self) -> List[DisplayOutput]:
        listing = self.runner.run(self.list_command(), mutating=False)
        return parse_output_listing(listing)

    def disable(self, name: str) -> str:
        cmd = self.disable_command(name)
        self.runner.run(cmd)
        return format_command(cmd)

    def enable(self, name: str, mode: OutputMode) -> str:
        cmd = self.enable_command(name, mode)
        self.runner.run(cmd)
        return format_command(cmd)

"""systemd power controller."""

from typing import List, Optional

from lid_reconciler.controllers.runner import CommandRunner, format_command


class SystemctlPowerController:
    """Requests hibernation via `systemctl hibernate`; the request is not awaited."""

    def __init__(self, systemctl_bin: str = "systemctl", runner: Optional[CommandRunner] = None):
        self.systemctl_bin = systemctl_bin
        self.runner = runner or CommandRunner()

    def hibernate_command(self) -> List[str]:
        return [self.systemctl_bin, "hibernate"]

    def hibernate(self) -> str:
        cmd = self.hibernate_command()
        self.runner.spawn(cmd)
        return format_command(cmd)

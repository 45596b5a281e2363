"""In-memory controllers that record every call instead of touching hardware."""

from typing import Dict, List, Optional, Set, Tuple

from lid_reconciler.errors import ControllerError
from lid_reconciler.models.topology import DisplayOutput, OutputMode


class InMemoryDisplayController:
    """
    A fake compositor. Tracks which outputs are enabled and records each
    command as the string hyprctl would have received. Disabled outputs stay
    in the listing, as they do with `hyprctl monitors all`.
    """

    def __init__(self, outputs: Optional[List[str]] = None):
        self.outputs: List[str] = list(outputs or [])
        self.enabled: Dict[str, Optional[str]] = {name: None for name in self.outputs}
        self.disabled: Set[str] = set()
        self.calls: List[Tuple[str, str]] = []
        self.fail_on: set = set()           # Operation names that should fail
        self.fail_listing = False

    def list_outputs(self) -> List[DisplayOutput]:
        if self.fail_listing:
            raise ControllerError("monitors: compositor not reachable")
        return [
            DisplayOutput(name=name, enabled=name not in self.disabled)
            for name in self.outputs
        ]

    def disable(self, name: str) -> str:
        command = f"{name},disable"
        self.calls.append(("disable", command))
        if "disable" in self.fail_on:
            raise ControllerError(f"keyword monitor {command}: rejected")
        self.enabled.pop(name, None)
        self.disabled.add(name)
        return command

    def enable(self, name: str, mode: OutputMode) -> str:
        command = f"{name},{mode.to_mode_string()}"
        self.calls.append(("enable", command))
        if "enable" in self.fail_on:
            raise ControllerError(f"keyword monitor {command}: rejected")
        self.enabled[name] = mode.to_mode_string()
        self.disabled.discard(name)
        return command


class RecordingPowerController:
    """A fake power manager that counts hibernate requests."""

    def __init__(self, fail: bool = False):
        self.hibernate_requests = 0
        self.fail = fail

    def hibernate(self) -> str:
        self.hibernate_requests += 1
        if self.fail:
            raise ControllerError("hibernate: not permitted")
        return "hibernate"

"""Reconciler configuration."""

from typing import List

from pydantic import BaseModel, Field, field_validator

from lid_reconciler.models.topology import OutputMode


class ReconcilerConfig(BaseModel):
    """Configuration for the lid reconciler and its front ends."""

    poll_interval_seconds: float = Field(gt=0, default=1.0)
    lid_state_path: str = "/proc/acpi/button/lid/LID0/state"
    lid_state_glob: str = "/proc/acpi/button/lid/*/state"
    builtin_prefixes: List[str] = ["eDP"]
    external_prefixes: List[str] = ["DP", "HDMI", "USB-C"]
    builtin_mode: str = "2880x1920@120,0x0,2"
    hyprctl_bin: str = "hyprctl"
    systemctl_bin: str = "systemctl"
    command_timeout_seconds: float = Field(gt=0, default=10.0)
    log_file: str = "/tmp/hypr-lid-monitor.log"
    history_size: int = Field(ge=1, default=50)

    @field_validator("builtin_mode")
    @classmethod
    def _check_mode(cls, value: str) -> str:
        try:
            OutputMode.parse(value)
        except ValueError as e:
            raise ValueError(f"invalid builtin_mode {value!r}: {e}") from None
        return value

    @field_validator("builtin_prefixes", "external_prefixes")
    @classmethod
    def _check_prefixes(cls, value: List[str]) -> List[str]:
        if not value or any(not p for p in value):
            raise ValueError("prefix lists must contain non-empty strings")
        return value

    @property
    def output_mode(self) -> OutputMode:
        return OutputMode.parse(self.builtin_mode)

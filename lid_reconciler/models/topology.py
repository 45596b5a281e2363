"""Display Topology — classified compositor outputs."""

import re
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

_MODE_RE = re.compile(
    r"^\s*(\d+)x(\d+)@(\d+(?:\.\d+)?)\s*,\s*(-?\d+)x(-?\d+)\s*,\s*(\d+(?:\.\d+)?)\s*$"
)


class OutputRole(str, Enum):
    BUILTIN = "builtin"
    EXTERNAL = "external"
    UNCLASSIFIED = "unclassified"


class DisplayOutput(BaseModel):
    """A single output as listed by the compositor."""

    name: str                               # e.g., "eDP-1", "HDMI-A-1"
    role: OutputRole = OutputRole.UNCLASSIFIED
    enabled: bool = True                    # False when listed as "disabled: true"


class Topology(BaseModel):
    """The current built-in/external split. Never cached across polls."""

    builtin: DisplayOutput
    external: Optional[DisplayOutput] = None
    outputs: List[DisplayOutput] = []       # Everything listed, in listing order

    @property
    def has_external(self) -> bool:
        return self.external is not None

    def describe(self) -> str:
        external = self.external.name if self.external else "none"
        return f"builtin={self.builtin.name} external={external}"


def _fmt_number(value: float) -> str:
    # Full precision: hyprctl must receive exactly the configured value.
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


class OutputMode(BaseModel):
    """Fixed geometry applied to the built-in panel: WxH@Hz,XxY,SCALE."""

    width: int = Field(gt=0)
    height: int = Field(gt=0)
    refresh_hz: float = Field(gt=0)
    x: int = 0
    y: int = 0
    scale: float = Field(gt=0, default=1.0)

    @classmethod
    def parse(cls, text: str) -> "OutputMode":
        """Parse a mode string such as "2880x1920@120,0x0,2"."""
        match = _MODE_RE.match(text)
        if not match:
            raise ValueError(f"Invalid output mode string: {text!r}")
        width, height, refresh, x, y, scale = match.groups()
        return cls(
            width=int(width),
            height=int(height),
            refresh_hz=float(refresh),
            x=int(x),
            y=int(y),
            scale=float(scale),
        )

    def to_mode_string(self) -> str:
        return (
            f"{self.width}x{self.height}@{_fmt_number(self.refresh_hz)},"
            f"{self.x}x{self.y},{_fmt_number(self.scale)}"
        )

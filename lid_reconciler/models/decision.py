"""Decision — what the Reconciliation Policy asks the executor to do."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel

from lid_reconciler.models.topology import OutputMode


class DecisionKind(str, Enum):
    DISABLE_BUILTIN = "disable-built-in"
    ENABLE_BUILTIN_DUAL = "enable-built-in-dual"
    ENABLE_BUILTIN_SOLO = "enable-built-in-solo"
    HIBERNATE = "hibernate"


class Decision(BaseModel):
    """A resolved action, carrying the output names it applies to."""

    kind: DecisionKind
    builtin: str
    external: Optional[str] = None
    mode: Optional[OutputMode] = None       # Set for the enable kinds only

    def describe(self) -> str:
        parts = [self.kind.value, f"builtin={self.builtin}"]
        if self.external:
            parts.append(f"external={self.external}")
        if self.mode:
            parts.append(f"mode={self.mode.to_mode_string()}")
        return " ".join(parts)

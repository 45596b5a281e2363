"""
Display Topology Detector.

Resolves the built-in panel and the primary external output from the
compositor's live output list. Nothing is cached: external displays are
hot-pluggable, so every call queries the compositor again.

Behavioral Contract:
- The first built-in match is the built-in output
- The first enabled external match in listing order is the external output
- No built-in match raises DetectionError
- No external match is a normal outcome (external=None)
"""

import logging
from typing import List, Optional, Sequence, Union

from lid_reconciler.controllers.base import DisplayController
from lid_reconciler.errors import ControllerError, DetectionError
from lid_reconciler.models.topology import DisplayOutput, OutputRole, Topology
from lid_reconciler.topology.parser import classify_output

logger = logging.getLogger(__name__)


def build_topology(
    listed: Sequence[Union[str, DisplayOutput]],
    builtin_prefixes: Sequence[str] = ("eDP",),
    external_prefixes: Sequence[str] = ("DP", "HDMI", "USB-C"),
) -> Topology:
    """
    Classify an ordered output listing into a Topology. Plain names count
    as enabled outputs.
    """
    outputs: List[DisplayOutput] = []
    for item in listed:
        if isinstance(item, str):
            item = DisplayOutput(name=item)
        outputs.append(
            classify_output(item.name, builtin_prefixes, external_prefixes, item.enabled)
        )

    # A disabled built-in is still the built-in: this daemon disabled it.
    builtin: Optional[DisplayOutput] = next(
        (o for o in outputs if o.role == OutputRole.BUILTIN), None
    )
    if builtin is None:
        raise DetectionError(
            f"No built-in output matching {list(builtin_prefixes)} "
            f"among {[o.name for o in outputs] or 'no outputs'}"
        )

    external = next(
        (
            o for o in outputs
            if o.role == OutputRole.EXTERNAL and o.enabled and o.name != builtin.name
        ),
        None,
    )
    return Topology(builtin=builtin, external=external, outputs=outputs)


class TopologyDetector:
    """Queries a DisplayController and classifies what it reports."""

    def __init__(
        self,
        display: DisplayController,
        builtin_prefixes: Sequence[str] = ("eDP",),
        external_prefixes: Sequence[str] = ("DP", "HDMI", "USB-C"),
    ):
        self.display = display
        self.builtin_prefixes = tuple(builtin_prefixes)
        self.external_prefixes = tuple(external_prefixes)

    def detect(self) -> Topology:
        try:
            listed = self.display.list_outputs()
        except ControllerError as e:
            raise DetectionError(f"Could not list outputs: {e}") from e

        topology = build_topology(listed, self.builtin_prefixes, self.external_prefixes)
        logger.debug("Detected topology: %s", topology.describe())
        return topology

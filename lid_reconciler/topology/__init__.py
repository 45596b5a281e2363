"""Display topology detection."""

from lid_reconciler.topology.parser import classify_output, parse_output_listing
from lid_reconciler.topology.detector import TopologyDetector, build_topology

__all__ = [
    "TopologyDetector",
    "build_topology",
    "classify_output",
    "parse_output_listing",
]

"""
Output listing parser.

Compositor listings declare each output on a line of its own, followed by
indented detail lines:

    Monitor eDP-1 (ID 0):
        2880x1920@120.00000 at 0x0
        disabled: false
        ...

Declaration lines name the output; of the details only `disabled:` is kept.
"""

import re
from typing import Iterable, List

from lid_reconciler.models.topology import DisplayOutput, OutputRole

_DECLARATION_RE = re.compile(r"^Monitor\s+(\S+)")
_DISABLED_RE = re.compile(r"^\s+disabled:\s*(\S+)")


def parse_output_listing(text: str) -> List[DisplayOutput]:
    """Return the listed outputs, unclassified, in listing order."""
    outputs: List[DisplayOutput] = []
    for line in text.splitlines():
        match = _DECLARATION_RE.match(line)
        if match:
            outputs.append(DisplayOutput(name=match.group(1)))
            continue

        match = _DISABLED_RE.match(line)
        if match and outputs:
            outputs[-1].enabled = match.group(1).lower() != "true"
    return outputs


def classify_output(
    name: str,
    builtin_prefixes: Iterable[str],
    external_prefixes: Iterable[str],
    enabled: bool = True,
) -> DisplayOutput:
    """Assign a role to an output from its name prefix."""
    if name.startswith(tuple(builtin_prefixes)):
        role = OutputRole.BUILTIN
    elif name.startswith(tuple(external_prefixes)):
        role = OutputRole.EXTERNAL
    else:
        role = OutputRole.UNCLASSIFIED
    return DisplayOutput(name=name, role=role, enabled=enabled)

"""Tests for the Display Topology Detector."""

import pytest

from lid_reconciler.controllers.memory import InMemoryDisplayController
from lid_reconciler.errors import DetectionError
from lid_reconciler.models.topology import DisplayOutput, OutputRole
from lid_reconciler.topology.detector import TopologyDetector, build_topology
from lid_reconciler.topology.parser import classify_output, parse_output_listing

HYPRCTL_LISTING = """\
Monitor eDP-1 (ID 0):
	2880x1920@120.00000 at 0x0
	description: Samsung Display Corp. 0x419F
	make: Samsung Display Corp.
	disabled: false

Monitor HDMI-A-1 (ID 1):
	3840x2160@60.00000 at 1440x0
	description: Dell Inc. DELL U2720Q
	disabled: false

Monitor DP-2 (ID 2):
	2560x1440@144.00000 at 5280x0
	disabled: false
"""


class TestParser:
    def test_parse_hyprctl_listing(self):
        outputs = parse_output_listing(HYPRCTL_LISTING)
        assert [o.name for o in outputs] == ["eDP-1", "HDMI-A-1", "DP-2"]
        assert all(o.enabled for o in outputs)

    def test_detail_lines_ignored(self):
        text = "\tMonitor fake\n  Monitor indented\nmake: Monitor X\n"
        assert parse_output_listing(text) == []

    def test_disabled_flag_read_per_block(self):
        text = (
            "Monitor eDP-1 (ID 0):\n"
            "\tdisabled: false\n"
            "Monitor HDMI-A-1 (ID 1):\n"
            "\tdisabled: true\n"
        )
        outputs = parse_output_listing(text)
        assert [(o.name, o.enabled) for o in outputs] == [
            ("eDP-1", True),
            ("HDMI-A-1", False),
        ]

    def test_empty_listing(self):
        assert parse_output_listing("") == []

    def test_classify(self):
        prefixes = (("eDP",), ("DP", "HDMI", "USB-C"))
        assert classify_output("eDP-1", *prefixes).role == OutputRole.BUILTIN
        assert classify_output("DP-3", *prefixes).role == OutputRole.EXTERNAL
        assert classify_output("USB-C-1", *prefixes).role == OutputRole.EXTERNAL
        assert classify_output("HEADLESS-2", *prefixes).role == OutputRole.UNCLASSIFIED


class TestBuildTopology:
    def test_first_external_wins(self):
        """Ties among connected externals are broken by listing order."""
        topology = build_topology(["eDP-1", "HDMI-A-1", "DP-2"])
        assert topology.builtin.name == "eDP-1"
        assert topology.external.name == "HDMI-A-1"

    def test_listing_order_not_preference(self):
        topology = build_topology(["DP-2", "eDP-1", "HDMI-A-1"])
        assert topology.external.name == "DP-2"

    def test_no_external_is_normal(self):
        topology = build_topology(["eDP-1", "HEADLESS-1"])
        assert topology.builtin.name == "eDP-1"
        assert topology.external is None
        assert len(topology.outputs) == 2

    def test_disabled_external_skipped(self):
        listed = [
            DisplayOutput(name="eDP-1"),
            DisplayOutput(name="HDMI-A-1", enabled=False),
        ]
        topology = build_topology(listed)
        assert topology.external is None
        assert [o.name for o in topology.outputs] == ["eDP-1", "HDMI-A-1"]

    def test_missing_builtin_fails(self):
        with pytest.raises(DetectionError):
            build_topology(["HDMI-A-1", "DP-2"])

    def test_empty_listing_fails(self):
        with pytest.raises(DetectionError):
            build_topology([])

    def test_first_builtin_wins(self):
        topology = build_topology(["eDP-1", "eDP-2", "DP-1"])
        assert topology.builtin.name == "eDP-1"

    def test_custom_prefixes(self):
        topology = build_topology(
            ["LVDS-1", "VGA-1"], builtin_prefixes=("LVDS",), external_prefixes=("VGA",)
        )
        assert topology.builtin.name == "LVDS-1"
        assert topology.external.name == "VGA-1"


class TestTopologyDetector:
    def test_detect_reads_fresh_each_time(self):
        """External displays are hot-pluggable; nothing is cached."""
        display = InMemoryDisplayController(["eDP-1"])
        detector = TopologyDetector(display)

        assert detector.detect().external is None

        display.outputs.append("HDMI-A-1")
        assert detector.detect().external.name == "HDMI-A-1"

    def test_listing_failure_becomes_detection_error(self):
        display = InMemoryDisplayController(["eDP-1"])
        display.fail_listing = True
        detector = TopologyDetector(display)

        with pytest.raises(DetectionError):
            detector.detect()

    def test_disabled_external_is_not_present(self):
        """A connected but disabled external shows nothing; it cannot take over."""
        display = InMemoryDisplayController(["eDP-1", "HDMI-A-1", "DP-2"])
        display.disabled.add("HDMI-A-1")
        detector = TopologyDetector(display)

        topology = detector.detect()
        assert topology.external.name == "DP-2"

        display.disabled.add("DP-2")
        assert detector.detect().external is None

    def test_disabled_builtin_still_resolves(self):
        display = InMemoryDisplayController(["eDP-1", "HDMI-A-1"])
        display.disabled.add("eDP-1")

        topology = TopologyDetector(display).detect()

        assert topology.builtin.name == "eDP-1"
        assert topology.builtin.enabled is False
        assert topology.external.name == "HDMI-A-1"

"""Tests for the Action Executor."""

from lid_reconciler.controllers.memory import (
    InMemoryDisplayController,
    RecordingPowerController,
)
from lid_reconciler.execution.executor import ActionExecutor
from lid_reconciler.models.decision import Decision, DecisionKind
from lid_reconciler.models.topology import OutputMode

MODE = OutputMode.parse("2880x1920@120,0x0,2")


def _make_executor(outputs=None, power_fail=False):
    display = InMemoryDisplayController(outputs or ["eDP-1", "HDMI-A-1"])
    power = RecordingPowerController(fail=power_fail)
    return ActionExecutor(display, power), display, power


class TestActionExecutor:
    def test_disable_builtin(self):
        executor, display, power = _make_executor()
        decision = Decision(
            kind=DecisionKind.DISABLE_BUILTIN, builtin="eDP-1", external="HDMI-A-1"
        )

        result = executor.execute(decision)

        assert result.success is True
        assert display.calls == [("disable", "eDP-1,disable")]
        assert "eDP-1" not in display.enabled
        assert power.hibernate_requests == 0

    def test_enable_dual(self):
        executor, display, _ = _make_executor()
        decision = Decision(
            kind=DecisionKind.ENABLE_BUILTIN_DUAL,
            builtin="eDP-1",
            external="HDMI-A-1",
            mode=MODE,
        )

        result = executor.execute(decision)

        assert result.success is True
        assert display.calls == [("enable", "eDP-1,2880x1920@120,0x0,2")]
        assert result.commands == ["eDP-1,2880x1920@120,0x0,2"]

    def test_enable_solo(self):
        executor, display, _ = _make_executor(["eDP-1"])
        decision = Decision(kind=DecisionKind.ENABLE_BUILTIN_SOLO, builtin="eDP-1", mode=MODE)

        result = executor.execute(decision)

        assert result.success is True
        assert display.enabled["eDP-1"] == "2880x1920@120,0x0,2"

    def test_hibernate(self):
        executor, display, power = _make_executor(["eDP-1"])
        result = executor.execute(Decision(kind=DecisionKind.HIBERNATE, builtin="eDP-1"))

        assert result.success is True
        assert power.hibernate_requests == 1
        assert display.calls == []

    def test_disable_failure_is_reported_not_raised(self, caplog):
        """A failed disable leaves both outputs on, which is safe."""
        executor, display, _ = _make_executor()
        display.fail_on.add("disable")
        decision = Decision(
            kind=DecisionKind.DISABLE_BUILTIN, builtin="eDP-1", external="HDMI-A-1"
        )

        result = executor.execute(decision)

        assert result.success is False
        assert "rejected" in result.error
        assert "eDP-1" in display.enabled
        assert "requested=disabled" in caplog.text

    def test_enable_failure_is_reported(self):
        executor, display, _ = _make_executor()
        display.fail_on.add("enable")
        decision = Decision(kind=DecisionKind.ENABLE_BUILTIN_SOLO, builtin="eDP-1", mode=MODE)

        result = executor.execute(decision)

        assert result.success is False
        assert len(display.calls) == 1  # No retry

    def test_hibernate_failure_is_reported(self):
        executor, _, power = _make_executor(power_fail=True)
        result = executor.execute(Decision(kind=DecisionKind.HIBERNATE, builtin="eDP-1"))

        assert result.success is False
        assert power.hibernate_requests == 1

    def test_enable_without_mode_fails(self):
        executor, display, _ = _make_executor()
        result = executor.execute(
            Decision(kind=DecisionKind.ENABLE_BUILTIN_SOLO, builtin="eDP-1")
        )
        assert result.success is False
        assert display.calls == []

    def test_repeated_enable_is_identical(self):
        executor, display, _ = _make_executor()
        decision = Decision(
            kind=DecisionKind.ENABLE_BUILTIN_DUAL,
            builtin="eDP-1",
            external="HDMI-A-1",
            mode=MODE,
        )

        executor.execute(decision)
        executor.execute(decision)

        assert display.calls[0] == display.calls[1]

    def test_custom_handler(self):
        executor, _, _ = _make_executor()
        executor.register_handler(DecisionKind.HIBERNATE, lambda d: ["suspend instead"])

        result = executor.execute(Decision(kind=DecisionKind.HIBERNATE, builtin="eDP-1"))

        assert result.commands == ["suspend instead"]

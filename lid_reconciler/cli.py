"""
Command-line front ends.

  hypr-lid-switch [close|open]   reconcile once (forced or from the sensor)
  hypr-lid-monitor               reconcile on every lid transition, forever

Exit status: 0 on success, 1 when the cycle was skipped or its action failed,
2 when the process could not start.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import signal
import sys
from typing import List, Optional

from lid_reconciler.config import load_config
from lid_reconciler.errors import DetectionError, LidReconcilerError
from lid_reconciler.logging_ import setup_logging
from lid_reconciler.models.lid import LidState
from lid_reconciler.models.reconciler import ReconcilerConfig
from lid_reconciler.preflight import run_preflight
from lid_reconciler.wiring import Components, build_components, build_monitor

logger = logging.getLogger("lid_reconciler")

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_STARTUP = 2


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", default=None, help="JSON configuration file.")
    parser.add_argument("--log-file", default=None, help="Append log records to this file.")
    parser.add_argument("--dry-run", action="store_true", help="Log commands but do not execute them.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")


def _startup(args: argparse.Namespace, **overrides) -> Optional[Components]:
    try:
        config = load_config(args.config, {"log_file": args.log_file, **overrides})
        setup_logging(config.log_file, args.verbose)
        run_preflight(config)
    except (LidReconcilerError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return None
    return build_components(config, dry_run=args.dry_run)


def _probe(components: Components) -> int:
    lid = components.reader.read()
    report = {"lid": lid.value, "lid_sources": components.reader.sources()}
    status = EXIT_OK
    try:
        topology = components.detector.detect()
        report["topology"] = topology.model_dump(mode="json")
    except DetectionError as e:
        report["topology_error"] = str(e)
        status = EXIT_FAILED
    if not lid.is_known:
        status = EXIT_FAILED
    print(json.dumps(report, indent=2, sort_keys=True))
    return status


def switch_main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="hypr-lid-switch",
        description="Apply the lid policy once: forced close/open, or from the current lid state.",
    )
    parser.add_argument(
        "state",
        nargs="?",
        choices=["close", "open"],
        help="Force the decision for this lid position instead of reading the sensor.",
    )
    parser.add_argument(
        "--probe",
        action="store_true",
        help="Print the lid state and display topology as JSON without acting.",
    )
    _add_common_arguments(parser)
    args = parser.parse_args(argv)

    components = _startup(args)
    if components is None:
        return EXIT_STARTUP

    if args.probe:
        return _probe(components)

    if args.state == "close":
        lid = LidState.CLOSED
    elif args.state == "open":
        lid = LidState.OPEN
    else:
        lid = components.reader.read()
        logger.info("Auto-detecting lid state: %s", lid.value)

    outcome = components.reconciler.reconcile(lid)
    return EXIT_OK if outcome.success else EXIT_FAILED


async def _run_monitor(components: Components) -> None:
    stop_event = asyncio.Event()
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGTERM, signal.SIGINT):
        loop.add_signal_handler(sig, stop_event.set)

    monitor = build_monitor(components)
    await monitor.run_async(stop_event)


def monitor_main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="hypr-lid-monitor",
        description="Watch the laptop lid and reconfigure displays on every open/close.",
    )
    parser.add_argument(
        "--interval",
        type=float,
        default=None,
        help=f"Polling interval in seconds (default: {ReconcilerConfig().poll_interval_seconds}).",
    )
    _add_common_arguments(parser)
    args = parser.parse_args(argv)

    components = _startup(args, poll_interval_seconds=args.interval)
    if components is None:
        return EXIT_STARTUP

    asyncio.run(_run_monitor(components))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(monitor_main())

# SPDX-FileCopyrightText: 2026 The reauthfi Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""reauthfi CLI."""

from __future__ import annotations

import argparse
import json
import signal
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from ..cancel import CancelFlag
from ..config import Options, load_engine_settings
from ..errors import ReauthfiError
from ..log import setup_logging
from ..models import ExecutionStatus, RunReport
from ..runtime import run
from ..version import __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="reauthfi", description="Captive portal auto-detection and opener")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose output")
    parser.add_argument("--no-open", action="store_true", help="Display portal URL without opening")
    parser.add_argument("--gateway", action="store_true", help="Prioritize gateway direct check")
    parser.add_argument(
        "--timeout",
        type=float,
        default=load_engine_settings().timeout,
        help="Request timeout in seconds",
    )
    parser.add_argument("--no-progress", action="store_true", help="Disable the per-request progress bar")
    parser.add_argument("--json", action="store_true", help="Output JSON instead of human-friendly summary")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def print_network_not_ready(verbose: bool, detail: str | None) -> None:
    print("Network not ready - this may be a first-time Wi-Fi connection")
    print("  Close any network popup windows and try again")
    print("  Or wait a few seconds for the network to stabilize")
    if verbose:
        print(f"  Detail: {detail or 'none'}")


def _pretty_print(report: RunReport, verbose: bool) -> None:
    if report.status is ExecutionStatus.NETWORK_NOT_READY:
        print_network_not_ready(verbose, report.detail)
        return
    if report.portal_url:
        print(f"  -> Portal URL: {report.portal_url}")
        if report.opened:
            print("Opened in browser.")
        return
    print("No captive portal detected")


def _print_json(data: dict[str, Any]) -> None:
    json.dump(data, sys.stdout, indent=2, sort_keys=True)
    sys.stdout.write("\n")


@contextmanager
def interrupt_sets(flag: CancelFlag) -> Iterator[None]:
    """Route the first Ctrl+C to `flag`; a second one interrupts as usual."""

    def _handler(signum, frame):  # noqa: ANN001, ARG001
        flag.set()
        signal.signal(signal.SIGINT, signal.default_int_handler)

    previous = signal.signal(signal.SIGINT, _handler)
    try:
        yield
    finally:
        signal.signal(signal.SIGINT, previous)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging("DEBUG" if args.verbose else "INFO", verbose=args.verbose)

    options = Options(
        verbose=args.verbose,
        no_open=args.no_open,
        gateway=args.gateway,
        timeout=args.timeout,
        progress=not args.no_progress and not args.json and sys.stdout.isatty(),
    )
    cancel_flag = CancelFlag()

    if not args.json:
        print("Detecting Captive Portal...")
    try:
        with interrupt_sets(cancel_flag):
            report = run(options, cancel_flag=cancel_flag)
    except ReauthfiError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        _print_json(report.to_dict())
    else:
        _pretty_print(report, args.verbose)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

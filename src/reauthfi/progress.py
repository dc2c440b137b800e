# SPDX-FileCopyrightText: 2026 The reauthfi Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Live progress bar for blocking probe calls.

A background thread redraws the bar about twice a second until the foreground
call returns. The only shared state is a threading.Event; the thread is joined
before the call's result is handed back, so it never outlives its probe.
"""

from __future__ import annotations

import sys
import threading
import time
from contextlib import suppress
from typing import TextIO

from .http.client import NetworkClient
from .http.models import HttpResponse

BAR_SLOTS = 20
REFRESH_INTERVAL = 0.5


def render_bar(label: str, elapsed: float, total: float, slots: int = BAR_SLOTS) -> str:
    elapsed_s = int(elapsed)
    total_s = max(int(total), 1)
    filled = min(elapsed_s * slots // total_s, slots)
    bar = "█" * filled + "░" * (slots - filled)
    return f"\r  • {label} [{bar}] {elapsed_s}s/{int(total)}s"


class ProgressIndicator:
    def __init__(self, label: str, total: float, stream: TextIO | None = None, interval: float = REFRESH_INTERVAL):
        self.label = label
        self.total = total
        self.stream = stream or sys.stdout
        self.interval = interval
        self._done = threading.Event()
        self._thread: threading.Thread | None = None
        self._started = 0.0

    def _write(self, text: str) -> None:
        with suppress(OSError, ValueError):
            self.stream.write(text)
            self.stream.flush()

    def _run(self) -> None:
        while not self._done.is_set():
            elapsed = time.monotonic() - self._started
            if elapsed <= self.total:
                self._write(render_bar(self.label, elapsed, self.total))
            self._done.wait(self.interval)
        self._write("\n")

    def start(self) -> None:
        self._started = time.monotonic()
        self._write(render_bar(self.label, 0, self.total))
        self._thread = threading.Thread(target=self._run, name="reauthfi-progress", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        self._done.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    def __enter__(self) -> "ProgressIndicator":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        self.stop()


class ProgressHttpClient(NetworkClient):
    """NetworkClient decorator that shows a ProgressIndicator while each GET is in flight."""

    def __init__(self, inner: NetworkClient, stream: TextIO | None = None, interval: float = REFRESH_INTERVAL):
        self.inner = inner
        self.stream = stream
        self.interval = interval

    def get(self, url: str, timeout: float | None = None) -> HttpResponse:
        with ProgressIndicator(url, timeout or 0, stream=self.stream, interval=self.interval):
            return self.inner.get(url, timeout)

    def close(self) -> None:
        self.inner.close()


__all__ = ["ProgressHttpClient", "ProgressIndicator", "render_bar"]

# SPDX-FileCopyrightText: 2026 The reauthfi Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Cooperative cancellation shared between a run and whoever may interrupt it."""

from __future__ import annotations

import threading


class CancelFlag:
    """
    One-way boolean that a signal handler or another thread may set.

    Probing code polls it between targets; an in-flight request is never interrupted.
    Create a fresh flag per run.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def is_set(self) -> bool:
        return self._event.is_set()

    def set(self) -> None:
        self._event.set()

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"CancelFlag(set={self.is_set()})"


__all__ = ["CancelFlag"]

# SPDX-FileCopyrightText: 2026 The reauthfi Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Run-level verdicts returned to callers of the engine."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any


class ExecutionStatus(str, Enum):
    COMPLETED = "COMPLETED"
    NETWORK_NOT_READY = "NETWORK_NOT_READY"


@dataclass
class RunReport:
    """
    Outcome of one engine run.

    `status` is what callers branch on. `portal_url` is set when a portal was
    found, `opened` when it was handed to the system URL handler, and `errors`
    carries the diagnostics behind a NETWORK_NOT_READY verdict.
    """

    status: ExecutionStatus
    portal_url: str | None = None
    errors: list[str] = field(default_factory=list)
    opened: bool = False
    retried: bool = False

    @property
    def detail(self) -> str:
        return ", ".join(self.errors)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["status"] = self.status.value
        return data

# SPDX-FileCopyrightText: 2026 The reauthfi Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for reauthfi."""

from .detection import DetectionResult, DetectionTarget, Outcome, OutcomeKind, ResultKind
from .run import ExecutionStatus, RunReport

__all__ = [
    "DetectionResult",
    "DetectionTarget",
    "ExecutionStatus",
    "Outcome",
    "OutcomeKind",
    "ResultKind",
    "RunReport",
]

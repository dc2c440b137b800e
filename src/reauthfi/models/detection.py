# SPDX-FileCopyrightText: 2026 The reauthfi Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Detection domain models: probe targets, per-probe outcomes and per-strategy results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class DetectionTarget:
    name: str
    url: str
    expected_status: int | None = None
    allow_meta_refresh: bool = False


class OutcomeKind(str, Enum):
    PORTAL = "PORTAL"
    EXPECTED_OK = "EXPECTED_OK"
    MISMATCH = "MISMATCH"
    ISSUE = "ISSUE"


@dataclass(frozen=True)
class Outcome:
    """Classification of one probe. Only the field matching `kind` is populated."""

    kind: OutcomeKind
    url: str | None = None
    status_code: int | None = None
    message: str | None = None

    @classmethod
    def portal(cls, url: str) -> Outcome:
        return cls(OutcomeKind.PORTAL, url=url)

    @classmethod
    def expected_ok(cls) -> Outcome:
        return cls(OutcomeKind.EXPECTED_OK)

    @classmethod
    def mismatch(cls, status_code: int) -> Outcome:
        return cls(OutcomeKind.MISMATCH, status_code=status_code)

    @classmethod
    def issue(cls, message: str) -> Outcome:
        return cls(OutcomeKind.ISSUE, message=message)


class ResultKind(str, Enum):
    PORTAL_FOUND = "PORTAL_FOUND"
    NO_PORTAL_DETECTED = "NO_PORTAL_DETECTED"
    NETWORK_ISSUES = "NETWORK_ISSUES"


@dataclass
class DetectionResult:
    kind: ResultKind
    portal_url: str | None = None
    errors: list[str] = field(default_factory=list)

    @classmethod
    def portal_found(cls, url: str) -> DetectionResult:
        return cls(ResultKind.PORTAL_FOUND, portal_url=url)

    @classmethod
    def no_portal(cls) -> DetectionResult:
        return cls(ResultKind.NO_PORTAL_DETECTED)

    @classmethod
    def network_issues(cls, errors: list[str]) -> DetectionResult:
        return cls(ResultKind.NETWORK_ISSUES, errors=list(errors))

    @property
    def found_portal(self) -> bool:
        return self.kind is ResultKind.PORTAL_FOUND

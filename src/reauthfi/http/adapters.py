# SPDX-FileCopyrightText: 2026 The reauthfi Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Deterministic NetworkClient used by tests and dry runs."""

from __future__ import annotations

from .client import NetworkClient
from .models import HttpResponse


class StubHttpClient(NetworkClient):
    """Deterministic, programmable NetworkClient for tests."""

    def __init__(self, responses: dict[str, HttpResponse] | None = None):
        self._responses = responses or {}
        self.requests: list[tuple[str, float | None]] = []
        self.closed = False

    def add(self, url: str, response: HttpResponse) -> None:
        self._responses[url] = response

    def get(self, url: str, timeout: float | None = None) -> HttpResponse:
        self.requests.append((url, timeout))
        if url in self._responses:
            return self._responses[url]
        return HttpResponse(ok=False, status_code=None, url=url, error_message="No stubbed response configured")

    @property
    def urls(self) -> list[str]:
        return [url for url, _ in self.requests]

    def close(self) -> None:
        self.closed = True

# SPDX-FileCopyrightText: 2026 The reauthfi Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP client abstraction and factory."""

from typing import Protocol

from ..config import EngineSettings, load_engine_settings
from .models import HttpResponse


class NetworkClient(Protocol):
    """Minimal protocol for issuing probe GETs without following redirects."""

    def get(self, url: str, timeout: float | None = None) -> HttpResponse: ...

    def close(self) -> None:  # pragma: no cover - optional for adapters
        ...


def create_default_http_client(timeout: float | None = None, settings: EngineSettings | None = None) -> NetworkClient:
    """Factory for the default httpx-backed client. Raises ClientSetupError if it cannot be built."""
    from .httpx_client import HttpxClient

    return HttpxClient(timeout=timeout, settings=settings or load_engine_settings())

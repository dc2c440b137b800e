# SPDX-FileCopyrightText: 2026 The reauthfi Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP client exports."""

from .adapters import StubHttpClient
from .client import NetworkClient, create_default_http_client
from .httpx_client import HttpxClient
from .models import Headers, HttpResponse, normalize_headers

__all__ = [
    "Headers",
    "HttpResponse",
    "HttpxClient",
    "NetworkClient",
    "StubHttpClient",
    "create_default_http_client",
    "normalize_headers",
]

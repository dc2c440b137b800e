# SPDX-FileCopyrightText: 2026 The reauthfi Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
reauthfi package entrypoint.

Detects whether the current network sits behind a captive portal by probing
well-known connectivity-check URLs and the default gateway, resets Wi-Fi once
when the network looks unready, and opens the portal page when one is found.
HTTP and shell access are abstracted behind injectable protocols, and domain
objects are modeled with typed dataclasses.
"""

from .cancel import CancelFlag
from .config import (
    DetectionEndpoint,
    EngineSettings,
    Options,
    PlatformConfig,
    load_engine_settings,
    load_platform_config,
)
from .detection import DetectionEngine, GatewayDetection, StandardUrlDetection, classify
from .errors import ReauthfiError
from .http import HttpResponse, HttpxClient, NetworkClient, StubHttpClient, create_default_http_client
from .log import setup_logging
from .models import DetectionResult, DetectionTarget, ExecutionStatus, Outcome, RunReport
from .runtime import Reauthfi, run
from .version import __version__

__all__ = [
    "CancelFlag",
    "DetectionEndpoint",
    "DetectionEngine",
    "DetectionResult",
    "DetectionTarget",
    "EngineSettings",
    "ExecutionStatus",
    "GatewayDetection",
    "HttpResponse",
    "HttpxClient",
    "NetworkClient",
    "Options",
    "Outcome",
    "PlatformConfig",
    "Reauthfi",
    "ReauthfiError",
    "RunReport",
    "StandardUrlDetection",
    "StubHttpClient",
    "classify",
    "create_default_http_client",
    "load_engine_settings",
    "load_platform_config",
    "run",
    "setup_logging",
    "__version__",
]

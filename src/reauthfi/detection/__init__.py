# SPDX-FileCopyrightText: 2026 The reauthfi Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Captive portal detection exports."""

from .base import DetectionContext, DetectionStrategy
from .classifier import classify, extract_meta_refresh
from .engine import DetectionEngine
from .gateway import get_gateway_ip
from .registry import GATEWAY_PRIORITY, STANDARD_PRIORITY, STRATEGIES, StrategyKind
from .strategies import GatewayDetection, StandardUrlDetection, run_detection

__all__ = [
    "DetectionContext",
    "DetectionEngine",
    "DetectionStrategy",
    "GATEWAY_PRIORITY",
    "GatewayDetection",
    "STANDARD_PRIORITY",
    "STRATEGIES",
    "StandardUrlDetection",
    "StrategyKind",
    "classify",
    "extract_meta_refresh",
    "get_gateway_ip",
    "run_detection",
]

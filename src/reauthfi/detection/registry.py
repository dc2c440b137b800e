# SPDX-FileCopyrightText: 2026 The reauthfi Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Strategy registry and priority orders."""

from enum import Enum

from ..config import Options
from .base import DetectionStrategy
from .strategies import GatewayDetection, StandardUrlDetection


class StrategyKind(str, Enum):
    GATEWAY = "gateway"
    STANDARD_URL = "standard_url"


STRATEGIES: dict[StrategyKind, DetectionStrategy] = {
    StrategyKind.GATEWAY: GatewayDetection(),
    StrategyKind.STANDARD_URL: StandardUrlDetection(),
}

GATEWAY_PRIORITY = (StrategyKind.GATEWAY, StrategyKind.STANDARD_URL)
STANDARD_PRIORITY = (StrategyKind.STANDARD_URL, StrategyKind.GATEWAY)


def priority_for(options: Options) -> tuple[StrategyKind, ...]:
    return GATEWAY_PRIORITY if options.gateway else STANDARD_PRIORITY


__all__ = ["GATEWAY_PRIORITY", "STANDARD_PRIORITY", "STRATEGIES", "StrategyKind", "priority_for"]

# SPDX-FileCopyrightText: 2026 The reauthfi Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Detection orchestrator."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from ..models import ExecutionStatus, ResultKind, RunReport
from .base import DetectionContext, DetectionStrategy
from .registry import STRATEGIES, StrategyKind, priority_for

logger = logging.getLogger(__name__)


class DetectionEngine:
    """Runs strategies in priority order and folds their results into one verdict."""

    def __init__(self, strategies: Mapping[StrategyKind, DetectionStrategy] | None = None):
        self.strategies = dict(strategies or STRATEGIES)

    def detect(self, context: DetectionContext, priority: Sequence[StrategyKind] | None = None) -> RunReport:
        order = priority or priority_for(context.options)
        any_success = False
        errors: list[str] = []

        for kind in order:
            strategy = self.strategies.get(kind)
            if strategy is None:
                continue
            result = strategy.detect(context)
            logger.debug("Strategy %s -> %s", strategy.name, result.kind.value)

            if result.kind is ResultKind.PORTAL_FOUND:
                return RunReport(status=ExecutionStatus.COMPLETED, portal_url=result.portal_url)
            if result.kind is ResultKind.NETWORK_ISSUES:
                errors.extend(result.errors)
            else:
                any_success = True

        # A clean result from either strategy outweighs issues reported by the other.
        if not any_success and errors:
            return RunReport(status=ExecutionStatus.NETWORK_NOT_READY, errors=errors)
        logger.info("No captive portal detected")
        return RunReport(status=ExecutionStatus.COMPLETED)

# SPDX-FileCopyrightText: 2026 The reauthfi Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probing strategies: well-known connectivity URLs and the default gateway."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..errors import ReauthfiError
from ..models import DetectionResult, DetectionTarget, OutcomeKind
from .base import DetectionContext, DetectionStrategy
from .classifier import classify
from .gateway import get_gateway_ip

logger = logging.getLogger(__name__)

CANCELED = "canceled"
GATEWAY_IP_ISSUE = "gateway_ip"


def run_detection(targets: Sequence[DetectionTarget], context: DetectionContext) -> DetectionResult:
    """
    Probe targets in order and fold their outcomes.

    A portal short-circuits. Otherwise any healthy target wins over collected
    errors, and errors alone yield NETWORK_ISSUES.
    """
    errors: list[str] = []
    saw_expected_ok = False
    timeout = context.options.timeout

    for target in targets:
        if context.cancel_flag.is_set():
            return DetectionResult.network_issues([CANCELED])

        logger.debug("Checking %s (%s)", target.name, target.url)
        response = context.net.get(target.url, timeout)
        try:
            outcome = classify(target, response, timeout)
        finally:
            response.close()

        if outcome.kind is OutcomeKind.PORTAL:
            logger.info("Portal detected via %s (%s)", target.name, outcome.url)
            return DetectionResult.portal_found(outcome.url or "")

        if outcome.kind is OutcomeKind.ISSUE:
            if not response.ok:
                logger.debug("%s %s: %s", target.name, response.error_category.value, response.error_message)
            if target.allow_meta_refresh:
                logger.info("%s unreachable (ignored)", target.name)
            else:
                logger.info("%s failed", target.name)
            errors.append(outcome.message or target.name)
        elif outcome.kind is OutcomeKind.MISMATCH:
            logger.debug("%s unexpected status %s", target.name, outcome.status_code)
            errors.append(f"{target.name}: status {outcome.status_code}")
        else:
            logger.debug("%s returned the expected response", target.name)
            saw_expected_ok = True

    if saw_expected_ok:
        return DetectionResult.no_portal()
    if errors:
        return DetectionResult.network_issues(errors)
    return DetectionResult.no_portal()


class StandardUrlDetection(DetectionStrategy):
    name = "standard_url"

    def build_targets(self, context: DetectionContext) -> list[DetectionTarget]:
        return [
            DetectionTarget(
                name=endpoint.name,
                url=endpoint.url,
                expected_status=endpoint.expected_status,
                allow_meta_refresh=False,
            )
            for endpoint in context.config.detection_endpoints
        ]

    def detect(self, context: DetectionContext) -> DetectionResult:
        targets = self.build_targets(context)
        if not targets:
            return DetectionResult.no_portal()

        logger.info("Checking captive portal endpoints (%d total)...", len(targets))
        return run_detection(targets, context)


class GatewayDetection(DetectionStrategy):
    name = "gateway"

    def build_targets(self, gateway_ip: str, context: DetectionContext) -> list[DetectionTarget]:
        return [
            DetectionTarget(
                name=f"Gateway{path}",
                url=f"http://{gateway_ip}{path}",
                expected_status=None,
                allow_meta_refresh=True,
            )
            for path in context.config.gateway_endpoints
        ]

    def detect(self, context: DetectionContext) -> DetectionResult:
        if context.cancel_flag.is_set():
            return DetectionResult.network_issues([CANCELED])

        try:
            gateway_ip = get_gateway_ip(context.config, context.commands)
        except ReauthfiError as exc:
            logger.debug("Gateway lookup failed: %s", exc)
            return DetectionResult.network_issues([GATEWAY_IP_ISSUE])

        logger.debug("Gateway IP: %s", gateway_ip)
        logger.info("Checking gateway endpoints...")
        return run_detection(self.build_targets(gateway_ip, context), context)


__all__ = [
    "CANCELED",
    "GATEWAY_IP_ISSUE",
    "GatewayDetection",
    "StandardUrlDetection",
    "run_detection",
]

# SPDX-FileCopyrightText: 2026 The reauthfi Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Default-gateway discovery from the platform's routing command."""

from __future__ import annotations

import ipaddress
import re

from ..commands import CommandRunner
from ..config import PlatformConfig
from ..errors import GatewayNotFoundError


def parse_gateway_ip(output: str, pattern: str) -> str:
    match = re.search(pattern, output or "")
    if not match:
        raise GatewayNotFoundError()
    candidate = match.group(1)
    try:
        return str(ipaddress.IPv4Address(candidate))
    except ValueError as exc:
        raise GatewayNotFoundError(f"invalid gateway address: {candidate}") from exc


def get_gateway_ip(config: PlatformConfig, runner: CommandRunner) -> str:
    """Run the gateway command and extract the IPv4 address. Raises CommandError or GatewayNotFoundError."""
    output = runner.run(config.gateway_command)
    return parse_gateway_ip(output, config.gateway_regex)


__all__ = ["get_gateway_ip", "parse_gateway_ip"]

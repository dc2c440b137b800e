# SPDX-FileCopyrightText: 2026 The reauthfi Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Wireless interface discovery and power cycling via networksetup."""

from __future__ import annotations

import logging
import re
import time
from collections.abc import Callable
from typing import Protocol

from .commands import CommandRunner
from .config import EngineSettings, PlatformConfig, load_engine_settings
from .errors import CommandError, DeviceNotFoundError, WifiLeftOffError

logger = logging.getLogger(__name__)

WIFI_DEVICE_RE = re.compile(r"Hardware Port:\s*(?:Wi-Fi|AirPort).*?Device:\s*(\S+)", re.DOTALL)


class WifiController(Protocol):
    def discover_device(self) -> str: ...

    def reset(self, device: str) -> None: ...


def parse_wifi_device(output: str) -> str:
    match = WIFI_DEVICE_RE.search(output or "")
    if not match:
        raise DeviceNotFoundError()
    return match.group(1)


class NetworksetupWifiController(WifiController):
    """Power-cycles the Wi-Fi interface; errors surface as ReauthfiError subclasses."""

    def __init__(
        self,
        config: PlatformConfig,
        runner: CommandRunner,
        settings: EngineSettings | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.config = config
        self.runner = runner
        self.settings = settings or load_engine_settings()
        self._sleep = sleep

    def discover_device(self) -> str:
        if not self.config.hardware_ports_command:
            raise DeviceNotFoundError("no hardware ports command configured")
        return parse_wifi_device(self.runner.run(self.config.hardware_ports_command))

    def set_power(self, device: str, on: bool) -> None:
        self.runner.run(("networksetup", "-setairportpower", device, "on" if on else "off"))

    def reset(self, device: str) -> None:
        logger.debug("Powering off %s", device)
        self.set_power(device, False)
        try:
            self._sleep(self.settings.wifi_off_delay)
        finally:
            self._power_on(device)

    def _power_on(self, device: str) -> None:
        """Power on, retrying once. Raises WifiLeftOffError if the interface stays off."""
        logger.debug("Powering on %s", device)
        try:
            self.set_power(device, True)
        except CommandError as exc:
            logger.debug("Power on failed (%s); retrying", exc)
            try:
                self.set_power(device, True)
            except CommandError as retry_exc:
                raise WifiLeftOffError(device, retry_exc) from retry_exc


__all__ = ["NetworksetupWifiController", "WifiController", "parse_wifi_device"]

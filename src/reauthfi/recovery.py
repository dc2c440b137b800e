# SPDX-FileCopyrightText: 2026 The reauthfi Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""One-shot recovery: reset Wi-Fi and run detection again when the network looks unready."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from .cancel import CancelFlag
from .config import EngineSettings, PlatformConfig, load_engine_settings
from .errors import ReauthfiError, WifiLeftOffError
from .models import ExecutionStatus, RunReport
from .wifi import WifiController

logger = logging.getLogger(__name__)


class RecoveryController:
    """
    Wraps a single detection pass with at most one reset-and-retry cycle.

    The retry's report is final. When no reset happens (unsupported platform,
    no Wi-Fi device, failing power commands) the first pass's report, and its
    diagnostics, are returned unchanged.
    """

    def __init__(
        self,
        config: PlatformConfig,
        wifi: WifiController,
        settings: EngineSettings | None = None,
        sleep: Callable[[float], None] = time.sleep,
        cancel_flag: CancelFlag | None = None,
    ):
        self.config = config
        self.wifi = wifi
        self.settings = settings or load_engine_settings()
        self._sleep = sleep
        self.cancel_flag = cancel_flag or CancelFlag()

    def run(self, detect_once: Callable[[], RunReport]) -> RunReport:
        return self.recover(detect_once(), detect_once)

    def recover(self, first: RunReport, detect_once: Callable[[], RunReport]) -> RunReport:
        if first.status is not ExecutionStatus.NETWORK_NOT_READY:
            return first
        if not self.config.supports_wifi_reset:
            logger.debug("Wi-Fi reset not supported on this platform")
            return first
        if self.cancel_flag.is_set():
            logger.debug("Run canceled; skipping Wi-Fi reset")
            return first

        try:
            device = self.wifi.discover_device()
        except ReauthfiError as exc:
            logger.info("Skipping Wi-Fi reset: %s", exc)
            return first

        logger.info("Resetting Wi-Fi on %s and retrying after reconnect...", device)
        try:
            self.wifi.reset(device)
        except WifiLeftOffError as exc:
            logger.error("%s", exc)
            return first
        except ReauthfiError as exc:
            logger.warning("Wi-Fi reset failed: %s", exc)
            return first

        logger.info("Waiting %gs for Wi-Fi to reconnect...", self.settings.wifi_reconnect_delay)
        self._sleep(self.settings.wifi_reconnect_delay)

        retry = detect_once()
        retry.retried = True
        return retry


__all__ = ["RecoveryController"]

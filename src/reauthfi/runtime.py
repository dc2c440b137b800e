# SPDX-FileCopyrightText: 2026 The reauthfi Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level facade: detect, recover once if needed, then open the portal."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import TextIO

from .cancel import CancelFlag
from .commands import CommandRunner, SystemCommandRunner
from .config import EngineSettings, Options, PlatformConfig, load_engine_settings, load_platform_config
from .detection import DetectionContext, DetectionEngine
from .http import NetworkClient, create_default_http_client
from .models import RunReport
from .opener import PortalOpener, SystemPortalOpener
from .progress import ProgressHttpClient
from .recovery import RecoveryController
from .wifi import NetworksetupWifiController, WifiController

logger = logging.getLogger(__name__)

ClientFactory = Callable[[float], NetworkClient]


class Reauthfi:
    """
    Wires the detection engine, recovery controller and portal opener for one run.

    Every collaborator is injectable. A fresh network client is built for each
    detection pass so the retry after a Wi-Fi reset never reuses stale connections.
    """

    def __init__(
        self,
        options: Options | None = None,
        *,
        config: PlatformConfig | None = None,
        settings: EngineSettings | None = None,
        commands: CommandRunner | None = None,
        client_factory: ClientFactory | None = None,
        opener: PortalOpener | None = None,
        wifi: WifiController | None = None,
        engine: DetectionEngine | None = None,
        cancel_flag: CancelFlag | None = None,
        progress_stream: TextIO | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.options = options or Options()
        self.config = config or load_platform_config()
        self.settings = settings or load_engine_settings()
        self.commands = commands or SystemCommandRunner(timeout=self.command_timeout)
        self.client_factory = client_factory or (lambda timeout: create_default_http_client(timeout, self.settings))
        self.opener = opener or SystemPortalOpener(self.config, self.commands)
        self.wifi = wifi or NetworksetupWifiController(self.config, self.commands, self.settings, sleep=sleep)
        self.engine = engine or DetectionEngine()
        self.cancel_flag = cancel_flag or CancelFlag()
        self.progress_stream = progress_stream
        self.recovery = RecoveryController(
            self.config, self.wifi, self.settings, sleep=sleep, cancel_flag=self.cancel_flag
        )

    @property
    def command_timeout(self) -> float:
        """Shell commands share the run's request timeout, bounded by the configured cap."""
        return min(self.options.timeout, self.settings.command_timeout_cap)

    def detect_once(self) -> RunReport:
        client = self.client_factory(self.options.timeout)
        if self.options.progress:
            client = ProgressHttpClient(client, stream=self.progress_stream)
        try:
            context = DetectionContext(
                config=self.config,
                net=client,
                commands=self.commands,
                options=self.options,
                cancel_flag=self.cancel_flag,
            )
            return self.engine.detect(context)
        finally:
            client.close()

    def run(self) -> RunReport:
        """Run detection (with one recovery attempt) and open any portal found. Raises ReauthfiError on setup or open failure."""
        report = self.recovery.run(self.detect_once)
        if report.portal_url:
            logger.debug("Portal URL: %s", report.portal_url)
            if not self.options.no_open:
                self.opener.open(report.portal_url)
                report.opened = True
        return report


def run(options: Options | None = None, cancel_flag: CancelFlag | None = None, **kwargs) -> RunReport:
    """Single entry point for callers: build a Reauthfi for this run and execute it."""
    return Reauthfi(options, cancel_flag=cancel_flag, **kwargs).run()


__all__ = ["Reauthfi", "run"]

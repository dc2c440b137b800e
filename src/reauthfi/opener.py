# SPDX-FileCopyrightText: 2026 The reauthfi Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Hand a portal URL to the platform's default URL handler."""

from __future__ import annotations

from typing import Protocol

from .commands import CommandRunner
from .config import PlatformConfig
from .errors import CommandError, PortalOpenError


class PortalOpener(Protocol):
    def open(self, url: str) -> None: ...


class SystemPortalOpener(PortalOpener):
    def __init__(self, config: PlatformConfig, runner: CommandRunner):
        self.config = config
        self.runner = runner

    def open(self, url: str) -> None:
        if not self.config.open_command:
            raise PortalOpenError("no URL handler configured for this platform")
        try:
            self.runner.run((*self.config.open_command, url))
        except CommandError as exc:
            raise PortalOpenError(f"failed to open {url}: {exc}") from exc


__all__ = ["PortalOpener", "SystemPortalOpener"]

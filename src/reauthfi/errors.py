# SPDX-FileCopyrightText: 2026 The reauthfi Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

from enum import Enum


class ReauthfiError(Exception):
    """Base class for errors raised by reauthfi."""


class CommandError(ReauthfiError):
    """A shell command could not be started or exited non-zero."""

    def __init__(self, argv: list[str] | tuple[str, ...], message: str, exit_code: int | None = None):
        self.argv = tuple(argv)
        self.exit_code = exit_code
        super().__init__(f"{' '.join(self.argv)}: {message}")


class GatewayNotFoundError(ReauthfiError):
    def __init__(self, message: str = "default gateway not found"):
        super().__init__(message)


class DeviceNotFoundError(ReauthfiError):
    def __init__(self, message: str = "wireless device not found"):
        super().__init__(message)


class WifiLeftOffError(ReauthfiError):
    """Wi-Fi was powered off for a reset and could not be powered back on."""

    def __init__(self, device: str, cause: Exception):
        self.device = device
        self.cause = cause
        super().__init__(f"Wi-Fi on {device} is still off after a failed reset ({cause}); turn it back on manually")


class UnsupportedPlatformError(ReauthfiError):
    def __init__(self, platform: str):
        self.platform = platform
        super().__init__(f"Unsupported platform: {platform}")


class ClientSetupError(ReauthfiError):
    """The HTTP client could not be constructed."""


class PortalOpenError(ReauthfiError):
    """The portal URL could not be handed to the system URL handler."""


class BodyReadError(ReauthfiError):
    """A response arrived but its body could not be read."""


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    NONE = "NONE"


def categorize_exception(exc: Exception) -> ErrorCategory:
    """
    Map Python/httpx exceptions to the categories the classifier words differently.

    httpx wraps TLS and DNS failures in ConnectError, so they land in CONNECTION_ERROR.
    """
    import httpx

    if isinstance(exc, (httpx.TimeoutException, TimeoutError)):
        return ErrorCategory.TIMEOUT

    if isinstance(exc, (httpx.ConnectError, httpx.ProxyError)):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, (ConnectionError, ConnectionRefusedError, ConnectionResetError)):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


__all__ = [
    "BodyReadError",
    "ClientSetupError",
    "CommandError",
    "DeviceNotFoundError",
    "ErrorCategory",
    "GatewayNotFoundError",
    "PortalOpenError",
    "ReauthfiError",
    "UnsupportedPlatformError",
    "WifiLeftOffError",
    "categorize_exception",
]

# SPDX-FileCopyrightText: 2026 The reauthfi Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration for reauthfi: static platform tables, per-run options and env-backed settings."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

from .errors import UnsupportedPlatformError
from .version import __version__

DEFAULT_USER_AGENT = f"reauthfi/{__version__} (captive portal detector)"


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


@dataclass(frozen=True)
class DetectionEndpoint:
    """A well-known connectivity-check URL and the status it answers with when the network is open."""

    name: str
    url: str
    expected_status: int | None = None


@dataclass(frozen=True)
class PlatformConfig:
    """
    Static description of how to probe and recover on one operating system.

    Endpoint and path tuples may be empty; the matching strategy then reports
    "no portal detected" instead of failing.
    """

    detection_endpoints: tuple[DetectionEndpoint, ...]
    gateway_command: tuple[str, ...]
    gateway_regex: str
    gateway_endpoints: tuple[str, ...]
    supports_wifi_reset: bool
    hardware_ports_command: tuple[str, ...] = ()
    open_command: tuple[str, ...] = ()


@dataclass(frozen=True)
class Options:
    """Caller-supplied knobs for a single run."""

    verbose: bool = False
    no_open: bool = False
    gateway: bool = False
    timeout: float = 5
    progress: bool = False


@dataclass
class EngineSettings:
    """Tunables that are not part of a run's Options (delays, caps, user agent)."""

    timeout: float = 10.0
    connect_timeout_cap: float = 2.0
    wifi_off_delay: float = 2.0
    wifi_reconnect_delay: float = 10.0
    command_timeout_cap: float = 15.0
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_env(cls) -> "EngineSettings":
        """Create settings from environment variables (evaluated at call time)."""
        return cls(
            timeout=_float_env("REAUTHFI_TIMEOUT", cls.timeout),
            connect_timeout_cap=_float_env("REAUTHFI_CONNECT_TIMEOUT_CAP", cls.connect_timeout_cap),
            wifi_off_delay=_float_env("REAUTHFI_WIFI_OFF_DELAY", cls.wifi_off_delay),
            wifi_reconnect_delay=_float_env("REAUTHFI_WIFI_RECONNECT_DELAY", cls.wifi_reconnect_delay),
            command_timeout_cap=_float_env("REAUTHFI_COMMAND_TIMEOUT_CAP", cls.command_timeout_cap),
            user_agent=os.getenv("REAUTHFI_USER_AGENT", cls.user_agent),
        )


def load_engine_settings() -> EngineSettings:
    """Load engine settings from environment with sensible defaults."""
    return EngineSettings.from_env()


MACOS_DETECTION_ENDPOINTS = (
    DetectionEndpoint(name="Apple", url="http://captive.apple.com/hotspot-detect.html"),
    DetectionEndpoint(name="Google", url="http://connectivitycheck.gstatic.com/generate_204", expected_status=204),
)

MACOS_CONFIG = PlatformConfig(
    detection_endpoints=MACOS_DETECTION_ENDPOINTS,
    gateway_command=("route", "-n", "get", "default"),
    gateway_regex=r"gateway:\s+(\d+\.\d+\.\d+\.\d+)",
    gateway_endpoints=("/",),
    supports_wifi_reset=True,
    hardware_ports_command=("networksetup", "-listallhardwareports"),
    open_command=("open",),
)

LINUX_CONFIG = PlatformConfig(
    detection_endpoints=MACOS_DETECTION_ENDPOINTS,
    gateway_command=("ip", "route", "show", "default"),
    gateway_regex=r"default via (\d+\.\d+\.\d+\.\d+)",
    gateway_endpoints=("/",),
    supports_wifi_reset=False,
    open_command=("xdg-open",),
)

_PLATFORM_CONFIGS = {
    "darwin": MACOS_CONFIG,
    "linux": LINUX_CONFIG,
}


def load_platform_config(platform: str | None = None) -> PlatformConfig:
    """Return the PlatformConfig for `platform` (defaults to the running interpreter's)."""
    key = platform or sys.platform
    if key.startswith("linux"):
        key = "linux"
    config = _PLATFORM_CONFIGS.get(key)
    if config is None:
        raise UnsupportedPlatformError(key)
    return config


__all__ = [
    "DEFAULT_USER_AGENT",
    "DetectionEndpoint",
    "EngineSettings",
    "LINUX_CONFIG",
    "MACOS_CONFIG",
    "Options",
    "PlatformConfig",
    "load_engine_settings",
    "load_platform_config",
]

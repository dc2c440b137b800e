# SPDX-FileCopyrightText: 2026 The reauthfi Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging
import httpx
import pytest

from reauthfi import config
from reauthfi.config import DEFAULT_USER_AGENT, EngineSettings, Options, load_engine_settings, load_platform_config
from reauthfi.errors import (
    CommandError,
    ErrorCategory,
    UnsupportedPlatformError,
    categorize_exception,
)
from reauthfi.log import setup_logging


def test_engine_settings_env_overrides(monkeypatch):
    monkeypatch.setenv("REAUTHFI_TIMEOUT", "7.5")
    monkeypatch.setenv("REAUTHFI_CONNECT_TIMEOUT_CAP", "1")
    monkeypatch.setenv("REAUTHFI_WIFI_OFF_DELAY", "0.5")
    monkeypatch.setenv("REAUTHFI_WIFI_RECONNECT_DELAY", "3")
    monkeypatch.setenv("REAUTHFI_COMMAND_TIMEOUT_CAP", "4")
    monkeypatch.setenv("REAUTHFI_USER_AGENT", "CustomAgent/1.0")

    settings = load_engine_settings()

    assert settings.timeout == 7.5
    assert settings.connect_timeout_cap == 1
    assert settings.wifi_off_delay == 0.5
    assert settings.wifi_reconnect_delay == 3
    assert settings.command_timeout_cap == 4
    assert settings.user_agent == "CustomAgent/1.0"


def test_engine_settings_invalid_env_fall_back(monkeypatch):
    monkeypatch.setenv("REAUTHFI_TIMEOUT", "not-a-number")
    monkeypatch.setenv("REAUTHFI_WIFI_RECONNECT_DELAY", "")
    monkeypatch.delenv("REAUTHFI_USER_AGENT", raising=False)

    settings = EngineSettings.from_env()

    assert settings.timeout == EngineSettings.timeout
    assert settings.wifi_reconnect_delay == EngineSettings.wifi_reconnect_delay
    assert settings.user_agent == DEFAULT_USER_AGENT


def test_options_defaults_are_immutable():
    options = Options()
    assert (options.verbose, options.no_open, options.gateway, options.timeout) == (False, False, False, 5)
    with pytest.raises(AttributeError):
        options.timeout = 10


def test_platform_lookup():
    assert load_platform_config("darwin") is config.MACOS_CONFIG
    assert load_platform_config("linux2") is config.LINUX_CONFIG
    with pytest.raises(UnsupportedPlatformError):
        load_platform_config("win32")


def test_macos_table_matches_known_endpoints():
    macos = config.MACOS_CONFIG
    assert [(e.name, e.expected_status) for e in macos.detection_endpoints] == [("Apple", None), ("Google", 204)]
    assert macos.gateway_command == ("route", "-n", "get", "default")
    assert macos.gateway_endpoints == ("/",)
    assert macos.supports_wifi_reset is True
    assert config.LINUX_CONFIG.supports_wifi_reset is False


@pytest.mark.parametrize(
    "exc, category",
    [
        (httpx.ReadTimeout("t"), ErrorCategory.TIMEOUT),
        (TimeoutError(), ErrorCategory.TIMEOUT),
        (httpx.ConnectError("c"), ErrorCategory.CONNECTION_ERROR),
        (ConnectionRefusedError(), ErrorCategory.CONNECTION_ERROR),
        (httpx.ConnectError("[SSL: CERTIFICATE_VERIFY_FAILED]"), ErrorCategory.CONNECTION_ERROR),
        (httpx.ConnectError("[Errno 8] nodename nor servname provided"), ErrorCategory.CONNECTION_ERROR),
        (ValueError("x"), ErrorCategory.UNKNOWN_ERROR),
    ],
)
def test_categorize_exception(exc, category):
    assert categorize_exception(exc) is category


def test_error_categories_match_transport_wording():
    assert {category.name for category in ErrorCategory} == {"TIMEOUT", "CONNECTION_ERROR", "UNKNOWN_ERROR", "NONE"}


def test_command_error_message_and_exit_code():
    err = CommandError(["networksetup", "-setairportpower", "en0", "off"], "exit code 1 (denied)", exit_code=1)
    assert str(err) == "networksetup -setairportpower en0 off: exit code 1 (denied)"
    assert err.exit_code == 1
    assert err.argv == ("networksetup", "-setairportpower", "en0", "off")


def test_setup_logging_quiets_http_libraries(monkeypatch):
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: None)
    setup_logging("INFO")
    assert logging.getLogger("httpx").level == logging.WARNING
    setup_logging("DEBUG", verbose=True)
    assert logging.getLogger("httpx").level == logging.NOTSET

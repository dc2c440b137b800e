# SPDX-FileCopyrightText: 2026 The reauthfi Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

import io
import unittest

from reauthfi.cancel import CancelFlag
from reauthfi.commands import StubCommandRunner
from reauthfi.config import EngineSettings, MACOS_CONFIG, Options
from reauthfi.errors import ClientSetupError, CommandError, PortalOpenError
from reauthfi.http import HttpResponse, StubHttpClient
from reauthfi.models import ExecutionStatus, RunReport
from reauthfi.opener import SystemPortalOpener
from reauthfi.progress import ProgressHttpClient
from reauthfi.runtime import Reauthfi, run

APPLE = "http://captive.apple.com/hotspot-detect.html"
GOOGLE = "http://connectivitycheck.gstatic.com/generate_204"
GATEWAY = "http://10.0.0.1/"
ROUTE_OUTPUT = "route to default\n    gateway: 10.0.0.1\n"
HARDWARE_PORTS = "Hardware Port: Wi-Fi\nDevice: en0\n"
SETTINGS = EngineSettings(wifi_off_delay=0, wifi_reconnect_delay=0)


class RecordingOpener:
    def __init__(self, error=None):
        self.opened = []
        self.error = error

    def open(self, url):
        if self.error is not None:
            raise self.error
        self.opened.append(url)


class ClientFactory:
    """Hands out one StubHttpClient per detection pass."""

    def __init__(self, *response_sets):
        self.response_sets = list(response_sets)
        self.clients = []

    def __call__(self, timeout):
        responses = self.response_sets[min(len(self.clients), len(self.response_sets) - 1)]
        client = StubHttpClient(dict(responses))
        client.timeout = timeout
        self.clients.append(client)
        return client


def _commands():
    runner = StubCommandRunner(default="")
    runner.add(MACOS_CONFIG.gateway_command, ROUTE_OUTPUT)
    runner.add(MACOS_CONFIG.hardware_ports_command, HARDWARE_PORTS)
    return runner


def _guard(factory, options=None, opener=None, commands=None, **kwargs):
    return Reauthfi(
        options or Options(timeout=2),
        config=MACOS_CONFIG,
        settings=SETTINGS,
        commands=commands or _commands(),
        client_factory=factory,
        opener=opener or RecordingOpener(),
        sleep=lambda _: None,
        **kwargs,
    )


UNREACHABLE = HttpResponse(ok=False, error_message="refused")
HEALTHY = {APPLE: HttpResponse(ok=True, status_code=200, text="Success"), GOOGLE: HttpResponse(ok=True, status_code=204)}


class TestReauthfiRuntime(unittest.TestCase):
    def test_portal_is_opened_and_client_closed(self):
        factory = ClientFactory({APPLE: HttpResponse(ok=True, status_code=302, headers={"location": "http://portal"})})
        opener = RecordingOpener()
        report = _guard(factory, opener=opener).run()

        self.assertEqual(report.status, ExecutionStatus.COMPLETED)
        self.assertEqual(report.portal_url, "http://portal")
        self.assertTrue(report.opened)
        self.assertEqual(opener.opened, ["http://portal"])
        self.assertEqual(len(factory.clients), 1)
        self.assertTrue(factory.clients[0].closed)
        self.assertEqual(factory.clients[0].timeout, 2)

    def test_no_open_leaves_portal_unopened(self):
        factory = ClientFactory({APPLE: HttpResponse(ok=True, status_code=302, headers={"location": "http://portal"})})
        opener = RecordingOpener()
        report = _guard(factory, options=Options(no_open=True), opener=opener).run()
        self.assertEqual(report.portal_url, "http://portal")
        self.assertFalse(report.opened)
        self.assertEqual(opener.opened, [])

    def test_clean_network_completes_without_retry(self):
        factory = ClientFactory(HEALTHY)
        report = _guard(factory).run()
        self.assertEqual(report.status, ExecutionStatus.COMPLETED)
        self.assertIsNone(report.portal_url)
        self.assertEqual(len(factory.clients), 1)

    def test_network_issues_trigger_one_reset_with_a_fresh_client(self):
        commands = _commands()
        factory = ClientFactory({}, {GATEWAY: HttpResponse(ok=True, status_code=302, headers={"location": "http://after-reset"})})
        report = _guard(factory, commands=commands).run()

        self.assertEqual(report.status, ExecutionStatus.COMPLETED)
        self.assertEqual(report.portal_url, "http://after-reset")
        self.assertTrue(report.retried)
        self.assertEqual(len(factory.clients), 2)
        self.assertIsNot(factory.clients[0], factory.clients[1])
        self.assertIn(("networksetup", "-setairportpower", "en0", "off"), commands.calls)
        self.assertIn(("networksetup", "-setairportpower", "en0", "on"), commands.calls)

    def test_retry_failure_reports_retry_diagnostics(self):
        factory = ClientFactory({}, {APPLE: UNREACHABLE, GOOGLE: UNREACHABLE, GATEWAY: UNREACHABLE})
        report = _guard(factory).run()
        self.assertEqual(report.status, ExecutionStatus.NETWORK_NOT_READY)
        self.assertEqual(len(factory.clients), 2)
        self.assertEqual(report.errors[0], "Apple: error refused")

    def test_missing_wifi_device_keeps_first_errors(self):
        commands = StubCommandRunner(default="")
        commands.add(MACOS_CONFIG.gateway_command, "nothing")
        factory = ClientFactory({APPLE: UNREACHABLE, GOOGLE: UNREACHABLE})
        report = _guard(factory, commands=commands).run()
        self.assertEqual(report.status, ExecutionStatus.NETWORK_NOT_READY)
        self.assertFalse(report.retried)
        self.assertEqual(report.errors, ["Apple: error refused", "Google: error refused", "gateway_ip"])
        self.assertEqual(len(factory.clients), 1)

    def test_portal_open_failure_propagates(self):
        factory = ClientFactory({APPLE: HttpResponse(ok=True, status_code=302, headers={"location": "http://portal"})})
        guard = _guard(factory, opener=RecordingOpener(error=PortalOpenError("no browser")))
        with self.assertRaises(PortalOpenError):
            guard.run()

    def test_client_setup_failure_propagates(self):
        def broken_factory(timeout):
            raise ClientSetupError("failed to build http client")

        with self.assertRaises(ClientSetupError):
            _guard(broken_factory).run()

    def test_preset_cancel_flag_reports_not_ready(self):
        flag = CancelFlag()
        flag.set()
        factory = ClientFactory(HEALTHY)
        report = _guard(factory, cancel_flag=flag).run()
        self.assertEqual(report.status, ExecutionStatus.NETWORK_NOT_READY)
        self.assertEqual(report.errors, ["canceled", "canceled"])
        self.assertFalse(report.retried)
        self.assertEqual(len(factory.clients), 1)
        self.assertEqual(factory.clients[0].requests, [])

    def test_progress_option_wraps_client(self):
        seen = []

        class Engine:
            def detect(self, context):
                seen.append(context.net)
                return RunReport(status=ExecutionStatus.COMPLETED)

        factory = ClientFactory(HEALTHY)
        _guard(factory, options=Options(progress=True), engine=Engine(), progress_stream=io.StringIO()).run()
        self.assertIsInstance(seen[0], ProgressHttpClient)
        self.assertTrue(factory.clients[0].closed)

    def test_command_timeout_follows_options_timeout(self):
        guard = Reauthfi(Options(timeout=3), config=MACOS_CONFIG, settings=SETTINGS)
        self.assertEqual(guard.commands.timeout, 3)

    def test_command_timeout_is_capped_by_settings(self):
        settings = EngineSettings(command_timeout_cap=4)
        guard = Reauthfi(Options(timeout=30), config=MACOS_CONFIG, settings=settings)
        self.assertEqual(guard.commands.timeout, 4)

    def test_module_level_run_entry_point(self):
        factory = ClientFactory(HEALTHY)
        report = run(
            Options(),
            config=MACOS_CONFIG,
            settings=SETTINGS,
            commands=_commands(),
            client_factory=factory,
            opener=RecordingOpener(),
            sleep=lambda _: None,
        )
        self.assertEqual(report.status, ExecutionStatus.COMPLETED)


class TestSystemPortalOpener(unittest.TestCase):
    def test_opens_with_platform_command(self):
        runner = StubCommandRunner(default="")
        SystemPortalOpener(MACOS_CONFIG, runner).open("http://portal")
        self.assertEqual(runner.calls, [("open", "http://portal")])

    def test_command_failure_becomes_portal_open_error(self):
        runner = StubCommandRunner(default=CommandError(("open",), "exit code 1"))
        with self.assertRaises(PortalOpenError):
            SystemPortalOpener(MACOS_CONFIG, runner).open("http://portal")


if __name__ == "__main__":
    unittest.main()

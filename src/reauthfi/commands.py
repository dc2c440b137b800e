# SPDX-FileCopyrightText: 2026 The reauthfi Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Shell command execution behind a small protocol so tests can substitute canned output."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from typing import Protocol

from .errors import CommandError

logger = logging.getLogger(__name__)


class CommandRunner(Protocol):
    def run(self, argv: Sequence[str]) -> str: ...


class SystemCommandRunner(CommandRunner):
    """Run commands with subprocess; non-zero exit raises CommandError with the exit code and stderr."""

    def __init__(self, timeout: float | None = None):
        self.timeout = timeout

    def run(self, argv: Sequence[str]) -> str:
        if not argv:
            raise CommandError((), "empty command")
        logger.debug("Running %s", " ".join(argv))
        try:
            completed = subprocess.run(
                list(argv),
                capture_output=True,
                text=True,
                errors="replace",
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            raise CommandError(argv, f"timed out after {exc.timeout}s") from exc
        except OSError as exc:
            raise CommandError(argv, str(exc)) from exc

        if completed.returncode != 0:
            if completed.returncode < 0:
                status = "terminated by signal"
            else:
                status = f"exit code {completed.returncode}"
            detail = (completed.stderr or "").strip()
            message = f"{status} ({detail})" if detail else status
            raise CommandError(argv, message, exit_code=completed.returncode)

        return completed.stdout or ""


class StubCommandRunner(CommandRunner):
    """Programmable CommandRunner for tests: maps the joined argv to stdout text or an exception."""

    def __init__(self, outputs: dict[str, str | Exception] | None = None, default: str | Exception | None = None):
        self._outputs = dict(outputs or {})
        self._default = default
        self.calls: list[tuple[str, ...]] = []

    def add(self, argv: Sequence[str], output: str | Exception) -> None:
        self._outputs[" ".join(argv)] = output

    def run(self, argv: Sequence[str]) -> str:
        self.calls.append(tuple(argv))
        output = self._outputs.get(" ".join(argv), self._default)
        if output is None:
            raise CommandError(argv, "no stubbed output configured", exit_code=127)
        if isinstance(output, Exception):
            raise output
        return output


__all__ = ["CommandRunner", "StubCommandRunner", "SystemCommandRunner"]

# SPDX-FileCopyrightText: 2026 The reauthfi Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for reauthfi."""

from __future__ import annotations

import logging
import os

DEFAULT_LOG_LEVEL = os.getenv("REAUTHFI_LOG_LEVEL", "WARNING").upper()
VERBOSE_FORMAT = "%(levelname)s %(name)s: %(message)s"
PLAIN_FORMAT = "  %(message)s"
NOISY_LOGGERS = ("httpx", "httpcore")


def setup_logging(level: str | None = None, *, verbose: bool = False) -> None:
    """
    Configure standard logging for CLI/library use.

    Progress lines go out as plain indented messages; `verbose` switches to the
    level/logger format and lets httpx report each request.
    """
    effective_level = (level or DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, effective_level, logging.WARNING),
        format=VERBOSE_FORMAT if verbose else PLAIN_FORMAT,
    )
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET if verbose else logging.WARNING)


__all__ = ["setup_logging"]

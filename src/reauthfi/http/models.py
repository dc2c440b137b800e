# SPDX-FileCopyrightText: 2026 The reauthfi Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP response model consumed by the classifier and strategies."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from ..errors import ErrorCategory, categorize_exception

Headers = dict[str, str]


def normalize_headers(headers: Mapping[str, Any] | None) -> Headers:
    """Lower-case header names and stringify values."""
    normalized: Headers = {}
    for key, value in (headers or {}).items():
        if key is None:
            continue
        normalized[str(key).lower()] = "" if value is None else str(value)
    return normalized


@dataclass
class HttpResponse:
    """
    Normalized response (or transport failure) for a single GET.

    `ok=False` means the request never produced a status line; `error_*` fields
    describe why. The body is not fetched until `read_text()` is called, and the
    first result (text or BodyReadError) is what every later call sees.
    """

    ok: bool
    status_code: int | None = None
    headers: Headers = field(default_factory=dict)
    url: str | None = None
    text: str | None = None
    error_message: str | None = None
    error_type: str | None = None
    error_category: ErrorCategory = ErrorCategory.NONE
    body_reader: Callable[[], str] | None = field(default=None, repr=False)
    closer: Callable[[], None] | None = field(default=None, repr=False)
    _body_error: Exception | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        self.headers = normalize_headers(self.headers)

    @classmethod
    def from_exception(cls, exc: Exception, *, url: str | None = None) -> HttpResponse:
        return cls(
            ok=False,
            url=url,
            error_message=str(exc) or type(exc).__name__,
            error_type=type(exc).__name__,
            error_category=categorize_exception(exc),
        )

    @property
    def is_redirect(self) -> bool:
        return self.status_code is not None and 300 <= self.status_code < 400

    @property
    def is_success(self) -> bool:
        return self.status_code is not None and 200 <= self.status_code < 300

    def header(self, name: str) -> str | None:
        return self.headers.get(name.lower())

    def read_text(self) -> str:
        """Return the body, fetching it on first use. Raises BodyReadError if it cannot be read."""
        if self._body_error is not None:
            raise self._body_error
        if self.text is None:
            if self.body_reader is None:
                self.text = ""
            else:
                try:
                    self.text = self.body_reader()
                except Exception as exc:
                    self._body_error = exc
                    raise
        return self.text

    def close(self) -> None:
        if self.closer is not None:
            closer, self.closer = self.closer, None
            closer()


__all__ = ["Headers", "HttpResponse", "normalize_headers"]

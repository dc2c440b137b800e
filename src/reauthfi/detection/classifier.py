# SPDX-FileCopyrightText: 2026 The reauthfi Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Response classification.

`classify` maps one probe response (or transport failure) to an Outcome. It has
no side effects beyond reading the response body, and it reads the body only
for 2xx responses whose target can still be decided by content: meta-refresh
targets, or targets without an expected status.

Decision order, first match wins:
  1. 3xx with a Location header -> Portal(location)
  2. status equals the target's expected status -> ExpectedOk
  3. meta-refresh allowed and body carries `content="N;url=http..."` -> Portal(url)
  4. no expected status and body contains "success" -> ExpectedOk
  5. otherwise -> Mismatch(status)
"""

from __future__ import annotations

import re

from ..errors import BodyReadError, ErrorCategory
from ..http.models import HttpResponse
from ..models import DetectionTarget, Outcome

META_REFRESH_RE = re.compile(r"""content\s*=\s*["']?\d+\s*;\s*url\s*=\s*([^"'\s>]+)""", re.IGNORECASE)
SUCCESS_MARKER = "success"


def extract_meta_refresh(html: str) -> str | None:
    """Return the absolute URL of the first meta-refresh directive, if any."""
    match = META_REFRESH_RE.search(html or "")
    if not match:
        return None
    url = match.group(1)
    return url if url.startswith("http") else None


def redirect_location(response: HttpResponse) -> str | None:
    if not response.is_redirect:
        return None
    return response.header("location") or None


def _format_seconds(timeout: float | None) -> str:
    return f"{timeout:g}s" if timeout is not None else "?s"


def describe_transport_error(name: str, response: HttpResponse, timeout: float | None = None) -> str:
    if response.error_category is ErrorCategory.TIMEOUT:
        return f"{name}: timeout ({_format_seconds(timeout)})"
    if response.error_category is ErrorCategory.CONNECTION_ERROR:
        return f"{name}: connect error"
    return f"{name}: error {response.error_message or response.error_type or 'unknown'}"


def should_read_body(target: DetectionTarget, response: HttpResponse) -> bool:
    return response.is_success and (target.allow_meta_refresh or target.expected_status is None)


def classify(target: DetectionTarget, response: HttpResponse, timeout: float | None = None) -> Outcome:
    if not response.ok or response.status_code is None:
        return Outcome.issue(describe_transport_error(target.name, response, timeout))

    status_code = response.status_code

    location = redirect_location(response)
    if location:
        return Outcome.portal(location)

    if target.expected_status is not None and status_code == target.expected_status:
        return Outcome.expected_ok()

    if should_read_body(target, response):
        try:
            body = response.read_text()
        except BodyReadError:
            return Outcome.issue(f"{target.name}: failed to read body")

        if target.allow_meta_refresh:
            portal_url = extract_meta_refresh(body)
            if portal_url:
                return Outcome.portal(portal_url)

        if target.expected_status is None and SUCCESS_MARKER in body.lower():
            return Outcome.expected_ok()

    return Outcome.mismatch(status_code)


__all__ = [
    "classify",
    "describe_transport_error",
    "extract_meta_refresh",
    "redirect_location",
    "should_read_body",
]

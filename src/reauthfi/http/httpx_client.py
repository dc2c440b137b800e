# SPDX-FileCopyrightText: 2026 The reauthfi Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed NetworkClient implementation."""

from __future__ import annotations

import httpx

from ..config import EngineSettings, load_engine_settings
from ..errors import BodyReadError, ClientSetupError
from .client import NetworkClient
from .models import HttpResponse, normalize_headers

MAX_BODY_BYTES = 1024 * 1024


def _build_timeout(timeout: float, connect_cap: float) -> httpx.Timeout:
    return httpx.Timeout(timeout, connect=min(timeout, connect_cap))


class HttpxClient(NetworkClient):
    """Synchronous httpx client wrapper that never follows redirects."""

    def __init__(
        self,
        timeout: float | None = None,
        settings: EngineSettings | None = None,
        client: httpx.Client | None = None,
    ):
        self.settings = settings or load_engine_settings()
        self.timeout = float(timeout if timeout is not None else self.settings.timeout)
        if client is not None:
            self._client = client
            return
        try:
            self._client = httpx.Client(
                follow_redirects=False,
                timeout=_build_timeout(self.timeout, self.settings.connect_timeout_cap),
                headers={"User-Agent": self.settings.user_agent},
            )
        except Exception as exc:  # noqa: BLE001
            raise ClientSetupError(f"failed to build http client: {exc}") from exc

    def get(self, url: str, timeout: float | None = None) -> HttpResponse:
        effective = float(timeout if timeout is not None else self.timeout)
        try:
            request = self._client.build_request(
                "GET",
                url,
                timeout=_build_timeout(effective, self.settings.connect_timeout_cap),
            )
            resp = self._client.send(request, stream=True, follow_redirects=False)
        except Exception as exc:  # noqa: BLE001
            return HttpResponse.from_exception(exc, url=url)

        return HttpResponse(
            ok=True,
            status_code=resp.status_code,
            headers=normalize_headers(resp.headers),
            url=str(resp.url),
            body_reader=lambda: self._read_body(resp),
            closer=resp.close,
        )

    @staticmethod
    def _read_body(resp: httpx.Response) -> str:
        content = bytearray()
        try:
            for chunk in resp.iter_bytes():
                if not chunk:
                    continue
                remaining = MAX_BODY_BYTES - len(content)
                if len(chunk) >= remaining:
                    content.extend(chunk[:remaining])
                    break
                content.extend(chunk)
        except httpx.HTTPError as exc:
            raise BodyReadError(str(exc) or type(exc).__name__) from exc
        finally:
            resp.close()

        encoding = resp.encoding or "utf-8"
        try:
            return bytes(content).decode(encoding, errors="replace")
        except LookupError:
            return bytes(content).decode("utf-8", errors="replace")

    def close(self) -> None:
        self._client.close()

"""
Default HTTP transport used by the ``HTTP`` builtin module.

A transport is any callable ``(method, url, headers, body, timeout)`` that
returns ``(status, headers, text)``. Tests and embedding applications pass
their own through :class:`~flowlang.service.FlowService`.
"""

from __future__ import annotations

import urllib.error
import urllib.request
from typing import Callable, Dict, Optional, Tuple

from ..config import DEFAULT_HTTP_TIMEOUT

HTTPResult = Tuple[int, Dict[str, str], str]
HTTPClient = Callable[[str, str, Dict[str, str], Optional[bytes], Optional[float]], HTTPResult]


def http_request(
    method: str, url: str, headers: dict[str, str], body: bytes | None, timeout: float | None = None
) -> HTTPResult:
    req = urllib.request.Request(url, data=body, headers=headers, method=method)
    try:  # pragma: no cover - exercised via monkeypatch in tests
        with urllib.request.urlopen(req, timeout=timeout or DEFAULT_HTTP_TIMEOUT) as resp:
            text = resp.read().decode("utf-8", errors="replace")
            status = resp.getcode()
            resp_headers = dict(resp.headers.items())
            return status, resp_headers, text
    except urllib.error.HTTPError as exc:  # pragma: no cover - fallback
        text = exc.read().decode("utf-8", errors="replace") if exc.fp else ""
        resp_headers = dict(exc.headers.items()) if exc.headers else {}
        return exc.code, resp_headers, text

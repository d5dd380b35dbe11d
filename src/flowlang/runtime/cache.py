from __future__ import annotations

import json
import threading
import time
from dataclasses import dataclass
from hashlib import sha256
from typing import Any, Dict, Optional


@dataclass
class _CacheEntry:
    value: Any
    expires_at: float | None


class ResponseCache:
    """
    In-process cache of HTTP responses with TTL support. Not distributed.

    Owned by a :class:`~flowlang.service.FlowService` and handed to every
    interpreter it creates, so two services never share entries.
    Evaluations run in worker threads, hence the lock.
    """

    def __init__(self, ttl: float | None = 300.0) -> None:
        self.ttl = ttl
        self._store: Dict[str, _CacheEntry] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Any | None:
        with self._lock:
            entry = self._store.get(key)
            if not entry:
                return None
            if entry.expires_at is not None and entry.expires_at < time.monotonic():
                self._store.pop(key, None)
                return None
            return entry.value

    def set(self, key: str, value: Any, ttl: float | None = None) -> None:
        ttl = self.ttl if ttl is None else ttl
        expires = time.monotonic() + ttl if ttl else None
        with self._lock:
            self._purge_expired()
            self._store[key] = _CacheEntry(value=value, expires_at=expires)

    def _purge_expired(self) -> None:
        now = time.monotonic()
        expired = [key for key, entry in self._store.items() if entry.expires_at is not None and entry.expires_at < now]
        for key in expired:
            del self._store[key]

    def clear(self) -> None:
        with self._lock:
            self._store.clear()

    def __len__(self) -> int:
        return len(self._store)


def _stable_json(value: Any) -> str:
    try:
        return json.dumps(value, sort_keys=True, default=str)
    except (TypeError, ValueError):
        return str(value)


def build_response_cache_key(method: str, url: str, headers: Optional[dict] = None, body: bytes | None = None) -> str:
    data = {
        "method": method.upper(),
        "url": url,
        "headers": headers or {},
        "body": body.decode("utf-8", errors="replace") if body else None,
    }
    return sha256(_stable_json(data).encode("utf-8")).hexdigest()

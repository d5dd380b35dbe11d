"""
Environment driven configuration for the Flow service, CLI and server.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

DEFAULT_LANGUAGE = "en-US"
DEFAULT_HTTP_TIMEOUT = 15.0
DEFAULT_MAX_CALL_STACK = 99
DEFAULT_HTTP_CACHE_TTL = 300.0


def _env_bool(environ: Mapping[str, str], name: str, default: bool = False) -> bool:
    val = environ.get(name)
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "on"}


def _env_float(environ: Mapping[str, str], name: str, default: float) -> float:
    try:
        return float(environ.get(name, default))
    except (TypeError, ValueError):
        return default


def _env_int(environ: Mapping[str, str], name: str, default: int) -> int:
    try:
        return int(environ.get(name, default))
    except (TypeError, ValueError):
        return default


@dataclass
class FlowConfig:
    language: str = DEFAULT_LANGUAGE
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    max_call_stack_size: int = DEFAULT_MAX_CALL_STACK
    http_cache_enabled: bool = False
    http_cache_ttl: float = DEFAULT_HTTP_CACHE_TTL
    log_level: str = "WARNING"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])


def load_config(env: Optional[Mapping[str, str]] = None) -> FlowConfig:
    environ = env if env is not None else os.environ
    origins = [
        origin.strip()
        for origin in (environ.get("FLOW_CORS_ORIGINS") or "*").split(",")
        if origin.strip()
    ]
    max_stack = _env_int(environ, "FLOW_MAX_CALL_STACK", DEFAULT_MAX_CALL_STACK)
    return FlowConfig(
        language=environ.get("FLOW_LANGUAGE") or DEFAULT_LANGUAGE,
        http_timeout=_env_float(environ, "FLOW_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT),
        max_call_stack_size=max_stack if max_stack > 0 else DEFAULT_MAX_CALL_STACK,
        http_cache_enabled=_env_bool(environ, "FLOW_HTTP_CACHE", False),
        http_cache_ttl=_env_float(environ, "FLOW_HTTP_CACHE_TTL", DEFAULT_HTTP_CACHE_TTL),
        log_level=(environ.get("FLOW_LOG_LEVEL") or "WARNING").upper(),
        cors_origins=origins or ["*"],
    )

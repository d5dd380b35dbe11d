"""Application factory that builds the FastAPI app with all wiring."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI

from ...config import FlowConfig, load_config
from ...observability import configure_logging
from ...runtime.transport import HTTPClient
from ...service import FlowServiceCache
from ...version import __version__
from ..routes.flow import build_flow_router
from ..routes.health import build_health_router
from .middleware import setup_middleware

log = logging.getLogger(__name__)


def create_app(config: Optional[FlowConfig] = None, *, http_client: Optional[HTTPClient] = None) -> FastAPI:
    config = config or load_config()
    configure_logging(config.log_level)
    app = FastAPI(title="Flow", version=__version__)
    services = FlowServiceCache(config, http_client=http_client)
    app.state.config = config
    app.state.flow_services = services

    setup_middleware(app, config.cors_origins)
    app.include_router(build_health_router())
    app.include_router(build_flow_router(services))
    log.debug("Flow API ready (default language %s)", config.language)
    return app


__all__ = ["create_app"]

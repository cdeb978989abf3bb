# fxa/content/main.py
"""
Content service application factory.

Creates a FastAPI application serving the attached-clients roster of the
signed-in account and the CSP violation report endpoints.
"""
from __future__ import annotations

import logging
import sys

from fastapi import FastAPI

from fxa.content.api.attached_clients import router as attached_clients_router
from fxa.content.api.csp import build_csp_router
from fxa.content.api.discovery import router as discovery_router
from fxa.content.contracts.infrastructure import Infrastructure
from fxa.content.core.attached.coordinator import ClientFetchCoordinator
from fxa.content.core.attached.service import AttachedClientsService
from fxa.content.core.config import Settings, settings as default_settings
from fxa.content.core.reporting.csp import CspReporter
from fxa.content.core.sources.account_api import AccountApiClient
from fxa.content.core.sources.loader import load_and_register_sources
from fxa.content.core.sources.registry import SourcesRegistry

logger = logging.getLogger(__name__)


# -- Helpers -------------------------------------------------------------------


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        stream=sys.stdout,
        format="%(asctime)s %(levelname)-8s %(name)s  %(message)s",
    )


def _load_sources(settings: Settings) -> SourcesRegistry:
    registry = SourcesRegistry()
    try:
        load_and_register_sources(
            patterns=settings.sources_config_paths,
            registry=registry,
        )
    except Exception:
        logger.exception("Failed to load sources")
        raise

    if settings.account_source not in registry:
        logger.info(
            "Source '%s' not configured, using account API at %s",
            settings.account_source,
            settings.account_api_url,
        )
        registry.register(
            settings.account_source,
            AccountApiClient(
                base_url=settings.account_api_url,
                timeout=settings.account_api_timeout,
            ),
        )
    return registry


def _csp_reporters(settings: Settings) -> dict[str, CspReporter]:
    csp = settings.csp
    reporters: dict[str, CspReporter] = {}
    if csp.enabled:
        reporters[csp.path] = CspReporter(op=csp.op)
    if csp.report_only_enabled:
        reporters[csp.report_only_path] = CspReporter(op=csp.report_only_op)
    return reporters


# -- Application factory -------------------------------------------------------


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build and wire the content service FastAPI application."""
    settings = settings or default_settings
    _configure_logging(settings.log_level)
    logger.info("Creating content application (env=%s)", settings.app_env)

    # 1. Sources and the attached-clients service
    sources_registry = _load_sources(settings)
    coordinator = ClientFetchCoordinator(sources_registry.resolve(settings.account_source))
    infra = Infrastructure(
        sources_registry=sources_registry,
        attached_clients=AttachedClientsService(coordinator=coordinator),
        csp_reporters=_csp_reporters(settings),
    )

    # 2. FastAPI app
    app = FastAPI(
        title="Accounts content service",
        version="1.0.0",
        description="Attached clients roster and CSP violation reporting",
    )
    app.state.infra = infra

    app.include_router(discovery_router)
    app.include_router(attached_clients_router)

    for path, reporter in infra.csp_reporters.items():
        app.include_router(build_csp_router(path=path, reporter=reporter))
        logger.info("Mounted CSP report endpoint %s (op=%s)", path, reporter.op)

    logger.info(
        "Content application ready: %d source(s), %d CSP endpoint(s)",
        len(sources_registry),
        len(infra.csp_reporters),
    )
    return app

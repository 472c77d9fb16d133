"""
Main entrypoint for the Seminar Registry API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The ``create_app`` function builds the
in‑memory store, the simulated gateway and the certificate designer
and attaches them to ``app.state``; route handlers receive them through
the dependencies in ``core.dependencies``.  Run with::

    uvicorn seminar_registry.app.main:app --reload
"""

from typing import Optional

from fastapi import FastAPI

from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .services.design_service import CertificateDesignService
from .services.gateway import SeminarGateway, SimulatedGateway
from .services.store import SeminarStore


def create_app(
    settings: Optional[Settings] = None,
    *,
    gateway: Optional[SeminarGateway] = None,
    design_service: Optional[CertificateDesignService] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use instead of the module level settings.
    gateway : Optional[SeminarGateway]
        Gateway to serve requests from.  Defaults to a
        ``SimulatedGateway`` over a freshly seeded store.
    design_service : Optional[CertificateDesignService]
        Background generator.  Defaults to one built from ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    if gateway is None:
        store = SeminarStore.seeded(enforce_seminar_reference=settings.enforce_seminar_reference)
        gateway = SimulatedGateway(store, delay=settings.api_delay, bulk_delay=settings.bulk_delay)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings
    app.state.gateway = gateway
    app.state.design_service = design_service or CertificateDesignService.from_settings(settings)

    app.include_router(v1_router, prefix="/api/v1")
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()

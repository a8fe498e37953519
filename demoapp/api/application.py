"""FastAPI application factory for the demo web application.

This module defines page routing and static image serving.
"""

import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from demoapp.config import AppSettings
from demoapp.domain import domain_format_megabytes
from demoapp.stats import StatsCollectorPort

from .routers import api_create_landing_router, api_create_stats_router

logger = logging.getLogger(__name__)

TEMPLATE_DIRECTORY = Path(__file__).resolve().parent.parent / "templates"


def api_create_templates() -> Jinja2Templates:
    """Create the page template renderer with display filters registered.

    Returns:
        Jinja2Templates: Renderer loading templates from the package directory.
    """

    templates = Jinja2Templates(directory=str(TEMPLATE_DIRECTORY))
    templates.env.filters["megabytes"] = domain_format_megabytes
    return templates


def create_api_application(settings: AppSettings, stats_collector: StatsCollectorPort) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings.
        stats_collector: Stats collector used by the stats page.

    Returns:
        FastAPI: Framework application with page routes and `/img` mounted.

    Raises:
        RuntimeError: Raised when the image directory does not exist.
    """

    # Only the page routes and /img are served.
    application = FastAPI(title="Demo App", docs_url=None, redoc_url=None, openapi_url=None)
    templates = api_create_templates()

    application.include_router(api_create_landing_router(settings=settings, templates=templates))
    application.include_router(api_create_stats_router(stats_collector=stats_collector, templates=templates))

    logger.debug("Serving images from %s", settings.image_directory)
    application.mount("/img", StaticFiles(directory=settings.image_directory), name="img")

    return application

"""Landing page router composition."""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from demoapp.config import AppSettings


def api_create_landing_router(settings: AppSettings, templates: Jinja2Templates) -> APIRouter:
    """Create router exposing the landing page.

    Args:
        settings: Runtime settings holding the configured display value.
        templates: Template renderer for HTML pages.

    Returns:
        APIRouter: Router exposing `/`.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if settings is None:
        raise ValueError("settings must not be None")
    if templates is None:
        raise ValueError("templates must not be None")

    router = APIRouter(tags=["pages"])

    @router.get("/", response_class=HTMLResponse)
    def api_landing_page(request: Request) -> HTMLResponse:
        """Render the landing page with the configured display value."""

        return templates.TemplateResponse(
            request,
            "landing.html",
            {"display_value": settings.display_value},
        )

    return router

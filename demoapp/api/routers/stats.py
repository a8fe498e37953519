"""Stats page router composition for process and environment diagnostics."""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from demoapp.domain import (
    CONTAINER_BASE_IMAGE,
    CONTAINER_RUNTIME_USER,
    DEPLOYMENT_STACK_TABLE,
    INFRASTRUCTURE_TABLE,
    POD_REPLICAS_NOTE,
    REQUEST_FLOW_STEPS,
    SECURITY_POSTURE_TABLE,
)
from demoapp.stats import StatsCollectorPort


def api_create_stats_router(stats_collector: StatsCollectorPort, templates: Jinja2Templates) -> APIRouter:
    """Create router exposing the stats page.

    Args:
        stats_collector: Stats-layer collector queried on every request.
        templates: Template renderer for HTML pages.

    Returns:
        APIRouter: Router exposing `/stats`.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if stats_collector is None:
        raise ValueError("stats_collector must not be None")
    if templates is None:
        raise ValueError("templates must not be None")

    router = APIRouter(tags=["pages"])

    @router.get("/stats", response_class=HTMLResponse)
    def api_stats_page(request: Request) -> HTMLResponse:
        """Render a fresh process snapshot next to the static deployment tables.

        Args:
            request: Incoming request, required by the template renderer.

        Returns:
            HTMLResponse: Rendered stats page.

        Raises:
            RuntimeError: Raised when the process snapshot cannot be collected.
        """

        snapshot = stats_collector.stats_collect_snapshot()
        return templates.TemplateResponse(
            request,
            "stats.html",
            {
                "stats": snapshot,
                "infrastructure_table": INFRASTRUCTURE_TABLE,
                "deployment_stack_table": DEPLOYMENT_STACK_TABLE,
                "security_posture_table": SECURITY_POSTURE_TABLE,
                "container_base_image": CONTAINER_BASE_IMAGE,
                "container_runtime_user": CONTAINER_RUNTIME_USER,
                "pod_replicas_note": POD_REPLICAS_NOTE,
                "request_flow": "\n    ↓\n".join(REQUEST_FLOW_STEPS),
            },
        )

    return router

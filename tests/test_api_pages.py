"""Tests for landing page, stats page and static image routing.

These tests validate rendered HTML content and default framework behavior
for unknown paths and missing images.
"""

import pytest
from fastapi.testclient import TestClient

from demoapp.api.application import create_api_application
from demoapp.config import AppSettings
from demoapp.domain import EnvironmentReport, MemoryUsage, StatsSnapshot
from demoapp.stats import ProcessStatsCollector


class _FixedStatsCollector:
    """Test double returning a deterministic snapshot."""

    def __init__(self):
        self.call_count = 0

    def stats_collect_snapshot(self) -> StatsSnapshot:
        """Return fixed snapshot and count invocations.

        Returns:
            StatsSnapshot: Deterministic snapshot payload.

        Raises:
            RuntimeError: Never raised by this test double.
        """

        self.call_count += 1
        return StatsSnapshot(
            hostname="web-7d9f-abc",
            platform="linux",
            architecture="x86_64",
            runtime_version="3.12.4",
            uptime_seconds=1234,
            memory=MemoryUsage(
                rss_bytes=52_428_800,
                vms_bytes=104_857_600,
                private_bytes=1_572_864,
                shared_bytes=0,
            ),
            environment=EnvironmentReport(
                display_value="xyz",
                port="8080",
                namespace="demo",
                pod_name="web-7d9f-abc",
                node_name="ip-10-0-1-12",
                pod_ip="10.0.1.45",
            ),
        )


def _build_client(settings: AppSettings | None = None, stats_collector=None) -> TestClient:
    """Create a test client over a freshly composed application.

    Args:
        settings: Optional settings override.
        stats_collector: Optional stats collector override.

    Returns:
        TestClient: Client bound to the application.
    """

    application = create_api_application(
        settings if settings is not None else AppSettings(display_value="abc123"),
        stats_collector if stats_collector is not None else _FixedStatsCollector(),
    )
    return TestClient(application)


def test_api_landing_page_renders_configured_display_value() -> None:
    """Return HTTP 200 HTML containing the configured value.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when response does not match expected content.
    """

    client = _build_client(settings=AppSettings(display_value="release-2024.10"))

    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "<code>release-2024.10</code>" in response.text
    assert 'src="/img/appflow.png"' in response.text
    assert "openModal()" in response.text
    assert 'href="/stats"' in response.text


def test_api_landing_page_renders_default_value_for_blank_setting() -> None:
    """Show the literal default when the display value is blank."""

    client = _build_client(settings=AppSettings(display_value=""))

    response = client.get("/")

    assert response.status_code == 200
    assert "<code>abc123</code>" in response.text


def test_api_landing_and_stats_pages_agree_on_whitespace_display_value(monkeypatch: pytest.MonkeyPatch) -> None:
    """Render a whitespace-only DISPLAY_VALUE as-is on both pages.

    Returns:
        None: Assertions validate both pages.

    Raises:
        AssertionError: Raised when either page substitutes the value.
    """

    monkeypatch.setenv("DISPLAY_VALUE", "   ")
    client = _build_client(settings=AppSettings(), stats_collector=ProcessStatsCollector())

    landing_response = client.get("/")
    stats_response = client.get("/stats")

    assert "<code>   </code>" in landing_response.text
    assert "<code>abc123</code>" not in landing_response.text
    assert "<code>   </code>" in stats_response.text


def test_api_landing_page_encodes_ampersand_for_browser_rendering() -> None:
    """Entity-encode metacharacters so the browser shows the raw value."""

    client = _build_client(settings=AppSettings(display_value="a&b"))

    response = client.get("/")

    assert "<code>a&amp;b</code>" in response.text


def test_api_landing_page_escapes_markup_in_display_value() -> None:
    """Render markup in the display value as text."""

    client = _build_client(settings=AppSettings(display_value="<b>bold</b>"))

    response = client.get("/")

    assert "&lt;b&gt;bold&lt;/b&gt;" in response.text
    assert "<b>bold</b>" not in response.text


def test_api_stats_page_renders_snapshot_fields() -> None:
    """Return HTTP 200 HTML interpolating every snapshot field.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when a snapshot field is missing from the page.
    """

    client = _build_client()

    response = client.get("/stats")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    for expected_text in (
        "<code>web-7d9f-abc</code>",
        "linux / x86_64",
        "<code>3.12.4</code>",
        "1234 seconds",
        "<code>demo</code>",
        "<code>ip-10-0-1-12</code>",
        "<code>10.0.1.45</code>",
        "<code>xyz</code>",
        "<code>8080</code>",
    ):
        assert expected_text in response.text


def test_api_stats_page_formats_memory_in_megabytes() -> None:
    """Render byte counts divided by 1,048,576 with two decimals."""

    client = _build_client()

    response = client.get("/stats")

    assert "50.00 MB" in response.text
    assert "100.00 MB" in response.text
    assert "1.50 MB" in response.text
    assert "0.00 MB" in response.text


def test_api_stats_page_renders_static_deployment_tables() -> None:
    """Include the static infrastructure description content."""

    client = _build_client()

    response = client.get("/stats")

    assert "Amazon EKS" in response.text
    assert "Pulumi (Go SDK)" in response.text
    assert "Running as UID 1001" in response.text
    assert "Browser (HTTPS:443)" in response.text


def test_api_stats_page_collects_fresh_snapshot_per_request() -> None:
    """Query the stats collector once per request without caching."""

    stats_collector = _FixedStatsCollector()
    client = _build_client(stats_collector=stats_collector)

    client.get("/stats")
    client.get("/stats")

    assert stats_collector.call_count == 2


def test_api_stats_page_shows_not_set_for_missing_environment() -> None:
    """Show the not-set sentinel for each unset variable and the default port.

    Returns:
        None: Assertions validate fallback rendering.

    Raises:
        AssertionError: Raised when fallbacks are not rendered.
    """

    client = _build_client(stats_collector=ProcessStatsCollector(environ={}))

    response = client.get("/stats")

    assert response.status_code == 200
    assert response.text.count("<code>not set</code>") == 5
    assert "<code>3000</code>" in response.text


def test_api_serves_existing_image_with_png_content_type() -> None:
    """Serve packaged images under /img."""

    client = _build_client()

    response = client.get("/img/appflow.png")

    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    assert response.content.startswith(b"\x89PNG")


def test_api_returns_not_found_for_missing_image() -> None:
    """Return HTTP 404 for files absent from the image directory."""

    client = _build_client()

    assert client.get("/img/missing.png").status_code == 404


def test_api_returns_not_found_for_unknown_paths() -> None:
    """Return HTTP 404 for paths without a route, including docs routes."""

    client = _build_client()

    assert client.get("/nope").status_code == 404
    assert client.get("/docs").status_code == 404
    assert client.get("/openapi.json").status_code == 404


def test_api_returns_method_not_allowed_for_wrong_method_on_page_route() -> None:
    """Keep the framework default 405 for non-GET requests to page routes."""

    client = _build_client()

    assert client.post("/").status_code == 405
    assert client.post("/stats").status_code == 405

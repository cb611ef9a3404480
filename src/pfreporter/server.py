"""ASGI server for pfreporter.

Routes:
    GET /                         welcome page
    GET /health                   health check
    GET /test                     dashboard rendered from simulated data
    GET /mock/{test}/{plant}      report page (scale labels reduced to numbers)
    GET /csv/{test}/{plant}       page embedding the records as CSV
    GET /api/{test}/{plant}       records as JSON (raw scale labels)
    GET /api/{test}/{plant}/csv   records as CSV
    /static                       stylesheet and chart script

Every report route fetches the upstream page once, extracts it once and
hands the records to one output adapter. Upstream, extraction and template
failures become 500 responses; nothing is retried.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from starlette.applications import Starlette
from starlette.concurrency import run_in_threadpool
from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse, PlainTextResponse, Response
from starlette.routing import Mount, Route
from starlette.staticfiles import StaticFiles

from pfreporter._resources import get_static_dir
from pfreporter.config import PresentationConfig, ReporterConfig
from pfreporter.extract import ExtractedRecord, ExtractionError, extract_report
from pfreporter.fetch import ReportClient, ReportFetchError, ReportReadError
from pfreporter.reports import (
    DEMO_METRIC_NAME,
    DEMO_PLANT,
    DEMO_TEST,
    DEMO_TITLE,
    DEMO_UNIT,
    RenderError,
    ReportRenderer,
    build_csv_page_context,
    build_report_context,
    demo_records,
    records_to_csv,
    records_to_json,
)

logger = logging.getLogger(__name__)


@dataclass
class AppState:
    """Collaborators shared by all request handlers."""

    config: ReporterConfig
    client: ReportClient
    renderer: ReportRenderer


def _state(request: Request) -> AppState:
    return request.app.state.reporter


async def _fetch_records(request: Request, clean_scale: bool) -> list[ExtractedRecord]:
    state = _state(request)
    test = request.path_params["test"]
    plant = request.path_params["plant"]
    logger.info(f"Incoming request: {request.url.path}")

    html = await run_in_threadpool(state.client.fetch_report, test, plant)
    return extract_report(
        html,
        markers=state.config.markers.to_markers(),
        clean_scale=clean_scale,
    )


# =============================================================================
# Handlers
# =============================================================================


async def welcome(request: Request) -> HTMLResponse:
    html = _state(request).renderer.render("welcome.html.j2", {})
    return HTMLResponse(html)


async def health_check(_: Request) -> JSONResponse:
    logger.debug("Health check requested")
    return JSONResponse({"status": "ok"})


async def report_page(request: Request) -> HTMLResponse:
    state = _state(request)
    records = await _fetch_records(request, clean_scale=True)
    context = build_report_context(
        records,
        test=request.path_params["test"],
        plant=request.path_params["plant"],
        presentation=state.config.presentation,
        links=state.config.links,
    )
    return HTMLResponse(state.renderer.render("report.html.j2", context))


async def csv_page(request: Request) -> HTMLResponse:
    state = _state(request)
    records = await _fetch_records(request, clean_scale=True)
    context = build_csv_page_context(
        records,
        test=request.path_params["test"],
        plant=request.path_params["plant"],
        presentation=state.config.presentation,
        links=state.config.links,
    )
    return HTMLResponse(state.renderer.render("report_csv.html.j2", context))


async def api_records(request: Request) -> JSONResponse:
    records = await _fetch_records(request, clean_scale=False)
    return JSONResponse(records_to_json(records))


async def api_records_csv(request: Request) -> Response:
    records = await _fetch_records(request, clean_scale=False)
    return Response(records_to_csv(records), media_type="text/csv")


async def demo_dashboard(request: Request) -> HTMLResponse:
    state = _state(request)
    context = build_report_context(
        demo_records(),
        test=DEMO_TEST,
        plant=DEMO_PLANT,
        presentation=PresentationConfig(metric_name=DEMO_METRIC_NAME, unit=DEMO_UNIT),
        links=state.config.links,
        title=DEMO_TITLE,
    )
    return HTMLResponse(state.renderer.render("report.html.j2", context))


# =============================================================================
# Error handlers
# =============================================================================


async def fetch_failed(_: Request, exc: Exception) -> PlainTextResponse:
    logger.error(f"Failed to fetch remote HTML: {exc}")
    return PlainTextResponse("Failed to fetch remote HTML", status_code=500)


async def read_failed(_: Request, exc: Exception) -> PlainTextResponse:
    logger.error(f"Failed to read HTML body: {exc}")
    return PlainTextResponse("Failed to read HTML body", status_code=500)


async def extraction_failed(_: Request, exc: Exception) -> PlainTextResponse:
    logger.error(f"Failed to parse report: {exc}")
    return PlainTextResponse("Failed to parse report", status_code=500)


async def render_failed(_: Request, exc: Exception) -> PlainTextResponse:
    logger.error(f"Template rendering error: {exc}")
    return PlainTextResponse("Template error", status_code=500)


EXCEPTION_HANDLERS = {
    ReportFetchError: fetch_failed,
    ReportReadError: read_failed,
    ExtractionError: extraction_failed,
    RenderError: render_failed,
}


def create_app(
    config: ReporterConfig | None = None,
    client: ReportClient | None = None,
    renderer: ReportRenderer | None = None,
) -> Starlette:
    """Build the Starlette application.

    Args:
        config: Reporter configuration (defaults when omitted)
        client: Upstream client (built from ``config.upstream`` when omitted)
        renderer: Page renderer (package templates when omitted)
    """
    config = config or ReporterConfig()
    if client is None:
        client = ReportClient(
            base_url=config.upstream.base_url,
            timeout_seconds=config.upstream.timeout_seconds,
        )

    routes = [
        Route("/", welcome, methods=["GET"]),
        Route("/health", health_check, methods=["GET"]),
        Route("/test", demo_dashboard, methods=["GET"]),
        Route("/mock/{test}/{plant}", report_page, methods=["GET"]),
        Route("/csv/{test}/{plant}", csv_page, methods=["GET"]),
        Route("/api/{test}/{plant}", api_records, methods=["GET"]),
        Route("/api/{test}/{plant}/csv", api_records_csv, methods=["GET"]),
        Mount("/static", StaticFiles(directory=get_static_dir()), name="static"),
    ]

    app = Starlette(routes=routes, exception_handlers=EXCEPTION_HANDLERS)
    app.state.reporter = AppState(
        config=config,
        client=client,
        renderer=renderer or ReportRenderer(),
    )
    return app

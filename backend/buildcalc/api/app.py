"""FastAPI application — create_app factory with /api endpoints."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

# Load .env from project root (backend/../.env or backend/.env)
_backend_dir = Path(__file__).resolve().parent.parent.parent
_project_root = _backend_dir.parent
load_dotenv(_project_root / ".env")
load_dotenv(_backend_dir / ".env")

from buildcalc import __version__
from buildcalc.api.validation import describe_errors, parse_building_parameters
from buildcalc.engine import estimate as default_estimator
from buildcalc.exceptions import (
    EmailDispatchError,
    EmailNotConfiguredError,
    InvalidBuildingParametersError,
    InvalidRequestError,
    ReportRenderingError,
)
from buildcalc.models.base import WireModel
from buildcalc.models.building import BuildingParameters
from buildcalc.models.enums import BuildingType, ConcreteGrade, UnitSystem
from buildcalc.models.estimate import EstimationResult
from buildcalc.reporting.pdf_report import REPORT_FILENAME, render_estimate_pdf
from buildcalc.services.mailer import EstimateMailer

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An error occurred while processing your request"

Estimator = Callable[[BuildingParameters], EstimationResult]


class SendEmailRequest(WireModel):
    """Body of POST /api/send-email."""

    email: str
    result: EstimationResult


def create_app(
    *,
    estimator: Estimator | None = None,
    mailer: EstimateMailer | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    estimator
        Optional estimation function for dependency injection (e.g. tests).
        Defaults to ``buildcalc.engine.estimate``.
    mailer
        Optional pre-built mailer for /api/send-email. If not provided, one
        is created from environment variables on first request.
    """
    app = FastAPI(title="BuildCalc", version=__version__)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject mocks
    app.state.estimator = estimator or default_estimator
    app.state.mailer = mailer

    def _get_mailer() -> EstimateMailer:
        ml: EstimateMailer | None = app.state.mailer
        if ml is not None:
            return ml
        # Lazy-create from environment
        from buildcalc.api.deps import create_mailer

        ml = create_mailer()
        app.state.mailer = ml
        return ml

    async def _read_parameters(request: Request) -> BuildingParameters:
        try:
            payload = await request.json()
        except ValueError as exc:
            msg = "Request body must be valid JSON"
            raise InvalidBuildingParametersError(msg) from exc
        return parse_building_parameters(payload)

    # ------------------------------------------------------------------
    # Error handlers — every failure is reported as {"error": message}
    # ------------------------------------------------------------------

    @app.exception_handler(InvalidRequestError)
    async def invalid_request(request: Request, exc: InvalidRequestError) -> JSONResponse:
        logger.warning("Rejected %s: %s", request.url.path, exc)
        return JSONResponse({"error": str(exc)}, status_code=400)

    @app.exception_handler(RequestValidationError)
    async def invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = describe_errors(exc.errors())
        logger.warning("Rejected %s: %s", request.url.path, message)
        return JSONResponse({"error": message}, status_code=400)

    @app.exception_handler(ReportRenderingError)
    async def report_failed(request: Request, exc: ReportRenderingError) -> JSONResponse:
        logger.error("Report rendering failed for %s: %s", request.url.path, exc)
        return JSONResponse({"error": "Failed to generate report"}, status_code=500)

    @app.exception_handler(EmailDispatchError)
    async def email_failed(request: Request, exc: EmailDispatchError) -> JSONResponse:
        status_code = 503 if isinstance(exc, EmailNotConfiguredError) else 502
        logger.warning("Email dispatch failed for %s: %s", request.url.path, exc)
        return JSONResponse({"error": str(exc)}, status_code=status_code)

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unexpected error while handling %s", request.url.path, exc_info=exc)
        return JSONResponse({"error": INTERNAL_ERROR_MESSAGE}, status_code=500)

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": __version__}

    # ------------------------------------------------------------------
    # POST /api/calculate
    # ------------------------------------------------------------------

    @app.post("/api/calculate", response_model=None)
    async def calculate(request: Request) -> dict[str, Any]:
        params = await _read_parameters(request)
        return app.state.estimator(params).to_wire()

    # ------------------------------------------------------------------
    # POST /api/report
    # ------------------------------------------------------------------

    @app.post("/api/report", response_model=None)
    async def report(request: Request) -> Response:
        params = await _read_parameters(request)
        result = app.state.estimator(params)
        return Response(
            content=render_estimate_pdf(result),
            media_type="application/pdf",
            headers={"Content-Disposition": f'attachment; filename="{REPORT_FILENAME}"'},
        )

    # ------------------------------------------------------------------
    # POST /api/send-email
    # ------------------------------------------------------------------

    @app.post("/api/send-email")
    def send_email(body: SendEmailRequest) -> dict[str, bool]:
        _get_mailer().send_estimate(body.email, body.result)
        return {"success": True}

    # ------------------------------------------------------------------
    # GET /api/sample-estimate
    # ------------------------------------------------------------------

    @app.get("/api/sample-estimate")
    def sample_estimate() -> dict[str, Any]:
        sample = BuildingParameters(
            length=20,
            width=15,
            floors=3,
            building_type=BuildingType.RESIDENTIAL,
            concrete_grade=ConcreteGrade.M25,
            unit=UnitSystem.METRIC,
        )
        result = app.state.estimator(sample)
        return {
            "parameters": sample.to_wire(),
            "estimate": result.to_wire(),
            "summary": result.to_summary_dict(),
        }

    return app

"""
FastAPI application for the sale options engine.

Called by the external presentation layer (estimator form, lead-capture
pages) with a property description; returns the structured result and,
for delivery requests, a delivery receipt.

Production deployment configuration via environment variables.
"""

import logging
import os
from datetime import datetime
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, ConfigDict

from core import (
    ConditionTier,
    InvalidInput,
    PropertyAnalysis,
    PropertyAnalyzer,
    PropertyDescription,
    RenderFailure,
    SaleOptionsComparator,
    StructureCategory,
)
from delivery import EmailDeliveryAdapter, SmsDeliveryAdapter, dispatch_comparison
from reporting import ComparisonReportGenerator, report_filename
from utils.config import Config


logger = logging.getLogger(__name__)

# =============================================================================
# Environment Configuration
# =============================================================================

IS_PRODUCTION = os.getenv("RAILWAY_ENVIRONMENT") is not None or os.getenv("PRODUCTION", "").lower() == "true"

ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "").split(",") if os.getenv("ALLOWED_ORIGINS") else []
if not ALLOWED_ORIGINS and not IS_PRODUCTION:
    # Development fallback only
    ALLOWED_ORIGINS = ["http://localhost:3000", "http://127.0.0.1:3000"]

# Debug mode - NEVER enabled in production
DEBUG_MODE = os.getenv("DEBUG", "false").lower() == "true" and not IS_PRODUCTION

APP_VERSION = "1.0.0"

INPUT_ERROR_MESSAGE = "Failed to calculate property value. Please check your inputs and try again."


# =============================================================================
# Request Models
# =============================================================================

class PropertyRequest(BaseModel):
    """Property attributes from the estimator form."""
    model_config = ConfigDict(allow_inf_nan=False)

    zip_code: str
    property_type: StructureCategory = StructureCategory.SINGLE_FAMILY
    square_feet: int
    bedrooms: int
    bathrooms: float
    condition: ConditionTier = ConditionTier.GOOD
    mortgage_balance: Optional[float] = None
    address: str = ""

    def to_description(self) -> PropertyDescription:
        return PropertyDescription(
            zip_code=self.zip_code,
            property_type=self.property_type,
            square_feet=self.square_feet,
            bedrooms=self.bedrooms,
            bathrooms=self.bathrooms,
            condition=self.condition,
            mortgage_balance=self.mortgage_balance,
            address=self.address,
        )


class ComparisonRequest(BaseModel):
    """Direct comparison for a known value and balance."""
    model_config = ConfigDict(allow_inf_nan=False)

    property_value: float
    mortgage_balance: float


class SendComparisonRequest(PropertyRequest):
    """Property attributes plus delivery destinations."""
    email: Optional[str] = None
    phone: Optional[str] = None


def _require_comparison(analysis: PropertyAnalysis) -> None:
    if not analysis.has_comparison:
        raise InvalidInput(["mortgage_balance is required to compare sale options"])


def create_app(config: Optional[Config] = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    config = config or Config.load()

    app = FastAPI(
        title="Sale Options Engine",
        description="Property valuation, equity analysis and sale options comparison",
        version=APP_VERSION,
        docs_url=None if IS_PRODUCTION else "/docs",
        redoc_url=None if IS_PRODUCTION else "/redoc",
        openapi_url=None if IS_PRODUCTION else "/openapi.json",
        debug=DEBUG_MODE,
    )

    # Healthchecks first: no dependencies, no IO
    @app.get("/", include_in_schema=False)
    def root():
        """Root healthcheck. No dependencies, no IO."""
        return {"status": "ok"}

    @app.get("/health", include_in_schema=False)
    def health():
        """Secondary health endpoint. No dependencies, no IO."""
        return {"status": "healthy"}

    if ALLOWED_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=ALLOWED_ORIGINS,
            allow_credentials=True,
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
        )

    if not config.gateway_configured:
        logger.warning("Messaging gateway not configured; deliveries will be logged only")

    analyzer = PropertyAnalyzer()
    comparator = SaleOptionsComparator()
    report_generator = ComparisonReportGenerator(config)

    # ==========================================================================
    # Error Handlers
    # ==========================================================================

    @app.exception_handler(InvalidInput)
    async def invalid_input_handler(request: Request, exc: InvalidInput):
        return JSONResponse(
            status_code=400,
            content={"detail": INPUT_ERROR_MESSAGE, "errors": exc.errors},
        )

    @app.exception_handler(RenderFailure)
    async def render_failure_handler(request: Request, exc: RenderFailure):
        logger.error("Report rendering failed: %s", exc)
        return JSONResponse(
            status_code=500,
            content={"detail": "Failed to generate comparison report."},
        )

    # ==========================================================================
    # Calculation Routes
    # ==========================================================================

    @app.post("/api/valuation")
    def valuation_endpoint(request_data: PropertyRequest):
        """
        Estimate value; with a mortgage balance, add equity and sale options.
        """
        analysis = analyzer.analyze(request_data.to_description())
        return analysis.to_dict()

    @app.post("/api/comparison")
    def comparison_endpoint(request_data: ComparisonRequest):
        """Compare sale options for a known value and balance."""
        comparison = comparator.compare(
            request_data.property_value,
            request_data.mortgage_balance,
        )
        return comparison.to_dict()

    @app.post("/api/comparison-report")
    def comparison_report_endpoint(request_data: PropertyRequest):
        """Return the comparison PDF for download."""
        description = request_data.to_description()
        analysis = analyzer.analyze(description)
        _require_comparison(analysis)

        generated_at = datetime.now()
        pdf_bytes = report_generator.render(
            analysis.valuation, description, analysis.comparison, generated_at,
        )
        filename = report_filename(generated_at)
        return Response(
            content=pdf_bytes,
            media_type="application/pdf",
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )

    @app.post("/api/send-comparison")
    def send_comparison_endpoint(request_data: SendComparisonRequest):
        """
        Compute, render and deliver the comparison.

        Delivery outcome is reported in the body but never changes the
        response status.
        """
        description = request_data.to_description()
        analysis = analyzer.analyze(description)
        _require_comparison(analysis)

        generated_at = datetime.now()
        pdf_bytes = report_generator.render(
            analysis.valuation, description, analysis.comparison, generated_at,
        )

        receipt = dispatch_comparison(
            analysis.comparison,
            email=request_data.email,
            phone=request_data.phone,
            attachment=pdf_bytes,
            attachment_name=report_filename(generated_at),
            email_adapter=EmailDeliveryAdapter(config=config),
            sms_adapter=SmsDeliveryAdapter(config=config),
        )

        return {
            "success": True,
            "analysis": analysis.to_dict(),
            "delivery": receipt.to_dict(),
        }

    @app.get("/api/health")
    def api_health():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": APP_VERSION,
            "environment": "production" if IS_PRODUCTION else "development",
            "delivery_configured": config.gateway_configured,
        }

    return app


# Create app instance for uvicorn
app = create_app()

"""
Unhyped FastAPI Application
===========================

REST API around the reality check engine.

Endpoints:
    GET  /api/health          - Health check
    POST /api/reality-check   - Reality check of a product (+ social post, reviews)
    POST /api/personal-fit    - Personal fit report for a skin profile

Usage:
    uvicorn unhyped.api.main:app --reload --port 8000

    Or with CLI:
    python -m unhyped.api.main
"""

from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from .. import __version__
from ..data.config import get_settings
from ..data.data_models import (
    InvalidRecordError,
    ProductRecord,
    ReviewSummary,
    SocialRecord,
    UserProfile,
)
from ..orchestrator.logging_config import setup_logging_from_settings
from ..scoring import PersonalFitAnalyzer, RealityCheckEngine
from .models import (
    HealthResponse,
    PersonalFitRequest,
    PersonalFitResponse,
    RealityCheckRequest,
    RealityCheckResponse,
)

logger = logging.getLogger(__name__)

# Shared, read-only after startup
engine: RealityCheckEngine = None
fit_analyzer: PersonalFitAnalyzer = None


def get_engine() -> RealityCheckEngine:
    """The shared engine, built on first use when the lifespan did not run."""
    global engine, fit_analyzer
    if engine is None:
        engine = RealityCheckEngine.from_settings()
        fit_analyzer = PersonalFitAnalyzer(engine.knowledge_base)
    return engine


def get_fit_analyzer() -> PersonalFitAnalyzer:
    get_engine()
    return fit_analyzer


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    setup_logging_from_settings()
    logger.info("Starting Unhyped API...")

    get_engine()
    logger.info(
        "Engine initialized (%d knowledge base entries)",
        len(engine.knowledge_base.issues),
    )

    yield

    logger.info("Shutting down Unhyped API...")


# Create FastAPI app
app = FastAPI(
    title="Unhyped API",
    description="Reality check for beauty product recommendations",
    version=__version__,
    lifespan=lifespan,
)

# CORS configuration
# In production, set CORS_ORIGINS env var (comma-separated) for the web front domains
_default_origins = [
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
]
_default_origins.extend(
    o for o in get_settings().api.cors_origins if o not in _default_origins
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_default_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# HEALTH ENDPOINT
# ============================================================================

@app.get("/api/health", response_model=HealthResponse)
def health_check():
    """Health check endpoint: version and knowledge base size."""
    current = get_engine()
    return HealthResponse(
        status="healthy",
        version=__version__,
        knowledge_base_entries=len(current.knowledge_base.issues),
        environment=get_settings().environment,
    )


# ============================================================================
# ANALYSIS ENDPOINTS
# ============================================================================

@app.post("/api/reality-check", response_model=RealityCheckResponse, response_model_exclude_none=True)
def reality_check(request: RealityCheckRequest):
    """
    Reality check of one product.

    ``social`` and ``reviews`` are optional; missing inputs fall back to
    neutral component scores.
    """
    try:
        product = ProductRecord.from_dict(request.product.model_dump(mode="json"))
        social = None
        if request.social is not None:
            social = SocialRecord.from_dict(
                request.social.model_dump(mode="json"),
                default_source=get_settings().engine.social_source,
            )
        reviews = None
        if request.reviews is not None:
            reviews = ReviewSummary.from_dict(request.reviews.model_dump(mode="json"))
    except InvalidRecordError as e:
        raise HTTPException(status_code=400, detail=str(e))

    result = get_engine().analyze_product(product, social=social, reviews=reviews)
    return result.to_dict(include_components=request.include_components)


@app.post("/api/personal-fit", response_model=PersonalFitResponse)
def personal_fit(request: PersonalFitRequest):
    """Ingredient warnings and match/trust scores for one skin profile."""
    try:
        product = ProductRecord.from_dict(request.product.model_dump(mode="json"))
        profile = UserProfile.from_dict(request.profile.model_dump(mode="json"))
    except InvalidRecordError as e:
        raise HTTPException(status_code=400, detail=str(e))

    report = get_fit_analyzer().report(product, profile, handle=request.handle)
    return report.to_dict()


if __name__ == "__main__":
    import uvicorn

    api = get_settings().api

    print("=" * 60)
    print("UNHYPED API")
    print("=" * 60)
    print()
    print(f"Starting server on http://{api.host}:{api.port}")
    print(f"API docs: http://localhost:{api.port}/docs")
    print()
    print("Endpoints:")
    print("  GET  /api/health          - Health check")
    print("  POST /api/reality-check   - Reality check of a product")
    print("  POST /api/personal-fit    - Personal fit report")
    print()
    print("=" * 60)

    uvicorn.run(
        "unhyped.api.main:app",
        host=api.host,
        port=api.port,
        reload=False,
        log_level="info",
    )

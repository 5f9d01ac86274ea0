"""
Fencing Division Map API — Application entry point.

Bootstraps FastAPI, wires up middleware, registers route groups,
and loads the division dataset on startup.

Extension points:
  - Add new route groups with app.include_router() below
  - Add new middleware in the middleware block
  - Change startup behaviour in the lifespan context manager

Run locally:
  uvicorn fencemap.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from fencemap.core.config import settings
from fencemap.core.dataset import load_dataset, unload_dataset
from fencemap.core.rate_limit import limiter
from fencemap.routes.divisions import router as divisions_router
from fencemap.routes.health import router as health_router
from fencemap.routes.markers import router as markers_router
from fencemap.routes.viewport import router as viewport_router

# ─── Logging ───────────────────────────────────────────────────────────────────
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


# ─── Lifespan ──────────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage startup and shutdown lifecycle.

    Code before `yield` runs on startup; code after runs on shutdown.
    """
    logger.info("Starting Fencing Division Map API (env: %s)", settings.environment)
    load_dataset(settings.dataset_path)
    yield
    logger.info("Shutting down Fencing Division Map API")
    unload_dataset()


# ─── App ───────────────────────────────────────────────────────────────────────
app = FastAPI(
    title="Fencing Division Map API",
    description=(
        "Division coordinates, zoom-aware bubble layout and panel-aware "
        "viewport correction for the US fencing divisions map."
    ),
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.environment != "production" else None,
    redoc_url="/redoc" if settings.environment != "production" else None,
)


# ─── Rate limiting ─────────────────────────────────────────────────────────────
# Routes opt-in with @limiter.limit("N/minute") + request: Request parameter.
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# ─── Middleware ─────────────────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ─── Routes ────────────────────────────────────────────────────────────────────
app.include_router(health_router, prefix="/health", tags=["health"])
app.include_router(divisions_router)
app.include_router(markers_router)
app.include_router(viewport_router)


@app.get("/", tags=["root"])
async def root():
    """API root — basic metadata."""
    return {
        "name": "Fencing Division Map API",
        "version": "0.1.0",
        "status": "running",
        "environment": settings.environment,
        "docs": "/docs",
    }

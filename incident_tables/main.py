from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import settings
from .routers.incidents import router as incidents_router
from .services import build_enricher, build_extractor
from incident_tables.setup_logging import setup_logging

# --------------------------------------------------------------------
# App bootstrap
# --------------------------------------------------------------------
setup_logging(settings.LOG_LEVEL) # Init Logging

# --------------------------------------------------------------------
# FastAPI application with lifespan hook
# --------------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context runs once at startup and once at shutdown.
    The geocode cache and the HTTP session are created here and live
    exactly as long as the app; every request shares them.
    """
    app.state.enricher = build_enricher()
    app.state.extractor = build_extractor()

    # Hand control back to FastAPI to serve requests
    yield

    app.state.extractor.close()

# Create the FastAPI app instance
app = FastAPI(title="Incident Tables", lifespan=lifespan)

# Any origin may read the normalized tables
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_methods=["GET"],
    allow_headers=["Origin", "X-Requested-With", "Content-Type", "Accept"],
)

# --------------------------------------------------------------------
# Routes
# --------------------------------------------------------------------
@app.get("/healthz")
def health():
    """
    Simple health probe for monitoring.
    Returns:
      - ok: static True if the app is alive
      - geocode_cache_size: number of memoized locations (None before startup)
    """
    enricher = getattr(app.state, "enricher", None)
    return {
        "ok": True,
        "service": "incident-tables",
        "version": 1,
        "geocode_cache_size": len(enricher.cache) if enricher is not None else None,
    }

# Register API routers:
app.include_router(incidents_router)

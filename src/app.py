"""Zen Cafe FastAPI application.

Storefront and back-office API. Commands are processed synchronously within
each request, inside the zencafe domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# PROTEAN_ENV selects the config overlay in domain.toml:
#   - "test"       → in-memory providers
#   - "production" → PostgreSQL
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from zencafe import elements  # noqa: F401
from zencafe.api import include_routers, register_error_handlers
from zencafe.config import get_settings
from zencafe.domain import zencafe
from zencafe.utils.db import check_db
from zencafe.utils.logging import get_logger

zencafe.init()

logger = get_logger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Refuse to start without a reachable database
    check_db(zencafe)
    logger.info("Zen Cafe API started", env=settings.env)
    yield


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Zen Cafe API",
    description="Storefront, checkout and back-office for Zen Cafe",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the zencafe domain context for each request."""
    with zencafe.domain_context():
        return await call_next(request)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
include_routers(app, dev_logins=not settings.is_production)
register_error_handlers(app)


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": zencafe.name, "env": settings.env})

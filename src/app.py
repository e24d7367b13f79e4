"""Storefront FastAPI application.

Web server that processes commands synchronously via HTTP. Every request
runs inside the storefront domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

import os
from contextlib import asynccontextmanager

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# Initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay in domain.toml.
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storefront.domain import logger, storefront
from storefront.utils.logging import add_context, clear_context

storefront.init()

from storefront.api import (  # noqa: E402
    admin_router,
    cart_router,
    catalog_router,
    order_router,
    register_error_handlers,
)
from storefront.catalog.seed import seed_sample_products  # noqa: E402


def _allowed_origins():
    raw = os.getenv("ALLOWED_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@asynccontextmanager
async def lifespan(app: FastAPI):
    if os.getenv("STOREFRONT_SEED_CATALOG", "true").lower() in ("1", "true", "yes"):
        with storefront.domain_context():
            seed_sample_products()
    logger.info("Storefront API started", domain=storefront.name)
    yield


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Storefront API",
    description="Wholesale storefront — catalog, cart, orders and admin console",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_allowed_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the storefront domain context for each request."""
    clear_context()
    add_context(method=request.method, path=request.url.path)
    with storefront.domain_context():
        response = await call_next(request)
    return response


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
app.include_router(catalog_router)
app.include_router(cart_router)
app.include_router(order_router)
app.include_router(admin_router)
register_error_handlers(app)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": storefront.name})

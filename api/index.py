"""
Storefront - Main FastAPI Application

Single entry point for the catalog, cart and admin API routes.
"""
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront import __version__
from storefront.cart.service import reset_cart_manager
from storefront.db import reset_clients
from storefront.logging import get_logger
from storefront.routers import admin_router, cart_router, catalog_router
from storefront.services.database import close_database

logger = get_logger(__name__)


# ==================== FASTAPI APP ====================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    # Clients are created lazily on first request
    logger.info(f"Storefront {__version__} starting up")
    yield
    reset_cart_manager()
    close_database()
    reset_clients()
    logger.info("Storefront shut down")


app = FastAPI(
    title="Storefront",
    description="Catalog, cart and product administration API",
    version=__version__,
    lifespan=lifespan,
)

_cors_origins = [o.strip() for o in os.environ.get("CORS_ORIGINS", "*").split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Cart-Session"],
)

app.include_router(catalog_router, prefix="/api")
app.include_router(cart_router, prefix="/api")
app.include_router(admin_router, prefix="/api/admin")


# ==================== HEALTH CHECK ====================

@app.get("/api/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok", "service": "storefront"}

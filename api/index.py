"""
Proto-Store - Storefront FastAPI Application

Local HTTP surface over one storefront session: catalog, cart, order form
and simulated checkout.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.logging import get_logger
from storefront.routers import router as store_router
from storefront.session import get_session, reset_session

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load saved cart and catalog on startup; close the shop client on shutdown."""
    session = get_session()
    await session.start()
    yield
    await session.close()
    reset_session()


app = FastAPI(
    title="Proto-Store",
    description="Storefront client for the shop API",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(store_router)


# ==================== HEALTH CHECK ====================

@app.get("/api/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok", "service": "proto-store"}

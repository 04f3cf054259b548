"""
ChipCalc FastAPI Application Entry Point.

Configures FastAPI, sets up CORS, registers routes and manages the
MongoDB connection lifecycle for the chip set repository.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from chipcalc.config import settings
from chipcalc.dal.chip_sets_dal import ChipSetDAL
from chipcalc.dal.database import connect_to_mongo, close_mongo_connection, ensure_indexes
from chipcalc.routes.health import router as health_router
from chipcalc.routes.calculator import router as calculator_router
from chipcalc.routes.chip_sets import router as chip_sets_router
from chipcalc.services.chip_set_service import ChipSetService

logger = logging.getLogger("chipcalc.app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.
    Handles startup and shutdown events for MongoDB connection.
    """
    # Startup: Connect to MongoDB, ensure indexes and seed presets
    try:
        db = await connect_to_mongo()
        await ensure_indexes(db)
        if settings.SEED_PRESETS:
            await ChipSetService(ChipSetDAL(db)).seed_presets()
        logger.info("ChipCalc v%s started with database connection", settings.APP_VERSION)
    except Exception as e:
        # The calculator endpoints work without a database; only the
        # chip set repository is unavailable until MongoDB is reachable.
        logger.warning(
            "Failed to connect to MongoDB during startup: %s. "
            "Chip set storage will fail until connection is established.",
            str(e)
        )
        logger.info("ChipCalc v%s started WITHOUT database connection", settings.APP_VERSION)

    yield

    await close_mongo_connection()
    logger.info("ChipCalc shutdown complete")


app = FastAPI(
    title="ChipCalc API",
    description="Poker chip distribution calculator - REST API",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "X-Request-ID"],
    expose_headers=["X-Request-ID"],
    max_age=600,  # Cache preflight requests for 10 minutes
)

# Register routers
app.include_router(health_router)  # Health endpoint at root level
app.include_router(health_router, prefix="/api")
app.include_router(calculator_router, prefix="/api")
app.include_router(chip_sets_router, prefix="/api")


@app.get("/")
async def root():
    """Root endpoint - API information."""
    return {
        "name": "ChipCalc API",
        "version": settings.APP_VERSION,
        "status": "operational",
        "docs": "/docs",
        "health": "/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "chipcalc.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info",
    )

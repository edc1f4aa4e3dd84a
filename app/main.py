"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.database import init_db
from app.errors import register_error_handlers
from app.api import (
    analytics,
    dashboard,
    finance,
    inventory,
    recipes,
)

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    if settings.AUTO_CREATE_SCHEMA:
        init_db()
    yield


app = FastAPI(
    title="Kitchen Manager",
    description="Inventory, recipes, finance and profit analytics for a kitchen",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS configuration from environment
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Include routers
app.include_router(inventory.router)
app.include_router(recipes.router)
app.include_router(finance.router)
app.include_router(analytics.router)
app.include_router(dashboard.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Kitchen Manager API", "docs": "/docs"}


def run() -> None:
    """Serve the API with uvicorn on the configured host and port."""
    import uvicorn

    logger.info(f"Starting Kitchen Manager API on {settings.HOST}:{settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()

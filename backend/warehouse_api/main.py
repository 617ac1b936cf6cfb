"""Main FastAPI application."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from warehouse_api.api.error_handlers import register_exception_handlers
from warehouse_api.api.middleware import LoggingMiddleware
from warehouse_api.api.routes import router
from warehouse_api.config import get_settings
from warehouse_api.database.order_store import OrderStore
from warehouse_api.services.data_loader import DataLoader
from warehouse_api.utils.logger import setup_logging

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    logger.info("Starting application...")
    app.state.product_catalog = DataLoader.load_product_mapping(settings.product_mapping_file)
    app.state.order_store = OrderStore(settings.orders_file)
    logger.info("Order store at %s", settings.orders_file)

    yield

    # Shutdown
    logger.info("Shutting down application...")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Warehouse order management with picking and packing views",
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Add custom middleware
app.add_middleware(LoggingMiddleware)

# Include routers
app.include_router(router)

# Exception handlers
register_exception_handlers(app)


# Root endpoint
@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "status": "running",
    }


if __name__ == "__main__":
    import uvicorn

    logger.info("Warehouse API server listening on port %d", settings.api_port)
    uvicorn.run(
        "warehouse_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )

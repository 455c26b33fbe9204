# delivery_tracker/main.py
import logging
from fastapi import FastAPI
from contextlib import asynccontextmanager

from delivery_tracker.config.settings import settings
from delivery_tracker.config.database import init_db
from delivery_tracker.core.exceptions import setup_exception_handlers
from delivery_tracker.core.logging import setup_logging
from delivery_tracker.core.middleware import setup_middleware
from delivery_tracker.api.router import api_router

setup_logging(settings.log_level)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info(f"{settings.app_name} starting")
    logger.info(f"Version: {settings.version}")
    logger.info(f"Environment: {'Development' if settings.debug else 'Production'}")
    logger.info(f"JWT Algorithm: {settings.algorithm}")
    logger.info(f"Token expiry: {settings.access_token_expire_seconds} seconds")
    logger.info(f"Database: {settings.database_url.split('@')[1] if '@' in settings.database_url else settings.database_url}")

    init_db()

    yield

    # Shutdown
    logger.info(f"{settings.app_name} shutting down")

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    description="Package delivery tracking: package listing and token login",
    docs_url="/docs",
    redoc_url="/redoc" if settings.debug else None,
    lifespan=lifespan
)

# Setup middleware and error translation
setup_middleware(app)
setup_exception_handlers(app)

# Include routers
app.include_router(api_router)

# Root endpoint
@app.get("/")
async def root():
    return {
        "message": f"{settings.app_name}",
        "version": settings.version,
        "status": "running",
        "environment": "production" if not settings.debug else "development",
        "docs": "/docs"
    }

@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "version": settings.version,
        "app": settings.app_name
    }

def run():
    import uvicorn
    uvicorn.run(
        "delivery_tracker.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )

if __name__ == "__main__":
    run()

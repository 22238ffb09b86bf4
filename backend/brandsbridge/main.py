from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
import os
from brandsbridge.core.config import settings
from brandsbridge.core.exceptions import ServiceError
from brandsbridge.core.logging import setup_logging, get_logger
from brandsbridge.db.session import create_db_and_tables

# JSON-логи в production
setup_logging(
    log_level=settings.LOG_LEVEL,
    json_format=settings.is_production
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application starting up", env=settings.ENV)
    create_db_and_tables()
    yield
    logger.info("Application shutting down")


app = FastAPI(
    title="BrandsBridge API",
    version="1.0.0",
    lifespan=lifespan
)


async def service_error_handler(request: Request, exc: ServiceError):
    logger.warning(
        "Service error",
        path=request.url.path,
        status_code=exc.status_code,
        message=exc.message,
    )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


app.add_exception_handler(ServiceError, service_error_handler)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Import routers after app creation to avoid circular imports
from brandsbridge.api import (  # noqa: E402
    auth,
    users,
    categories,
    brands,
    products,
    inquiries,
    content,
    uploads,
)

# Routers - all already have /api prefix
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(categories.router)
app.include_router(brands.router)
app.include_router(products.router)
app.include_router(inquiries.router)
app.include_router(content.router)
app.include_router(uploads.router)

# Static files for uploads
os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")


@app.get("/")
def root():
    return {"status": "ok", "service": "brandsbridge-api"}


@app.get("/api/health")
def health_check():
    return {
        "status": "healthy",
        "env": settings.ENV
    }

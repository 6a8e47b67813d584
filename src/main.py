"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from src.api import auth
from src.api.errors import UTF8JSONResponse, register_exception_handlers
from src.config import configure_logging, get_settings
from src.database import init_db

settings = get_settings()
configure_logging(settings.log_level)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    if settings.auto_create_tables:
        try:
            init_db()
        except SQLAlchemyError as e:
            # Requests will report the connection error themselves
            logger.error(f"Could not create tables at startup: {e}")
    yield


app = FastAPI(
    title="Storefront Auth API",
    description="User sign-up and login backed by a relational users table",
    version="0.1.0",
    lifespan=lifespan,
    default_response_class=UTF8JSONResponse,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["POST", "OPTIONS"],
    allow_headers=[
        "Content-Type",
        "Access-Control-Allow-Headers",
        "Authorization",
        "X-Requested-With",
    ],
    max_age=3600,
)

register_exception_handlers(app)

# Register routers
app.include_router(auth.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}

"""FastAPI application factory and lifespan."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1 import api_router
from app.core.config import get_settings
from app.db.session import engine

settings = get_settings()

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: log configuration; shutdown: dispose the DB pool. Schema is managed by Alembic."""
    logger.info(
        "%s starting (%s, unit=%s, freshness threshold=%.2f)",
        settings.app_name,
        settings.environment,
        settings.weight_unit.value,
        settings.freshness_threshold,
    )
    yield
    await engine.dispose()


def create_application() -> FastAPI:
    app = FastAPI(
        title=settings.app_name,
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    # CORS: allow localhost in dev; in production use CORS_ORIGINS env (comma-separated)
    if settings.debug:
        cors_origins = ["*"]
    elif settings.environment == "development":
        cors_origins = ["http://localhost:3000", "http://127.0.0.1:3000"]
    else:
        cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    def root():
        return {"status": "ok", "message": settings.app_name}

    app.include_router(api_router, prefix=settings.api_v1_prefix)
    return app


app = create_application()

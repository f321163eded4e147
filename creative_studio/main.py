from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from sqlalchemy.exc import SQLAlchemyError
import logging
import uvicorn

# === Local Imports ===
from creative_studio.core.config import settings
from creative_studio.db.session import create_tables, dispose_engine
from creative_studio.routers.campaigns import router as campaigns_router
from creative_studio.routers.generation import router as generation_router
from creative_studio.routers.creatives import router as creatives_router
from creative_studio.core.errors import (
    StudioException,
    studio_exception_handler,
    validation_exception_handler,
    sqlalchemy_exception_handler,
)

logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
logger = logging.getLogger("creative_studio")


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.AUTO_CREATE_TABLES:
        await create_tables()
        logger.info("✅ Database tables ensured")
    yield
    await dispose_engine()
    logger.info("Database engine disposed")


app = FastAPI(
    title="Creative Studio",
    version="1.0.0",
    description="AI headline and image generation for marketing campaigns",
    docs_url=f"{settings.API_PREFIX}/docs",
    redoc_url=f"{settings.API_PREFIX}/redoc",
    lifespan=lifespan,
)

app.add_exception_handler(StudioException, studio_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(SQLAlchemyError, sqlalchemy_exception_handler)
app.include_router(campaigns_router)
app.include_router(generation_router)
app.include_router(creatives_router)

if settings.ENVIRONMENT == "production":
    allowed_origins = settings.ALLOWED_ORIGINS
else:
    allowed_origins = ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
    max_age=3600,
)


@app.get("/health")
async def health_check():
    return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}


def run():
    uvicorn.run(
        "creative_studio.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG and settings.ENVIRONMENT == "development",
    )


if __name__ == "__main__":
    run()

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from stylematch.config import settings
from stylematch.core import register_exception_handlers, safe_execute
from stylematch.database import Base, engine
from stylematch.migrations import ensure_indexes
from stylematch.routers import garments, suggestions
from stylematch.schemas import HealthResponse

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="StyleMatch API",
    description="Ranks partner garments against a shopper's skin tone, gender and occasion",
    version="1.0.0"
)

# Browsers only need credentials against the known frontends
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins if settings.ENVIRONMENT == "production" else ["*"],
    allow_credentials=settings.ENVIRONMENT == "production",
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.on_event("startup")
def prepare_database() -> None:
    """Create missing tables and suggestion indexes; index failures never block startup"""
    Base.metadata.create_all(bind=engine)
    if settings.ENSURE_INDEXES_ON_STARTUP:
        created = safe_execute(ensure_indexes, engine, default=0)
        logger.info(f"Suggestion indexes checked, {created} created")


app.include_router(suggestions.router)
app.include_router(garments.router)


@app.get("/health", response_model=HealthResponse)
def health_check():
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        database = "connected"
    except SQLAlchemyError as exc:
        logger.warning(f"Health check could not reach the database: {exc}")
        database = "unavailable"
    return HealthResponse(status="ok", database=database)


@app.get("/")
async def root():
    return {
        "message": "StyleMatch suggestion API",
        "version": app.version,
        "docs": "/docs"
    }

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from dotenv import load_dotenv

# Environment must be loaded before settings are read
load_dotenv()

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.gzip import GZipMiddleware

from .config import settings
from .database import check_connection, create_db_and_tables
from .exceptions import http_exception_handler, validation_exception_handler
from .middleware import ErrorHandlingMiddleware, LoggingMiddleware
from .routers import appointments_router, doctors_router

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
    format=settings.LOG_FORMAT,
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting {settings.APP_NAME} {settings.APP_VERSION}")
    app.state.db_init_error = None
    try:
        create_db_and_tables()
    except Exception as e:
        # Keep serving; /health reports the failure
        app.state.db_init_error = str(e)
        logger.exception("Database initialization failed")
    yield
    logger.info(f"Stopping {settings.APP_NAME}")


def create_app() -> FastAPI:
    application = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
        docs_url="/docs" if settings.DOCS_ENABLED else None,
        redoc_url="/redoc" if settings.DOCS_ENABLED else None,
        openapi_url="/openapi.json" if settings.DOCS_ENABLED else None,
    )
    application.add_exception_handler(HTTPException, http_exception_handler)
    application.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Last added runs first
    application.add_middleware(ErrorHandlingMiddleware)
    application.add_middleware(LoggingMiddleware)
    application.add_middleware(GZipMiddleware, minimum_size=settings.GZIP_MIN_SIZE)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(appointments_router.router)
    application.include_router(doctors_router.router)
    return application


app = create_app()


@app.get("/health")
def health_check():
    db_ok = getattr(app.state, "db_init_error", None) is None and check_connection()
    return {
        "status": "healthy" if db_ok else "degraded",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "database": {
            "ok": db_ok,
            "error": getattr(app.state, "db_init_error", None),
        },
        "scheduling": {
            "default_duration_minutes": settings.DEFAULT_APPOINTMENT_DURATION,
        },
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "dental_clinic.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )

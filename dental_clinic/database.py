# dental_clinic/database.py
import logging
from typing import Any, Dict

from sqlalchemy import text
from sqlmodel import SQLModel, Session, create_engine

from .config import settings

logger = logging.getLogger(__name__)


def _engine_options(url: str) -> Dict[str, Any]:
    if url.startswith("sqlite"):
        # Sessions are used from FastAPI's threadpool
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True, "pool_recycle": 300, "pool_size": 5, "max_overflow": 10}


engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DATABASE_ECHO,
    **_engine_options(settings.DATABASE_URL),
)


def create_db_and_tables() -> None:
    # Table classes must be imported so they register on SQLModel.metadata
    from .db import models  # noqa: F401
    SQLModel.metadata.create_all(engine)
    logger.info(f"Database tables ready ({engine.url.get_backend_name()})")


def check_connection() -> bool:
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.warning(f"Database connectivity check failed: {e}")
        return False


def get_session():
    with Session(engine) as session:
        yield session

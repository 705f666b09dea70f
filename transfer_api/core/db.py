from __future__ import annotations

from collections.abc import Generator
from typing import Any, Optional

from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from ..models import db as _db_models  # noqa: F401 - ensure models register with metadata
from .config import Settings, get_settings


def create_engine_for_url(database_url: str, store_timeout: Optional[float] = None) -> Engine:
    connect_args: dict[str, Any] = {}
    if database_url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}
        if store_timeout is not None:
            # Seconds a statement waits on a locked database before failing.
            connect_args["timeout"] = store_timeout
    return create_engine(database_url, echo=False, connect_args=connect_args)


def create_engine_for_settings(settings: Settings) -> Engine:
    return create_engine_for_url(settings.database_url, settings.store_timeout_seconds)


_engine: Optional[Engine] = None


def get_engine() -> Engine:
    """Return the process-wide engine, building it from settings on first use."""
    global _engine
    if _engine is None:
        _engine = create_engine_for_settings(get_settings())
    return _engine


def set_engine(new_engine: Optional[Engine]) -> None:
    global _engine
    _engine = new_engine


def init_db(engine: Optional[Engine] = None) -> None:
    SQLModel.metadata.create_all(engine or get_engine())


def get_session() -> Generator[Session, None, None]:
    with Session(get_engine()) as session:
        yield session

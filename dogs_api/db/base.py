from typing import Iterator

from fastapi import Request
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from dogs_api.core.config import Settings


# Declarative base for SQLAlchemy models.
class Base(DeclarativeBase):
    pass


def build_engine(settings: Settings) -> Engine:
    connect_args = {}
    if settings.DATABASE_URL.startswith("sqlite"):
        # Sessions are used from FastAPI's worker threads.
        connect_args["check_same_thread"] = False
    return create_engine(
        settings.DATABASE_URL,
        echo=settings.SQLALCHEMY_ECHO,
        pool_pre_ping=True,
        connect_args=connect_args,
    )


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(
        autocommit=False, autoflush=False, expire_on_commit=False, bind=engine
    )


def get_db(request: Request) -> Iterator[Session]:
    """FastAPI dependency. Yields a session and closes it after the request."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

import dogs_api.models  # noqa: F401  (registers tables on Base.metadata)
from dogs_api.core.config import Settings
from dogs_api.core.errors import (
    DogsApiException,
    dogs_api_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from dogs_api.core.logging import setup_logging
from dogs_api.db.base import Base, build_engine, build_session_factory, get_db
from dogs_api.routers import dogs as dogs_router
from dogs_api.schemas.common import MessageResponse


@asynccontextmanager
async def lifespan(app: FastAPI):
    if app.state.settings.AUTO_CREATE_TABLES:
        Base.metadata.create_all(bind=app.state.engine)
    yield
    app.state.engine.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application from an explicit configuration."""
    settings = settings or Settings()
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)

    app = FastAPI(
        title="Dogs API",
        description=(
            "CRUD service for the **dog** resource.\n\n"
            "Request bodies are checked against the dog schema "
            "(`name`, `description`, `breed`: string; `age`: number)."
        ),
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = build_engine(settings)
    app.state.session_factory = build_session_factory(app.state.engine)

    # --- CORS ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # --- Exception handlers (most specific first) ---
    app.add_exception_handler(DogsApiException, dogs_api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # --- Routers ---
    app.include_router(dogs_router.router)

    @app.get("/", response_model=MessageResponse, tags=["health"], summary="Greeting")
    def root():
        return {"message": "Hello World!"}

    @app.get("/health", tags=["health"], summary="Health check")
    def health(request: Request, db: Session = Depends(get_db)):
        """
        Returns `{"status": "ok", "db": "ok"}` when both the API and the
        database are reachable. Returns HTTP 503 if the DB is down.
        """
        try:
            db.execute(text("SELECT 1"))
            db_status = "ok"
        except SQLAlchemyError:
            db_status = "unreachable"

        if db_status != "ok":
            return JSONResponse(
                status_code=503,
                content={"status": "error", "db": db_status},
            )
        return {"status": "ok", "db": "ok", "env": request.app.state.settings.APP_ENV}

    return app


app = create_app()

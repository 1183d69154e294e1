# users_api/main.py

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import uvicorn
from fastapi import FastAPI

from users_api.api.home import router as home_router
from users_api.api.users import router as users_router
from users_api.config import get_settings
from users_api.db.factory import build_store
from users_api.db.store import StartupFailure, UserStore

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    owned = app.state.store is None
    if owned:
        settings = get_settings()
        # no-op when run() or the host process already set up logging
        configure_logging(settings.LOG_LEVEL)
        try:
            app.state.store = build_store(settings)
        except StartupFailure:
            logger.critical("Store initialisation failed, refusing to start", exc_info=True)
            raise
    try:
        yield
    finally:
        if owned:
            app.state.store.close()
            app.state.store = None


def create_app(store: Optional[UserStore] = None) -> FastAPI:
    """
    Build the application. Pass ``store`` to run against an existing store
    instead of the one configured by STORE_BACKEND.
    """
    app = FastAPI(
        title="Firestore Users API",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.store = store

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    app.include_router(home_router)
    app.include_router(users_router)

    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    logger.info("Server starting on http://%s:%d/", settings.API_HOST, settings.API_PORT)
    uvicorn.run(
        app,
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_level=settings.LOG_LEVEL.lower(),
        lifespan="on",
    )

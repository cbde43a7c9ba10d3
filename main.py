# main.py
import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

ROOT_DIR = Path(__file__).resolve().parent
sys.path.append(str(ROOT_DIR))

from config import Settings, get_settings
from database import Base, create_db_engine, create_session_factory
from routes import storefront
import models  # noqa: F401

load_dotenv()

logger = logging.getLogger("storefront")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Builds the storefront application.

    The database engine is created when the app starts and disposed when it
    stops; handlers get sessions through the ``get_db`` dependency.
    """
    settings = settings or get_settings()
    logger.setLevel(settings.log_level.upper())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = create_db_engine(settings.database_url)
        Base.metadata.create_all(bind=engine)
        app.state.engine = engine
        app.state.session_factory = create_session_factory(engine)
        logger.info("Database ready at %s", engine.url.render_as_string(hide_password=True))
        try:
            yield
        finally:
            engine.dispose()
            logger.info("Database connections closed")

    app = FastAPI(title="Store", lifespan=lifespan)
    app.state.settings = settings

    app.mount("/public", StaticFiles(directory=str(settings.public_dir)), name="public")
    app.include_router(storefront.router)
    return app


def start_server(settings: Optional[Settings] = None) -> None:
    settings = settings or get_settings()
    logger.info("Server is running at http://localhost:%d", settings.port)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    start_server()

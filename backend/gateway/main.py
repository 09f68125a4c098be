import logging

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI

from .api.games import router as games_router
from .core.config import get_settings
from .core.logging import configure_logging, resolve_level

load_dotenv()

logger = logging.getLogger(__name__)

def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(title=settings.APP_NAME)

    # Routers
    app.include_router(games_router, prefix="/games", tags=["games"])

    return app

app = create_app()

def run() -> None:
    """Console entry point: serve the app on HOST:PORT."""
    settings = get_settings()
    logger.info("Server started on port %d", settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=resolve_level(settings.LOG_LEVEL))

if __name__ == "__main__":
    run()

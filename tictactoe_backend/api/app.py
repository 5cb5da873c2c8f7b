"""FastAPI application for the tic tac toe service.

Start with::

    uvicorn tictactoe_backend.api.app:app --reload --port 8000

Or::

    python -m tictactoe_backend.api.app
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tictactoe_backend.api.routes import register_exception_handlers, router
from tictactoe_backend.core.config import Settings, get_settings
from tictactoe_backend.registry.memory_registry import InMemoryGameRegistry
from tictactoe_backend.services.game_service import GameService

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level.upper(),
        format="%(asctime)s %(levelname)-8s %(name)s - %(message)s",
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Wire settings, the in-memory registry and the routes into one application."""
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_title,
        description=settings.app_description,
        version=settings.app_version,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # One registry per application: games live as long as the process
    app.state.game_service = GameService(InMemoryGameRegistry())

    app.include_router(router)
    register_exception_handlers(app)

    logger.info("%s %s ready", settings.app_title, settings.app_version)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "tictactoe_backend.api.app:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )

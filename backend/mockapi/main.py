"""User Mock API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map MockApiError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Each create_app() call owns exactly one UserStore (app.state.user_store),
      seeded wholesale; nothing survives a restart

Design Decisions:
    - App factory over import-time state: tests build isolated apps with their
      own store and settings
    - Store built in the factory, not in lifespan: in-process test transports
      do not run lifespan events
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from collections.abc import Iterable, Mapping
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mockapi.api.error_handlers import register_error_handlers
from mockapi.api.routes import root, users
from mockapi.config import Settings, get_settings
from mockapi.core.seed_data import SEED_USERS
from mockapi.infrastructure.observability import setup_logging
from mockapi.services.user_store import UserStore

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    seed: Iterable[Mapping] = SEED_USERS,
) -> FastAPI:
    """Build a fully wired application around a fresh UserStore."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        logger.info(
            f"Server started at http://{settings.host}:{settings.port}",
        )
        yield
        logger.info("User Mock API shutting down")

    app = FastAPI(title="User Mock API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.user_store = UserStore(seed)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routes: explicit registration
    app.include_router(root.router)
    app.include_router(users.router)

    register_error_handlers(app)
    return app


app = create_app()

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from favfilms.common.logging import get_logger
from favfilms.common.settings import Settings, get_settings
from favfilms.database.core.main import Database
from favfilms.services.api.errors import install_error_handlers
from favfilms.services.api.routers import auth, films, health
from favfilms.services.auth.tokens import TokenService

logger = get_logger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
    token_service: Optional[TokenService] = None,
) -> FastAPI:
    cfg = settings or get_settings()
    db = database or Database.from_settings(cfg)
    tokens = token_service or TokenService.from_settings(cfg)
    dev = cfg.app_env.lower() == "development"

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db.connect()
        if cfg.db.create_schema:
            db.create_schema()
        logger.info("%s started (env=%s)", cfg.app_name, cfg.app_env)
        yield
        db.disconnect()

    app = FastAPI(
        title="FavFilms API",
        version="0.1.0",
        docs_url=f"{cfg.api.prefix}/docs",
        openapi_url=f"{cfg.api.prefix}/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = cfg
    app.state.database = db
    app.state.token_service = tokens

    allow_origins = ["*"] if dev else cfg.api.cors_allow_origins
    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_methods=cfg.api.cors_allow_methods,
        allow_headers=cfg.api.cors_allow_headers,
        allow_credentials=cfg.api.cors_allow_credentials,
    )

    install_error_handlers(app)

    # Routers
    app.include_router(auth.router, prefix=cfg.api.prefix)
    app.include_router(films.router, prefix=cfg.api.prefix)
    app.include_router(health.router, prefix=cfg.api.prefix)
    return app


app = create_app()

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from sqlmodel import Session
from starlette.requests import Request

from foodcart.core.config import Settings, get_settings
from foodcart.core.database import build_engine, init_db
from foodcart.core.errors import register_error_handlers
from foodcart.core.logging_config import configure_logging
from foodcart.routers import favorites, foods, health
from foodcart.services.foods import seed_default_foods

logger = logging.getLogger(__name__)

CORE_ROUTERS = (
    (health.router, {"tags": ["health"]}),
    (foods.router, {}),
    (favorites.router, {}),
)


def prepare_store(application: FastAPI) -> None:
    """Create tables and, if configured, seed the default catalog."""
    engine = application.state.engine
    init_db(engine)
    if application.state.settings.seed_on_startup:
        with Session(engine) as session:
            seed_default_foods(session)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        configure_logging(settings.log_level)
        prepare_store(application)
        try:
            yield
        finally:
            application.state.engine.dispose()

    application = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        docs_url=settings.docs_url,
        lifespan=lifespan,
    )
    # One engine per application; handlers reach it through get_session.
    application.state.settings = settings
    application.state.engine = build_engine(settings)

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @application.middleware("http")
    async def enforce_utf8_json(request: Request, call_next):
        response = await call_next(request)
        if response.headers.get("content-type", "").startswith("application/json"):
            response.headers["content-type"] = "application/json; charset=utf-8"
        return response

    register_error_handlers(application)

    @application.get("/favicon.ico", include_in_schema=False)
    def favicon():
        return Response(status_code=204)

    for router, include_kwargs in CORE_ROUTERS:
        application.include_router(router, **include_kwargs)

    @application.get("/", include_in_schema=False)
    def root():
        target = settings.docs_url or "/docs"
        return RedirectResponse(target)

    return application


def run() -> None:
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("API running at http://localhost:%s", settings.port)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


app = create_app()

# reliefhub/main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from reliefhub import __version__
from reliefhub.core.config import Settings, get_settings
from reliefhub.db import create_store
from reliefhub.deps import AppContext
from reliefhub.errors import install_error_handlers
from reliefhub.routers import build_api_router, health
from reliefhub.routing import build_router
from reliefhub.services.payments import PaymentService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    ctx: AppContext = app.state.context
    await ctx.store.ensure_indexes()
    logger.info("%s ready", ctx.settings.app_name)
    yield
    ctx.store.close()


def create_app(settings: Optional[Settings] = None, store=None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level)

    app = FastAPI(lifespan=lifespan, title=settings.app_name, version=__version__)
    app.state.context = AppContext(
        settings=settings,
        store=store if store is not None else create_store(settings),
        payments=PaymentService(settings),
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_error_handlers(app)

    app.include_router(build_router(health.ROUTES), tags=[health.TAG])
    app.include_router(build_api_router(settings.api_prefix))
    return app

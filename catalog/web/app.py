"""
Application FastAPI du catalogue.

Initialise l'application web avec le Container DI, enregistre les
gestionnaires d'erreurs du domaine et monte les routes.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from loguru import logger

from ..container import Container
from ..logging_config import configure_from_settings
from .errors import register_error_handlers
from .routes.categories import router as categories_router
from .routes.products import router as products_router
from .routes.users import router as users_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure le logging, crée les tables au démarrage et libère les ressources à l'arrêt."""
    container: Container = app.state.container
    configure_from_settings(container.config())
    container.database.init()
    logger.info("API du catalogue démarrée")
    yield
    logger.info("Arrêt de l'API du catalogue")
    container.shutdown_resources()


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Construit l'application.

    Args:
        container: Container à utiliser (un nouveau par défaut)
    """
    container = container or Container()
    app = FastAPI(title=container.config().api_title, lifespan=lifespan)
    app.state.container = container

    register_error_handlers(app)

    # Routes
    app.include_router(products_router)
    app.include_router(categories_router)
    app.include_router(users_router)
    return app


app = create_app()

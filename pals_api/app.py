import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from pals_api.core.config import Settings, get_settings
from pals_api.core.utils import invalid_body_handler
from pals_api.repositories.json_storage import JsonDocument, empty_pals
from pals_api.routers import elements as elements_router
from pals_api.routers import pages as pages_router
from pals_api.routers import pals as pals_router
from pals_api.services.element_store import ElementStore
from pals_api.services.pal_store import PalStore

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the API with its own freshly loaded stores (compatible with uvicorn --factory)."""
    settings = settings or get_settings()
    app = FastAPI(
        title="Pals & Elements API",
        version="1.0.0",
        description="A CRUD API for managing Pals and Elements",
        docs_url="/api-docs",
    )

    # Cada app carrega e possui seus proprios stores
    app.state.settings = settings
    app.state.pal_store = PalStore.load(
        JsonDocument(settings.pals_file, empty_pals, indent=settings.json_indent)
    )
    app.state.element_store = ElementStore.load(
        JsonDocument(settings.elements_file, dict, indent=settings.json_indent)
    )

    app.add_exception_handler(RequestValidationError, invalid_body_handler)
    app.include_router(pages_router.router)
    app.include_router(pals_router.router)
    app.include_router(elements_router.router)
    logger.info("Pals & Elements API ready (env=%s)", settings.app_env)
    return app

"""
Main entrypoint for the PaLevel API.

This module assembles the FastAPI application, sets up logging and
includes the API routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Importing the app here makes it easy to run with uvicorn
or another ASGI server, e.g.::

    uvicorn palevel_api.app.main:app --reload

Each application owns one ``ListingStore``.  Pass a store to
``create_app`` to share or pre‑populate it; tests call ``create_app()``
to get an isolated, empty one.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .core.config import settings
from .core.errors import ValidationError
from .core.logging_config import setup_logging
from .api.router import router as api_router
from .pages import router as pages_router
from .services.listing_service import ListingService
from .services.listing_store import ListingStore


def create_app(store: Optional[ListingStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[ListingStore]
        Store backing the listing endpoints.  A new empty store is
        created when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the setup below
    # can log.
    setup_logging(settings.log_level, settings.log_file or None)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "%s %s started with %d listings",
            settings.project_name,
            settings.api_version,
            len(app.state.listing_store),
        )
        yield

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.listing_store = store if store is not None else ListingStore()
    app.state.listing_service = ListingService(app.state.listing_store)

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(exc)})

    app.include_router(api_router, prefix="/api")
    app.include_router(pages_router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()

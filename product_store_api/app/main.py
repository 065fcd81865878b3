"""
Main entrypoint for the Product Store API.

This module assembles the FastAPI application, sets up logging, the
request access log, the global error handlers and the API router.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app``, e.g.::

    uvicorn product_store_api.app.main:app --reload
"""

from typing import Optional

from fastapi import FastAPI, Request

from .api.router import router as api_router
from .core.config import settings
from .core.errors import register_exception_handlers
from .core.logging_config import get_access_logger, setup_logging
from .core.store import ProductStore


def create_app(store: Optional[ProductStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[ProductStore]
        The product collection the application owns.  A new, empty
        store is created when omitted; tests pass their own.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the handlers
    # below can log safely.
    setup_logging(settings.log_level)
    access_logger = get_access_logger()

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.store = store if store is not None else ProductStore()

    # Registered as HTTP middleware so every request is logged, including
    # those later rejected by authentication.
    @app.middleware("http")
    async def log_request(request: Request, call_next):
        path = request.url.path
        if request.url.query:
            path = f"{path}?{request.url.query}"
        access_logger.info("%s %s", request.method, path)
        return await call_next(request)

    register_exception_handlers(app)
    app.include_router(api_router, prefix="/api")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()

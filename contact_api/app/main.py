"""
Main entrypoint for the Contact API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``, e.g.::

    uvicorn contact_api.app.main:app --reload

Every call to ``create_app`` gets its own ``ContactStore``; the store
and the service wrapping it hang off ``app.state`` and are handed to
the endpoints through a dependency.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .core.store import ContactStore
from .services.contact_service import ContactService


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to build the app with.  Defaults to the module-level
        settings read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance with an empty store.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    store = ContactStore()
    app.state.contact_store = store
    app.state.contact_service = ContactService(store)

    app.include_router(v1_router, prefix=settings.api_prefix)

    logging.getLogger(__name__).info(
        "%s %s ready (prefix=%r)", settings.project_name, settings.api_version, settings.api_prefix
    )
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()

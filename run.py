"""Entry point for serving the Contact API.

Starts the FastAPI application with Uvicorn.  Intended to be executed
from the project root, e.g. under Docker, where only a single Python
file is specified:

    python run.py

Host and port are read from the ``API_HOST`` and ``API_PORT``
environment variables; all other configuration is read by
``contact_api.app.core.config``.
"""
import os

from uvicorn import Config, Server

from contact_api.app.core.config import settings


def main() -> None:
    """Serve the API until interrupted.

    Defaults are ``0.0.0.0`` and ``8000``.
    """
    host = os.getenv("API_HOST", "0.0.0.0")
    port = int(os.getenv("API_PORT", "8000"))
    config = Config(
        app="contact_api.app.main:app",
        host=host,
        port=port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    Server(config).run()


if __name__ == "__main__":
    main()

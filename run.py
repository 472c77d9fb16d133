"""Entry point for the Seminar Registry API.

Serves the FastAPI application with Uvicorn.  Intended to be executed
from the project root, for example inside Docker, where only a single
Python file is specified.

Host and port are read from the environment variables ``HOST`` and
``PORT`` (defaults ``0.0.0.0`` and ``8000``).  All other configuration
is described in ``seminar_registry.app.core.config``.

Usage:
    python run.py
"""
import asyncio
import logging
import os

from uvicorn import Config, Server

from seminar_registry.app.core.config import settings
from seminar_registry.app.main import app


async def main() -> None:
    """Run the API server until interrupted."""
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    config = Config(app=app, host=host, port=port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    logging.getLogger(__name__).info("Starting %s on %s:%s", settings.project_name, host, port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass

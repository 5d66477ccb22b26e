"""Entry point for the Jay Auto Repair API.

Starts the FastAPI application with Uvicorn.  Host, port and log level
are read from the environment (see ``jay_auto_api.app.core.config``);
place them in the process environment or your container definition.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from jay_auto_api.app.core.config import settings
from jay_auto_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Serving on %s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass

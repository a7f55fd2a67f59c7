"""Entry point for serving the Customer Record API.

Starts uvicorn on the host and port taken from the settings
(``HOST`` and ``PORT`` environment variables, default ``0.0.0.0:5000``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from customer_record_api.app.core.config import settings
from customer_record_api.app.main import app


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
    logging.getLogger(__name__).info(
        "Server is running on http://%s:%s", settings.host, settings.port
    )
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass

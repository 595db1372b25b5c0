"""Entry point for the Habit Tracker API.

Serves the FastAPI application with Uvicorn.  Host, port and log
level come from the environment (``HOST``, ``PORT``, ``LOG_LEVEL``);
see ``habit_tracker_api.app.core.config`` for all supported variables.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from habit_tracker_api.app.core.config import settings
from habit_tracker_api.app.main import create_app


async def run_api() -> None:
    """Start the API using Uvicorn."""
    config = Config(
        app=create_app(),
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass

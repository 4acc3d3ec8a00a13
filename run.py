"""Entry point for the Task Board API.

This script serves the FastAPI application with Uvicorn.  It is
intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.

Configuration such as the task store backend, database path and log
level is read from environment variables; see
``task_board_api/app/core/config.py`` for the supported names.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from task_board_api.app.core.config import settings
from task_board_api.app.main import app


async def run_api() -> None:
    """Start the API using Uvicorn.

    Host and port are read from the ``HOST`` and ``PORT`` environment
    variables.  Defaults are ``0.0.0.0`` and ``8000``.
    """
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


async def main() -> None:
    try:
        await run_api()
    except Exception:
        logging.exception("Task Board API stopped with an error")
        raise


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass

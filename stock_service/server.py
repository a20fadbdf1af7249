"""
Process supervisor for the stock service.

Binds the FastAPI app to SERVICE_ADDR_STOCK with uvicorn, serves until SIGINT
or SIGTERM, then lets uvicorn stop accepting connections and drain the calls
already in flight before the process exits.

Usage:
    python -m stock_service
    SERVICE_ADDR_STOCK=0.0.0.0:50073 stock-service
"""

import asyncio
import logging
import signal
import sys
from contextlib import contextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from stock_service.core.config import Settings, get_settings
from stock_service.core.exceptions import StartupError
from stock_service.core.logging_config import configure_logging
from stock_service.core.utils import parse_bind_address

logger = logging.getLogger(__name__)

SHUTDOWN_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class StockServer(uvicorn.Server):
    """uvicorn server that leaves signal handling to the supervisor."""

    @contextmanager
    def capture_signals(self):
        yield

    async def serve(self, sockets=None):
        # uvicorn calls sys.exit(1) when it cannot bind
        try:
            await super().serve(sockets)
        except SystemExit as e:
            raise StartupError(f"Server exited during startup with status {e.code}") from e


def request_shutdown(shutdown_event: asyncio.Event, sig: signal.Signals) -> None:
    """Fire the shutdown event. Only the first signal counts."""
    if shutdown_event.is_set():
        return
    logger.info(f"{sig.name} received, shutting down")
    shutdown_event.set()


async def run_server(
    settings: Optional[Settings] = None,
    app: Optional[FastAPI] = None,
    shutdown_event: Optional[asyncio.Event] = None
) -> None:
    """
    Serve until the shutdown event fires, then drain and return.

    Raises:
        StartupError: If the bind address is invalid or the server stops
            before shutdown was requested (bind failure, store load failure)
    """
    settings = settings or get_settings()
    host, port = parse_bind_address(settings.SERVICE_ADDR_STOCK)

    if app is None:
        from stock_service.main import create_app
        app = create_app(settings)

    config = uvicorn.Config(
        app,
        host=host,
        port=port,
        log_config=None,
        lifespan="on",
        timeout_graceful_shutdown=settings.SHUTDOWN_GRACE_SECONDS,
    )
    server = StockServer(config)

    if shutdown_event is None:
        shutdown_event = asyncio.Event()
    loop = asyncio.get_running_loop()
    for sig in SHUTDOWN_SIGNALS:
        loop.add_signal_handler(sig, request_shutdown, shutdown_event, sig)

    serve_task = asyncio.create_task(server.serve(), name="stock-server")
    shutdown_task = asyncio.create_task(shutdown_event.wait(), name="stock-shutdown")

    try:
        done, _ = await asyncio.wait(
            {serve_task, shutdown_task},
            return_when=asyncio.FIRST_COMPLETED
        )

        if shutdown_task not in done:
            shutdown_task.cancel()
            error = serve_task.exception()
            raise StartupError(
                f"Server on {settings.SERVICE_ADDR_STOCK} stopped before shutdown was requested"
                + (f": {str(error)}" if error else "")
            ) from error

        logger.info("Draining in-flight calls")
        server.should_exit = True
        await serve_task
        logger.info("Stock service stopped")
    finally:
        for sig in SHUTDOWN_SIGNALS:
            loop.remove_signal_handler(sig)


def main() -> None:
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)

    logger.info(f"Starting stock service on {settings.SERVICE_ADDR_STOCK} ({settings.ENVIRONMENT})")
    try:
        asyncio.run(run_server(settings))
    except StartupError as e:
        logger.critical(f"Stock service failed to start: {str(e)}")
        sys.exit(1)


if __name__ == "__main__":
    main()

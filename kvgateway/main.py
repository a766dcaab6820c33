"""
Storage Gateway Application Entry Point

FastAPI application factory, router registration and the command line
launcher.

Usage:
    kvgateway --config ./config.json
    python -m kvgateway.main --config /etc/kvgateway.json --debug
"""

import argparse
import logging
import sys
import traceback
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from kvgateway import __version__
from kvgateway.api import inmemory_router, mongodb_router, redis_router
from kvgateway.common.errors import AppError, ConfigError
from kvgateway.config import DEFAULT_CONFIG_PATH, Configuration, parse_config
from kvgateway.db.backends import Backends
from kvgateway.logging_config import setup_logging

logger = logging.getLogger(__name__)

# Seconds in-flight requests get to finish after SIGINT/SIGTERM
GRACEFUL_SHUTDOWN_TIMEOUT = 5


def create_app(
    config: Optional[Configuration] = None,
    backends: Optional[Backends] = None,
) -> FastAPI:
    """
    Create the FastAPI application

    Args:
        config: Parsed configuration; its databases are initialized on startup
        backends: Pre-built backends (e.g. test doubles). When given, startup
            does not initialize or close anything.

    Returns:
        FastAPI: Application with `/inmemory`, `/redis` and `/mongodb/records`
    """
    config = config or Configuration()
    owns_backends = backends is None

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application Lifecycle Management

        Connect backends on startup, close them on shutdown. A connection
        failure raises here and aborts startup.
        """
        if owns_backends:
            await app.state.backends.initialize(config.databases)
        logger.info(
            "Http server running on %s:%d",
            config.application.host,
            config.application.port,
        )
        yield
        logger.info("[Shutdown] Listeners are closed, waiting to finish opened connections")
        if owns_backends:
            await app.state.backends.close()
        logger.info("[Shutdown] closed")

    app = FastAPI(
        title="Storage Gateway",
        description="Key-value access to in-memory and Redis stores, and MongoDB record aggregation",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.backends = backends if backends is not None else Backends()

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        """Handle application custom exceptions"""
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """
        Handle uncaught exceptions

        The traceback is logged; clients only get a generic message.
        """
        logger.error(
            "Uncaught exception: %s\nPath: %s\nTraceback:\n%s",
            str(exc),
            request.url.path,
            traceback.format_exc(),
        )
        return JSONResponse(status_code=500, content={"error": "internal server error"})

    @app.get("/health", tags=["Health"])
    async def health_check():
        """
        Health Check

        Used by liveness checks.
        """
        return {"status": "healthy"}

    app.include_router(inmemory_router)
    app.include_router(redis_router)
    app.include_router(mongodb_router)

    return app


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Storage Gateway: HTTP access to key-value stores and record aggregation",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--config",
        type=str,
        default=DEFAULT_CONFIG_PATH,
        help="Absolute or relative path of the configuration file",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.debug)

    try:
        config = parse_config(args.config)
    except ConfigError as e:
        logger.error("error while parsing configuration file: %s", e.message)
        sys.exit(1)

    app = create_app(config)

    # uvicorn installs the SIGINT/SIGTERM handlers and cancels requests
    # still running once the graceful window has passed.
    uvicorn.run(
        app,
        host=config.application.host,
        port=config.application.port,
        timeout_graceful_shutdown=GRACEFUL_SHUTDOWN_TIMEOUT,
        log_config=None,
    )


if __name__ == "__main__":
    main()

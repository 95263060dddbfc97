import argparse
import logging

import uvicorn
from fastapi import FastAPI, Request, Response, status

from shortly.config import settings
from shortly.exceptions import NotFoundError, ShortenerError
from shortly.logging_config import setup_logging
from shortly.middleware import RequestLoggingMiddleware
from shortly.api.v1 import links, redirect

logger = logging.getLogger("shortly.app")


def create_app() -> FastAPI:
    setup_logging(settings.log_level, json_format=settings.log_json)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="An in-memory URL shortener service built with FastAPI",
        debug=settings.debug
    )
    app.add_middleware(RequestLoggingMiddleware)

    # Exception handlers mapping domain errors to HTTP responses
    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @app.exception_handler(ShortenerError)
    async def shortener_error_handler(request: Request, exc: ShortenerError):
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    ######## Include routers
    app.include_router(links.router, prefix="/api/v1")
    app.include_router(redirect.router)

    return app


app = create_app()


def main():
    """Run the service: ``python main.py --port 8080 --storage memory``"""
    parser = argparse.ArgumentParser(description="Run the shortly URL shortener")
    parser.add_argument("--port", type=int, default=settings.port,
                        help="HTTP port to run the service on")
    parser.add_argument("--storage", default=settings.storage_backend,
                        help="Storage type to use [memory]")
    args = parser.parse_args()

    settings.port = args.port
    settings.storage_backend = args.storage

    logger.info("shortly server is on tap now: http://%s:%d", settings.host, settings.port)
    # uvicorn exits the process if the port cannot be bound
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()

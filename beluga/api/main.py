"""FastAPI application exposing the BelugaSwap payload builders.

SDK errors are mapped to HTTP status codes here; the builders themselves
know nothing about HTTP.
"""

import os

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from beluga import __version__
from beluga.api.endpoints import router
from beluga.errors import (
    BelugaError,
    ConfigurationError,
    PoolNotFoundError,
    RemoteUnavailableError,
    UnimplementedError,
)

logger = structlog.get_logger()

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("BELUGA_API_HOST", "127.0.0.1")
PORT = int(os.environ.get("BELUGA_API_PORT", "8000"))
DEBUG = os.environ.get("BELUGA_API_DEBUG", "false").lower() in ("true", "1", "yes")

app = FastAPI(
    title="BelugaSwap SDK",
    description="Human-friendly parameter builder for BelugaSwap pools",
    version=__version__,
)


def error_status(exc: BelugaError) -> int:
    """HTTP status code for an SDK error."""
    if isinstance(exc, PoolNotFoundError):
        return 404
    if isinstance(exc, UnimplementedError):
        return 501
    if isinstance(exc, RemoteUnavailableError):
        return 502
    if isinstance(exc, ConfigurationError):
        return 500
    return 400


@app.exception_handler(BelugaError)
async def beluga_error_handler(request: Request, exc: BelugaError) -> JSONResponse:
    """Return SDK errors as JSON with the error kind and message."""
    status_code = error_status(exc)
    logger.warning(
        "request_failed",
        path=request.url.path,
        error=type(exc).__name__,
        detail=str(exc),
        status_code=status_code,
    )
    return JSONResponse(
        status_code=status_code,
        content={"error": type(exc).__name__, "detail": str(exc)},
    )


app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}


def run() -> None:
    """Run the API server.

    Configuration via environment variables:
    - BELUGA_API_HOST: Host to bind to (default: 127.0.0.1)
    - BELUGA_API_PORT: Port to bind to (default: 8000)
    - BELUGA_API_DEBUG: Enable debug/reload mode (default: false)
    """
    uvicorn.run(
        "beluga.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()

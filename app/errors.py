"""
Error types returned by the proxy endpoints
"""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.logger import LOG


class ProxyError(Exception):
    """Base error rendered as {"error": message} with its status code."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ClientError(ProxyError):
    """Missing or invalid input from the caller."""
    status_code = 400


class ProviderError(ProxyError):
    """Missing configuration, upstream failure or unusable upstream output."""
    status_code = 500


async def proxy_error_handler(request: Request, exc: ProxyError) -> JSONResponse:
    LOG.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    LOG.warning(f"{request.method} {request.url.path} -> 400: {exc.errors()}")
    return JSONResponse({"error": "Invalid request body"}, status_code=400)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ProxyError, proxy_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

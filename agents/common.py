# agents/common.py

"""Shared request/response contract for the provider proxies."""
import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

logger = logging.getLogger(__name__)

API_KEY_NOT_CONFIGURED = "API key not configured"


class ProxyError(Exception):
    """Base error for anything that goes wrong behind a proxy boundary.

    The message is surfaced verbatim to the caller in the ``error`` field.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingAPIKeyError(ProxyError):
    """Raised before any network call when the vendor credential is absent."""

    def __init__(self, env_var: str = ""):
        super().__init__(API_KEY_NOT_CONFIGURED)
        self.env_var = env_var


class FailureResponse(BaseModel):
    success: bool = False
    error: str


class HealthResponse(BaseModel):
    status: str
    agent: str
    version: str
    api_key_configured: bool


def require_api_key(api_key: Optional[str], env_var: str = "") -> str:
    """Return the credential or raise :class:`MissingAPIKeyError`."""
    if not api_key:
        logger.error(f"{env_var or 'Vendor API key'} environment variable is not set")
        raise MissingAPIKeyError(env_var)
    return api_key


def failure_response(message: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(FailureResponse(error=message)),
    )


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        location = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
    return "; ".join(parts) or "Invalid request"


def install_error_handlers(app: FastAPI, agent_name: str) -> None:
    """Register handlers that turn every proxy failure into ``{success: false, error}``."""

    @app.exception_handler(ProxyError)
    async def proxy_error_handler(request: Request, exc: ProxyError):
        logger.error(f"{agent_name} error for {request.url.path}: {exc.message}")
        return failure_response(exc.message, exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        message = _describe_validation_errors(exc)
        logger.warning(f"{agent_name} request validation error for {request.url.path}: {message}")
        return failure_response(message, status.HTTP_422_UNPROCESSABLE_ENTITY)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(f"{agent_name} unhandled error for {request.url.path}: {exc}", exc_info=exc)
        return failure_response(str(exc) or exc.__class__.__name__)

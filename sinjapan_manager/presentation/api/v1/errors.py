"""Exception handlers mapping domain errors to ``{"message": ...}`` responses.

The browser shows ``message`` verbatim, so every error body carries a
user-facing Japanese string.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from sinjapan_manager.domain.exceptions import (
    AIProviderError,
    AttachmentTooLargeError,
    BackendError,
    LeadImportError,
    PermissionDeniedError,
)

logger = logging.getLogger(__name__)


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


async def backend_error_handler(request: Request, exc: BackendError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.warning("Backend error on %s %s: %s", request.method, request.url.path, exc)
    return _message(exc.status_code, exc.message)


async def permission_denied_handler(request: Request, exc: PermissionDeniedError) -> JSONResponse:
    logger.info("Denied %s for role %s", exc.action, exc.role)
    return _message(status.HTTP_403_FORBIDDEN, exc.message)


async def lead_import_error_handler(request: Request, exc: LeadImportError) -> JSONResponse:
    return _message(status.HTTP_400_BAD_REQUEST, exc.message)


async def ai_provider_error_handler(request: Request, exc: AIProviderError) -> JSONResponse:
    logger.warning("AI provider %s failed: %s", exc.provider, exc)
    return _message(status.HTTP_502_BAD_GATEWAY, exc.message)


async def attachment_too_large_handler(
    request: Request, exc: AttachmentTooLargeError
) -> JSONResponse:
    return _message(status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, exc.message)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BackendError, backend_error_handler)
    app.add_exception_handler(PermissionDeniedError, permission_denied_handler)
    app.add_exception_handler(LeadImportError, lead_import_error_handler)
    app.add_exception_handler(AIProviderError, ai_provider_error_handler)
    app.add_exception_handler(AttachmentTooLargeError, attachment_too_large_handler)

"""Typed service errors and their HTTP mapping.

Every failure leaves the service as ``{"error": "<message>"}`` with an
optional ``detail`` list, regardless of whether it came from request
validation, a lookup, or the store.
"""
from __future__ import annotations

import logging
from typing import Any, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Server error"

    def __init__(self, message: Optional[str] = None, detail: Any = None):
        self.message = message or self.message
        self.detail = detail
        super().__init__(self.message)


class ValidationFailed(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request"


class NotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class ConflictError(ServiceError):
    status_code = status.HTTP_409_CONFLICT
    message = "Constraint violated"


class StorageError(ServiceError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Storage error"


def _field_name(loc) -> str:
    # loc looks like ("body", "price") or ("path", "favorite_id"); a bare
    # ("body",) means the whole body was missing or not an object.
    parts = [str(p) for p in loc[1:]] if len(loc) > 1 else [str(p) for p in loc]
    return ".".join(parts)


def summarize_validation_errors(errors: List[dict]) -> str:
    missing = [_field_name(e.get("loc", ())) for e in errors if e.get("type") == "missing"]
    if missing:
        return "Missing fields: " + ", ".join(dict.fromkeys(missing))
    invalid = [_field_name(e.get("loc", ())) for e in errors]
    return "Invalid fields: " + ", ".join(dict.fromkeys(invalid))


def error_response(status_code: int, message: str, detail: Any = None) -> JSONResponse:
    body = {"error": message}
    if detail is not None:
        body["detail"] = jsonable_encoder(detail)
    return JSONResponse(status_code=status_code, content=body)


async def _service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    return error_response(exc.status_code, exc.message, exc.detail)


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = list(exc.errors())
    return await _service_error_handler(request, ValidationFailed(summarize_validation_errors(errors), errors))


async def _integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    logger.warning("%s %s violated a constraint: %s", request.method, request.url.path, exc.orig)
    return error_response(ConflictError.status_code, ConflictError.message)


async def _storage_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("%s %s failed in the store", request.method, request.url.path)
    return error_response(StorageError.status_code, StorageError.message)


def register_error_handlers(application: FastAPI) -> None:
    application.add_exception_handler(ServiceError, _service_error_handler)
    application.add_exception_handler(RequestValidationError, _request_validation_handler)
    application.add_exception_handler(IntegrityError, _integrity_error_handler)
    application.add_exception_handler(SQLAlchemyError, _storage_error_handler)

from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.core.exceptions import AppError
from app.schemas.response import ErrorResponse
from datetime import datetime, timezone
import logging
import uuid

logger = logging.getLogger(__name__)

def _get_error_code(status_code: int) -> str:
    code_map = {
        400: "BAD_REQUEST",
        401: "UNAUTHORIZED",
        403: "FORBIDDEN",
        404: "NOT_FOUND",
        405: "METHOD_NOT_ALLOWED",
        409: "CONFLICT",
        422: "VALIDATION_ERROR",
        500: "INTERNAL_SERVER_ERROR",
    }
    return code_map.get(status_code, f"HTTP_{status_code}")

def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", None) or str(uuid.uuid4())

def _error_response(request: Request, status_code: int, code: str, message: str, details=None) -> JSONResponse:
    error_response = ErrorResponse(
        code=code,
        message=message,
        details=details,
        timestamp=datetime.now(timezone.utc).isoformat(),
        path=request.url.path,
        request_id=_request_id(request),
    )
    return JSONResponse(status_code=status_code, content=jsonable_encoder(error_response))

async def app_exception_handler(request: Request, exc: AppError):
    request_id = _request_id(request)
    if exc.status_code >= 500:
        logger.error(f"[{request_id}] {type(exc).__name__}: {exc.message} {exc.context}", extra={"request_id": request_id})
    else:
        logger.warning(f"[{request_id}] HTTP {exc.status_code}: {exc.message}", extra={"request_id": request_id})
    return _error_response(request, exc.status_code, exc.code, exc.message)

async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    request_id = _request_id(request)
    logger.warning(f"[{request_id}] HTTP {exc.status_code}: {exc.detail}", extra={"request_id": request_id})
    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return _error_response(request, exc.status_code, _get_error_code(exc.status_code), message)

async def validation_exception_handler(request: Request, exc: RequestValidationError):
    request_id = _request_id(request)
    logger.warning(f"[{request_id}] Validation error: {exc.errors()}", extra={"request_id": request_id})
    return _error_response(
        request, 422, "VALIDATION_ERROR", "Request validation failed",
        details={"validation_errors": jsonable_encoder(
            [{k: v for k, v in error.items() if k != "ctx"} for error in exc.errors()]
        )},
    )

async def global_exception_handler(request: Request, exc: Exception):
    request_id = _request_id(request)
    logger.error(f"[{request_id}] Unhandled exception: {exc}", exc_info=True, extra={"request_id": request_id})
    return _error_response(request, 500, "INTERNAL_SERVER_ERROR", "An unexpected error occurred")

"""Application error hierarchy.

Services raise these; the handlers in ``app.middleware.exceptions`` turn them
into the ``{"status": "error"}`` envelope with the matching status code.
"""
from typing import Any, Dict, Optional


class AppError(Exception):
    status_code: int = 500
    code: str = "INTERNAL_SERVER_ERROR"
    default_message: str = "An unexpected error occurred"

    def __init__(self, message: Optional[str] = None, context: Optional[Dict[str, Any]] = None):
        self.message = message or self.default_message
        # logged, never returned to the client
        self.context = context or {}
        super().__init__(self.message)


class AuthError(AppError):
    status_code = 401
    code = "UNAUTHORIZED"
    default_message = "Invalid or expired token"


class PermissionDeniedError(AppError):
    status_code = 403
    code = "FORBIDDEN"
    default_message = "You do not have permission to perform this action"


class NotFoundError(AppError):
    status_code = 404
    code = "NOT_FOUND"

    def __init__(self, resource: str = "resource", resource_id: Any = None, context: Optional[Dict[str, Any]] = None):
        message = f"{resource.capitalize()} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = str(resource_id)
        super().__init__(message=message, context=ctx)


class ValidationError(AppError):
    status_code = 400
    code = "BAD_REQUEST"
    default_message = "Validation failed"


class ConflictError(AppError):
    status_code = 409
    code = "CONFLICT"
    default_message = "The resource is not in a state that allows this action"


class PersistenceError(AppError):
    """A database read or write failed. The message never carries driver details."""
    status_code = 500
    code = "INTERNAL_SERVER_ERROR"
    default_message = "An unexpected error occurred"

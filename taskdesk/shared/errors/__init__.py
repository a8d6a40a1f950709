from .base import (
    AppError,
    AuthenticationError,
    ConflictError,
    DomainError,
    InfrastructureError,
    NotFoundError,
    OperationFailedError,
    ValidationError,
    field_errors,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "AuthenticationError",
    "ConflictError",
    "DomainError",
    "InfrastructureError",
    "NotFoundError",
    "OperationFailedError",
    "ValidationError",
    "field_errors",
    "handle_app_error",
    "register_error_handler",
]

from .base import (
    AppError,
    CartNotFoundError,
    DomainError,
    InsufficientInventoryError,
    InvalidQuantityError,
    ProductNotFoundError,
    UnauthenticatedError,
    ValidationError,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "CartNotFoundError",
    "DomainError",
    "InsufficientInventoryError",
    "InvalidQuantityError",
    "ProductNotFoundError",
    "UnauthenticatedError",
    "ValidationError",
    "handle_app_error",
    "register_error_handler",
]

"""Domain errors raised by the services.

All of them are ``HTTPException`` subclasses, so a service can raise them
directly and the handlers in ``app.main`` render them as ``{"message": ...}``.
"""
from fastapi import HTTPException


class AppError(HTTPException):
    status_code = 500
    body_key = "message"

    def __init__(self, message: str):
        super().__init__(status_code=self.status_code, detail=message)


class ValidationError(AppError):
    status_code = 400


class InsufficientStockError(AppError):
    status_code = 400

    def __init__(self, message: str = "Not enough stock"):
        super().__init__(message)


class NotFoundError(AppError):
    status_code = 404


class TransitionError(AppError):
    """Raised when a request is no longer pending."""

    status_code = 409


class PaymentGatewayError(AppError):
    status_code = 500
    body_key = "error"

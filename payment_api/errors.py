from typing import Optional


class PaymentError(Exception):
    """Base exception for errors surfaced to API clients."""

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(PaymentError):
    """Raised when a required payment field is missing or empty."""
    status_code = 400


class NotFoundError(PaymentError):
    """Raised when no payment matches the requested identifier."""
    status_code = 404


class GatewayError(PaymentError):
    """Raised when the external payment gateway rejects or fails a request."""
    status_code = 502

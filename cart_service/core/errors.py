"""Operational errors raised by the cart engine"""

from typing import Any


class CartError(Exception):
    """
    Base class for expected, caller-facing cart failures.

    The message is safe to return verbatim. The HTTP status is only
    looked at by the exception handlers in main.py.
    """

    status_code: int = 400

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the failure envelope"""
        return {
            "success": False,
            "error": {
                "message": self.message,
                "statusCode": self.status_code,
            },
        }


class ValidationError(CartError):
    """Malformed or out-of-range input to add/update"""
    status_code = 400


class NotFoundError(CartError):
    """Referenced productId is not in the cart"""
    status_code = 404


class BadRequestError(CartError):
    """Operation not allowed in the current cart state"""
    status_code = 400

"""Errors raised by the store and converted to JSON responses by the app."""
from typing import Optional


class PriceStoreError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message: Optional[str] = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"error": self.message}


class ValidationError(PriceStoreError):
    """Request body is missing, not a JSON object, or has a bad ``price``."""

    status_code = 400
    message = "Invalid request body"


class NotFoundError(PriceStoreError):
    status_code = 404
    message = "Price not found"


class InternalError(PriceStoreError):
    status_code = 500
    message = "Internal server error"

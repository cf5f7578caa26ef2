"""
Error classifications raised by services and routes.

Each error carries the HTTP status it maps to and the message that is sent
back to the client as {"error": message}. The app-level exception handler
in main.py does the conversion.
"""

from typing import Optional

from fastapi import status


class ChirpyError(Exception):
    """Base class for every error that ends a request with an error payload"""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class DecodeError(ChirpyError):
    """Request body could not be decoded into the expected parameters"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class ChirpTooLongError(ChirpyError):
    status_code = status.HTTP_400_BAD_REQUEST


class InvalidIdentifierError(ChirpyError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ChirpyError):
    status_code = status.HTTP_404_NOT_FOUND


class ForbiddenError(ChirpyError):
    status_code = status.HTTP_403_FORBIDDEN


class StoreError(ChirpyError):
    """The persistence layer failed or returned an unusable result"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

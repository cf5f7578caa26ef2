from typing import Optional

from chirpy_app.config import settings
from chirpy_app.errors import ChirpTooLongError

CHIRP_TOO_LONG_MESSAGE = "Chirp is too long"


def chirp_length(body: str) -> int:
    """Length in UTF-8 bytes, not characters"""
    return len(body.encode("utf-8"))


def validate_chirp_body(body: str, max_length: Optional[int] = None) -> str:
    """
    Reject chirp bodies longer than max_length bytes.

    Returns the body unchanged when it is short enough.

    Raises:
        ChirpTooLongError: body exceeds the limit
    """
    if max_length is None:
        max_length = settings.max_chirp_length
    if chirp_length(body) > max_length:
        raise ChirpTooLongError(CHIRP_TOO_LONG_MESSAGE)
    return body

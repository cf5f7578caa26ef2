"""
Response encoding helpers.

Success payloads are plain JSON entities produced by the pydantic response
models. Failures always use the shape {"error": "<message>"}.
"""

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse

from chirpy_app.errors import ChirpyError

DECODE_ERROR_MESSAGE = "Couldn't decode parameters"


def respond_with_error(status_code: int, message: str) -> JSONResponse:
    if status_code > 499:
        print(f"❌ Responding with {status_code} error: {message}")
    return JSONResponse(status_code=status_code, content={"error": message})


def respond_with_text(status_code: int, text: str) -> PlainTextResponse:
    return PlainTextResponse(content=text, status_code=status_code, media_type="text/plain; charset=utf-8")


def respond_with_html(status_code: int, html: str) -> HTMLResponse:
    return HTMLResponse(content=html, status_code=status_code)


async def chirpy_error_handler(request: Request, exc: ChirpyError) -> JSONResponse:
    """Map any ChirpyError to its status and error payload"""
    return respond_with_error(exc.status_code, exc.message)


async def decode_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Malformed or incomplete request bodies.

    Routes take path identifiers as plain strings and parse them themselves,
    so a validation error here always comes from body decoding. It is
    reported as a generic 500, never as a 400/422.
    """
    error_types = [error["type"] for error in exc.errors()]
    print(f"⚠️  Could not decode request to {request.url.path}: {error_types}")
    return respond_with_error(500, DECODE_ERROR_MESSAGE)

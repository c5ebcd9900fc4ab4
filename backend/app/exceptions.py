# backend/app/exceptions.py
from typing import Optional

from fastapi import Request
from fastapi.responses import JSONResponse


class APIError(Exception):
    """Error surfaced to the caller as ``{"error": message}``."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class UpstreamError(Exception):
    """The mandatory email-validation call failed."""

    def __init__(self, message: str, url: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)

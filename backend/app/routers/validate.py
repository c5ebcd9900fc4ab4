# backend/app/routers/validate.py
import logging

import httpx
from fastapi import APIRouter, Depends, Request

from ..config import Settings, get_settings
from ..exceptions import APIError, UpstreamError
from ..http_client import get_http_client
from ..models.validation import ValidationRequest
from ..services.orchestrator import validate_email_address

router = APIRouter()
logger = logging.getLogger("mailcheck.api")

EMAIL_REQUIRED = "Email is required"
VALIDATION_FAILED = "Failed to validate email"


@router.post("/validate")
async def validate(
    request: Request,
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    try:
        body = await request.json()
    except ValueError:
        logger.exception("Error validating email: request body is not JSON")
        raise APIError(500, VALIDATION_FAILED)

    if not isinstance(body, dict):
        logger.error("Error validating email: request body is not an object")
        raise APIError(500, VALIDATION_FAILED)

    email = body.get("email")
    if not email or not isinstance(email, str):
        raise APIError(400, EMAIL_REQUIRED)

    try:
        return await validate_email_address(ValidationRequest(email=email), settings, client)
    except UpstreamError as e:
        logger.error("Error validating email: %s (url=%s status=%s)", e, e.url, e.status_code)
        raise APIError(500, VALIDATION_FAILED)
    except Exception:
        logger.exception("Error validating email")
        raise APIError(500, VALIDATION_FAILED)

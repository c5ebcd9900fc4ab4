# backend/app/services/orchestrator.py
import asyncio
import logging
from typing import Any, Dict, Optional

import httpx
from pydantic import BaseModel

from ..config import Settings
from ..models.validation import ValidationRequest
from ..utils.helpers import extract_domain
from .upstream import check_domain_authenticity, check_domain_reputation, check_email

logger = logging.getLogger("mailcheck.orchestrator")


def _enrichment(name: str, outcome: Any) -> Optional[Dict[str, Any]]:
    if isinstance(outcome, BaseException):
        logger.error("%s check raised unexpectedly: %r", name, outcome)
        return None
    if isinstance(outcome, BaseModel):
        return outcome.model_dump()
    return None


async def validate_email_address(
    request: ValidationRequest,
    settings: Settings,
    client: httpx.AsyncClient,
) -> Dict[str, Any]:
    """
    Run the three checks concurrently and merge them into one payload.

    All three are awaited before returning, even when the email check
    fails early. UpstreamError from the email check is re-raised; the two
    domain checks contribute None when unavailable.
    """
    domain = extract_domain(request.email)

    email_data, authenticity, reputation = await asyncio.gather(
        check_email(client, settings, request.email),
        check_domain_authenticity(client, settings, domain),
        check_domain_reputation(client, settings, domain),
        return_exceptions=True,
    )

    if isinstance(email_data, BaseException):
        raise email_data

    return {
        **email_data,
        "domain_authenticity": _enrichment("domain authenticity", authenticity),
        "domain_reputation": _enrichment("domain reputation", reputation),
    }

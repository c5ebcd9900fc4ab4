# backend/app/services/upstream.py
# Calls to the three external checking services.
#
# check_email is mandatory and raises UpstreamError on any failure.
# check_domain_authenticity / check_domain_reputation are best effort:
# every failure is logged and turned into None.
import asyncio
import json
import logging
import math
from typing import Any, Dict, Optional

import httpx

from ..config import Settings
from ..exceptions import UpstreamError
from ..models.validation import AuthenticityResult, ReputationResult

logger = logging.getLogger("mailcheck.upstream")


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return isinstance(value, int) or math.isfinite(value)


def _reject_constant(name: str):
    raise ValueError(f"non-finite JSON number: {name}")


def _read_json(response: httpx.Response) -> Any:
    # NaN / Infinity are not JSON and cannot be sent back to the caller
    return json.loads(response.content, parse_constant=_reject_constant)


def _count(value: Any) -> int:
    if _is_number(value) and value > 0:
        return int(value)
    return 0


# ---------------------------------------------------
# Normalizers (pure)
# ---------------------------------------------------
def normalize_authenticity(data: Any) -> Optional[AuthenticityResult]:
    if not isinstance(data, dict):
        return None

    score = data.get("score")
    result = AuthenticityResult(
        whois=data.get("whois") or None,
        score=score if _is_number(score) else None,
        dimensions=data.get("dimensions") or None,
    )
    if result.whois is None and result.score is None and result.dimensions is None:
        return None
    return result


def normalize_reputation(data: Any) -> Optional[ReputationResult]:
    if not isinstance(data, dict):
        return None
    summary = data.get("summary")
    if not isinstance(summary, dict):
        return None

    listed = _count(summary.get("listedCount"))
    return ReputationResult(
        listedCount=listed,
        totalChecked=_count(summary.get("totalChecked")),
        cleanCount=_count(summary.get("cleanCount")),
        errorCount=_count(summary.get("errorCount")),
        isClean=listed == 0,
    )


# ---------------------------------------------------
# Email validation (mandatory)
# ---------------------------------------------------
async def check_email(client: httpx.AsyncClient, settings: Settings, email: str) -> Dict[str, Any]:
    url = settings.validate_email_url
    timeout = settings.EMAIL_VALIDATION_TIMEOUT
    try:
        response = await asyncio.wait_for(
            client.post(url, json={"email": email}, headers=settings.json_headers, timeout=timeout),
            timeout=timeout,
        )
    except asyncio.TimeoutError as e:
        raise UpstreamError(f"email validation timed out after {timeout}s", url) from e
    except httpx.HTTPError as e:
        raise UpstreamError(f"email validation request failed: {e}", url) from e

    if not response.is_success:
        raise UpstreamError(
            f"email validation returned {response.status_code}", url, response.status_code
        )

    try:
        data = _read_json(response)
    except ValueError as e:
        raise UpstreamError("email validation returned invalid JSON", url, response.status_code) from e
    if not isinstance(data, dict):
        raise UpstreamError("email validation returned a non-object body", url, response.status_code)
    return data


# ---------------------------------------------------
# Domain authenticity (best effort)
# ---------------------------------------------------
async def check_domain_authenticity(
    client: httpx.AsyncClient, settings: Settings, domain: str
) -> Optional[AuthenticityResult]:
    if not domain:
        logger.warning("Skipping domain authenticity check: no domain")
        return None

    logger.info("Checking domain authenticity for: %s", domain)
    timeout = settings.DOMAIN_AUTHENTICITY_TIMEOUT
    headers = {"User-Agent": settings.USER_AGENT, "Accept": "application/json"}
    try:
        response = await asyncio.wait_for(
            client.get(settings.domain_authenticity_url(domain), headers=headers, timeout=timeout),
            timeout=timeout,
        )
        if not response.is_success:
            logger.warning("Spamhaus API returned %d for %s", response.status_code, domain)
            return None
        data = _read_json(response)
    except (httpx.HTTPError, asyncio.TimeoutError, ValueError) as e:
        logger.error("Failed to check domain authenticity for %s: %r", domain, e)
        return None

    if not isinstance(data, dict):
        logger.warning("Invalid response format from Spamhaus for %s", domain)
        return None

    result = normalize_authenticity(data)
    if result is None:
        logger.warning("No valid data returned from Spamhaus for %s", domain)
        return None

    logger.info("Domain authenticity check completed for %s (score=%s)", domain, result.score)
    return result


# ---------------------------------------------------
# Domain reputation / DNSBL (best effort)
# ---------------------------------------------------
async def check_domain_reputation(
    client: httpx.AsyncClient, settings: Settings, domain: str
) -> Optional[ReputationResult]:
    if not domain:
        logger.warning("Skipping domain reputation check: no domain")
        return None

    logger.info("Checking domain reputation for: %s", domain)
    timeout = settings.DOMAIN_REPUTATION_TIMEOUT
    try:
        response = await asyncio.wait_for(
            client.post(
                settings.domain_reputation_url,
                json={"target": domain},
                headers=settings.json_headers,
                timeout=timeout,
            ),
            timeout=timeout,
        )
        if not response.is_success:
            logger.warning("DNSBL API returned %d for %s", response.status_code, domain)
            return None
        data = _read_json(response)
    except (httpx.HTTPError, asyncio.TimeoutError, ValueError) as e:
        logger.error("Failed to check domain reputation for %s: %r", domain, e)
        return None

    result = normalize_reputation(data)
    if result is None:
        logger.warning("Invalid DNSBL response format for %s", domain)
        return None

    logger.info("Domain reputation check completed for %s (listed=%d)", domain, result.listedCount)
    return result

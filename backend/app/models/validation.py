# backend/app/models/validation.py
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ValidationRequest(BaseModel):
    email: str = Field(min_length=1)


class ReputationResult(BaseModel):
    listedCount: int = 0
    totalChecked: int = 0
    cleanCount: int = 0
    errorCount: int = 0
    isClean: bool = True


class AuthenticityResult(BaseModel):
    whois: Optional[Any] = None
    # 0 is a real (neutral) score, None means unknown
    score: Optional[Union[int, float]] = None
    dimensions: Optional[Any] = None


class CombinedValidationResult(BaseModel):
    """Email-check payload as returned by the upstream plus the two domain checks.

    Every upstream field is optional and unknown fields are kept, so the
    presenter can render whatever the orchestrator sent back.
    """

    model_config = ConfigDict(extra="allow")

    # passed through from the upstream untouched; views rely on truthiness only
    request_id: Optional[Any] = None
    email: Optional[Any] = None
    is_reachable: Optional[Any] = None
    is_valid_syntax: Optional[Any] = None
    mx_exists: Optional[Any] = None
    is_disposable: Optional[Any] = None
    is_role_account: Optional[Any] = None
    is_deliverable: Optional[Any] = None
    classification: Optional[Any] = None
    processing_time_ms: Optional[Any] = None

    domain_authenticity: Optional[AuthenticityResult] = None
    domain_reputation: Optional[ReputationResult] = None

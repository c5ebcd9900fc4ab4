# backend/app/presenter.py
# Form state and view helpers for the validation page.
import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Union

import httpx

from .models.validation import CombinedValidationResult, ReputationResult

logger = logging.getLogger("mailcheck.ui")

VALIDATE_PATH = "/api/validate"
DEFAULT_ERROR = "Failed to validate email"

Score = Optional[Union[int, float]]


@dataclass(frozen=True)
class StatusBanner:
    tone: str   # positive | negative | caution
    label: str


@dataclass(frozen=True)
class IndicatorTile:
    label: str
    ok: bool
    text: str


# ---------------------------------------------------
# Pure rendering rules
# ---------------------------------------------------
def status_banner(is_reachable: Any) -> StatusBanner:
    if is_reachable == "Safe":
        return StatusBanner("positive", "Valid")
    if is_reachable == "Invalid":
        return StatusBanner("negative", "Invalid")
    return StatusBanner("caution", "Risky")


def indicator_tiles(result: CombinedValidationResult) -> List[IndicatorTile]:
    rows = [
        ("Syntax", bool(result.is_valid_syntax), "Valid", "Invalid"),
        ("MX Records", bool(result.mx_exists), "Found", "Missing"),
        ("Disposable", not result.is_disposable, "No", "Yes"),
        ("Role Account", not result.is_role_account, "Personal", "Role"),
    ]
    return [IndicatorTile(label, ok, positive if ok else negative) for label, ok, positive, negative in rows]


def score_label(score: Score) -> str:
    # order matters: fractional scores in (0, 1) end up as "Very Poor"
    if score is None:
        return "N/A"
    if score > 3:
        return "Excellent"
    if score == 3:
        return "Good"
    if score >= 1:
        return "Okay"
    if score == 0:
        return "Neutral"
    if score >= -2:
        return "Very Poor"
    return "Poor"


_SCORE_TONES = {
    "N/A": "unknown",
    "Excellent": "excellent",
    "Good": "good",
    "Okay": "okay",
    "Neutral": "neutral",
    "Very Poor": "very-poor",
    "Poor": "poor",
}


def score_tone(score: Score) -> str:
    return _SCORE_TONES[score_label(score)]


def reputation_label(reputation: ReputationResult) -> str:
    return "Clean" if reputation.isClean else "Blacklisted"


def listed_text(count: int) -> str:
    return f"{count} list{'s' if count != 1 else ''}"


def show_authenticity(result: CombinedValidationResult) -> bool:
    auth = result.domain_authenticity
    return auth is not None and auth.score is not None


def show_domain_metrics(result: CombinedValidationResult) -> bool:
    return result.domain_reputation is not None or show_authenticity(result)


def short_request_id(request_id) -> str:
    text = "" if request_id is None else str(request_id)
    return f"{text[:12]}..."


def speed_text(processing_time_ms) -> str:
    return f"{processing_time_ms}ms"


# ---------------------------------------------------
# Form state
# ---------------------------------------------------
class ValidatorForm:
    """
    Holds what the page shows: the typed address, the in-flight flag and
    either the last result or the last error (never both).
    """

    def __init__(self, email: str = ""):
        self.email = email
        self.loading = False
        self.result: Optional[CombinedValidationResult] = None
        self.error: Optional[str] = None

    async def submit(self, client: httpx.AsyncClient) -> None:
        self.loading = True
        self.error = None
        self.result = None

        try:
            response = await client.post(VALIDATE_PATH, json={"email": self.email})
            if not response.is_success:
                self.error = _error_message(response)
                return
            self.result = CombinedValidationResult.model_validate(response.json())
        except Exception as e:
            logger.warning("Validation request failed: %r", e)
            self.error = str(e) or "An error occurred"
        finally:
            self.loading = False


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return DEFAULT_ERROR
    if isinstance(body, dict) and isinstance(body.get("error"), str) and body["error"]:
        return body["error"]
    return DEFAULT_ERROR

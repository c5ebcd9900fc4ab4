# backend/app/config.py
from pydantic_settings import BaseSettings
from typing import Dict, List
import os


class Settings(BaseSettings):
    APP_NAME: str = "mailcheck"
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")

    # ---------------------------------------------------------
    # Email validation API (syntax / deliverability)
    # ---------------------------------------------------------
    EMAIL_VALIDATION_BASE_URL: str = os.environ.get("EMAIL_VALIDATION_BASE_URL", "http://localhost:8080")
    EMAIL_VALIDATION_PATH: str = "/validatemyemail"

    # ---------------------------------------------------------
    # Domain authenticity API (Spamhaus intel)
    # ---------------------------------------------------------
    DOMAIN_AUTHENTICITY_BASE_URL: str = os.environ.get("DOMAIN_AUTHENTICITY_BASE_URL", "https://www.spamhaus.org")
    DOMAIN_AUTHENTICITY_PATH: str = "/api/v1/sia-proxy/api/intel/v2/byobject/domain"

    # ---------------------------------------------------------
    # Domain reputation API (DNSBL)
    # ---------------------------------------------------------
    DOMAIN_REPUTATION_BASE_URL: str = os.environ.get("DOMAIN_REPUTATION_BASE_URL", "https://networkingtoolbox.net")
    DOMAIN_REPUTATION_PATH: str = "/api/internal/diagnostics/dnsbl"

    # timeouts (seconds)
    EMAIL_VALIDATION_TIMEOUT: float = float(os.environ.get("EMAIL_VALIDATION_TIMEOUT", 10))
    DOMAIN_AUTHENTICITY_TIMEOUT: float = float(os.environ.get("DOMAIN_AUTHENTICITY_TIMEOUT", 20))
    DOMAIN_REPUTATION_TIMEOUT: float = float(os.environ.get("DOMAIN_REPUTATION_TIMEOUT", 30))

    USER_AGENT: str = "EmailValidator/1.0"

    CORS_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        frozen = True

    @property
    def validate_email_url(self) -> str:
        return f"{self.EMAIL_VALIDATION_BASE_URL.rstrip('/')}{self.EMAIL_VALIDATION_PATH}"

    def domain_authenticity_url(self, domain: str) -> str:
        base = self.DOMAIN_AUTHENTICITY_BASE_URL.rstrip("/")
        return f"{base}{self.DOMAIN_AUTHENTICITY_PATH}/{domain}/overview"

    @property
    def domain_reputation_url(self) -> str:
        return f"{self.DOMAIN_REPUTATION_BASE_URL.rstrip('/')}{self.DOMAIN_REPUTATION_PATH}"

    @property
    def json_headers(self) -> Dict[str, str]:
        return {"Content-Type": "application/json"}


settings = Settings()


def get_settings() -> Settings:
    """FastAPI dependency; tests override it with their own Settings."""
    return settings

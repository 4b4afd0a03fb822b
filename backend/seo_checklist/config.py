"""
Application configuration using environment variables.
"""
import os
from dataclasses import dataclass, field
from typing import List
from dotenv import load_dotenv

# Load .env file
load_dotenv()


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass
class Settings:
    """Application settings."""
    APP_NAME: str = os.getenv("APP_NAME", "SEO Audit Checklist")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Page analyzer HTTP settings
    HTTP_TIMEOUT: float = float(os.getenv("HTTP_TIMEOUT", "10"))
    AUX_TIMEOUT: float = float(os.getenv("AUX_TIMEOUT", "5"))
    USER_AGENT: str = os.getenv("USER_AGENT", "SEO-Audit-Tool/1.0")
    ROBOTS_CONTENT_LIMIT: int = int(os.getenv("ROBOTS_CONTENT_LIMIT", "2000"))
    SSRF_PROTECTION_ENABLED: bool = os.getenv("SSRF_PROTECTION_ENABLED", "true").lower() == "true"

    # CORS
    CORS_ORIGINS: List[str] = field(
        default_factory=lambda: _split_origins(
            os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000")
        )
    )

settings = Settings()

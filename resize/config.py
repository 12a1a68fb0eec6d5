"""Centralised settings for the resize backend.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Source page
    # ------------------------------------------------------------------
    instance_types_url: str = field(
        default_factory=lambda: os.environ.get(
            "INSTANCE_TYPES_URL", "https://aws.amazon.com/ec2/instance-types/"
        )
    )

    # ------------------------------------------------------------------
    # HTTP transport
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )
    http_retries: int = field(
        default_factory=lambda: int(os.environ.get("HTTP_RETRIES", "2"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "USER_AGENT",
            "Mozilla/5.0 (compatible; resize-bot/1.0; +https://github.com/resize-bot)",
        )
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "WARNING").upper()
    )


# Module-level singleton — import this everywhere:
#   from resize.config import settings
settings = Settings()

"""Centralised settings for the blogseo backend.

Fetch limits, CORS origin, log level and the AI payload size are read from
the environment once, at import.  A `.env` file next to the package is
honoured but never overrides variables already set.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# <project root>/.env
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)

_BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/121.0.0.0 Safari/537.36"
)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Fetcher
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "15.0"))
    )
    max_redirects: int = field(
        default_factory=lambda: int(os.environ.get("MAX_REDIRECTS", "5"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get("USER_AGENT", _BROWSER_USER_AGENT)
    )

    # ------------------------------------------------------------------
    # HTTP API
    # ------------------------------------------------------------------
    frontend_url: str = field(
        default_factory=lambda: os.environ.get("FRONTEND_URL", "http://localhost:3000")
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO").upper()
    )

    # ------------------------------------------------------------------
    # AI collaborator payload
    # ------------------------------------------------------------------
    ai_context_max_chars: int = field(
        default_factory=lambda: int(os.environ.get("AI_CONTEXT_MAX_CHARS", "8000"))
    )


# Module-level singleton, import this everywhere:
#   from blogseo.config import settings
settings = Settings()

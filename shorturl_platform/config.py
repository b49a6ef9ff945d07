"""
Runtime configuration for the short URL service
===============================================

Simple settings module that reads from environment variables (only here),
and exposes a stable `settings` object for the rest of the codebase.
Avoid reading env vars anywhere else; import from this module instead.

A `.env` file in the working directory is loaded first, so local overrides
can live next to the app without exporting them in the shell.

Malformed values fall back to their defaults.

Server
------
- HOST                    : bind address for `python main.py` (default "0.0.0.0")
- PORT                    : bind port (default 3000)

Logging
-------
- SHORTURL_LOG_LEVEL      : logging level name (default "INFO")

CORS
----
- SHORTURL_CORS_ORIGINS   : comma-separated allowed origins (default "*")
"""

import logging
import os
from typing import List

from dotenv import load_dotenv

load_dotenv()


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name, str(default))
    try:
        return int(raw)
    except (TypeError, ValueError):
        return default


def _get_level(name: str, default: str) -> str:
    raw = os.getenv(name, default).strip().upper()
    # getLevelName maps known names to their int value, anything else to "Level <name>"
    if isinstance(logging.getLevelName(raw), int):
        return raw
    return default


def _get_list(name: str, default: str) -> List[str]:
    raw = os.getenv(name, default)
    items = [item.strip() for item in raw.split(",") if item.strip()]
    return items or [default]


class _Settings:
    # -------- Server --------
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = _get_int("PORT", 3000)

    # -------- Logging --------
    LOG_LEVEL: str = _get_level("SHORTURL_LOG_LEVEL", "INFO")

    # -------- CORS --------
    CORS_ALLOW_ORIGINS: List[str] = _get_list("SHORTURL_CORS_ORIGINS", "*")


settings = _Settings()

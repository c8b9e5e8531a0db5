from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from . import __version__


logger = logging.getLogger(__name__)

APP_NAME = "og-preview"

DEFAULT_PORT = 8080
DEFAULT_ORIGIN = "*"


@dataclass(frozen=True)
class Settings:
    """Process configuration, built once at startup."""

    port: int = DEFAULT_PORT
    host: str = "0.0.0.0"
    origin_allowed: str = DEFAULT_ORIGIN
    fetch_timeout: float = 10.0
    user_agent: str = f"{APP_NAME}/{__version__}"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        defaults = cls()

        port = env.get("PORT")
        if not port:
            logger.info(f"No PORT environment variable detected, defaulting to {DEFAULT_PORT}")
            port = DEFAULT_PORT

        origin = env.get("ORIGIN_ALLOWED")
        if not origin:
            logger.info(f"No ORIGIN_ALLOWED environment variable detected, defaulting to {DEFAULT_ORIGIN}")
            origin = DEFAULT_ORIGIN

        return cls(
            port=int(port),
            host=env.get("HOST") or defaults.host,
            origin_allowed=origin,
            fetch_timeout=float(env.get("FETCH_TIMEOUT") or defaults.fetch_timeout),
            user_agent=env.get("FETCH_USER_AGENT") or defaults.user_agent,
            log_level=(env.get("LOG_LEVEL") or defaults.log_level).upper(),
        )

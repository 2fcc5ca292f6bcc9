"""Runtime settings for BlogFeeds.

Values come from the environment (optionally seeded from a ``.env`` file in the
working directory).  Every setting has a default so the servers start without
any configuration.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    host: str = "127.0.0.1"
    port: int = 8090
    fetch_timeout: float = 10.0
    user_agent: str = "BlogFeeds/1.0"
    log_level: str = "INFO"


def get_settings() -> Settings:
    """Build a ``Settings`` snapshot from the current environment."""
    return Settings(
        host=os.getenv("BLOGFEEDS_HOST", Settings.host),
        port=int(os.getenv("BLOGFEEDS_PORT", str(Settings.port))),
        fetch_timeout=float(os.getenv("BLOGFEEDS_FETCH_TIMEOUT", str(Settings.fetch_timeout))),
        user_agent=os.getenv("BLOGFEEDS_USER_AGENT", Settings.user_agent),
        log_level=os.getenv("BLOGFEEDS_LOG_LEVEL", Settings.log_level).upper(),
    )

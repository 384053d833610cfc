# =============================================================================
# core/config.py  -  Environment-driven settings
# =============================================================================
#
# All knobs come from environment variables.  main.py calls load_dotenv()
# before load_settings(), so a .env file in the working directory can set
# them too:
#
#   CLOJARS_REPO_URL          Registry base host (default: repo.clojars.org)
#   CLOJARS_TIMEOUT_SECONDS   Per-request timeout; unset = httpx default
#   CLOJARS_LOG_LEVEL         Logging level name (default: INFO)
# =============================================================================

import logging
import os
from dataclasses import dataclass

DEFAULT_REPO_URL = "https://repo.clojars.org"


@dataclass(frozen=True)
class Settings:
    """Process-wide settings, read once at startup."""

    repo_url: str = DEFAULT_REPO_URL
    timeout_seconds: float | None = None
    log_level: str = "INFO"


def load_settings(environ: dict[str, str] | None = None) -> Settings:
    """Build Settings from the environment.

    Args:
        environ: Mapping to read from; defaults to os.environ.

    Raises:
        ValueError: if the timeout is not a positive number or the log
            level is not a known logging level name.
    """
    env = os.environ if environ is None else environ

    repo_url = env.get("CLOJARS_REPO_URL", "").strip() or DEFAULT_REPO_URL

    timeout_seconds = None
    raw_timeout = env.get("CLOJARS_TIMEOUT_SECONDS", "").strip()
    if raw_timeout:
        timeout_seconds = float(raw_timeout)
        if timeout_seconds <= 0:
            raise ValueError(f"CLOJARS_TIMEOUT_SECONDS must be positive, got {raw_timeout!r}")

    log_level = env.get("CLOJARS_LOG_LEVEL", "INFO").strip().upper() or "INFO"
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"Unknown CLOJARS_LOG_LEVEL {log_level!r}")

    return Settings(
        repo_url=repo_url.rstrip("/"),
        timeout_seconds=timeout_seconds,
        log_level=log_level,
    )

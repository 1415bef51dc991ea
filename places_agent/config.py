import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from places_agent.errors import ConfigError

_BASE_DIR = os.path.dirname(__file__)

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_LOCATION = "28.6139,77.2090"
DEFAULT_TIMEOUT = 30.0


def _first_env(*names: str) -> Optional[str]:
    for name in names:
        value = (os.getenv(name) or "").strip()
        if value:
            return value
    return None


@dataclass(frozen=True)
class Settings:
    """Startup configuration, passed explicitly into each client."""

    openai_api_key: Optional[str] = None
    google_places_api_key: Optional[str] = None
    model: str = DEFAULT_MODEL
    request_timeout: float = DEFAULT_TIMEOUT
    default_location: str = DEFAULT_LOCATION

    def require_openai_key(self) -> str:
        if not self.openai_api_key:
            raise ConfigError(
                "OPENAI_API_KEY not found. Add it to places_agent/.env or env vars."
            )
        return self.openai_api_key


def load_settings(dotenv: bool = True) -> Settings:
    """Build Settings from .env files and the process environment.

    ``apiKey`` and ``googleApiKey`` are accepted as legacy aliases of the
    two API keys.
    """
    if dotenv:
        # Load .env from package directory first, then any default .env in CWD
        load_dotenv(os.path.join(_BASE_DIR, ".env"))
        load_dotenv()

    timeout_raw = _first_env("PLACES_AGENT_TIMEOUT")
    try:
        timeout = float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT
    except ValueError:
        raise ConfigError(f"PLACES_AGENT_TIMEOUT must be a number, got {timeout_raw!r}") from None
    if timeout <= 0:
        raise ConfigError("PLACES_AGENT_TIMEOUT must be positive")

    return Settings(
        openai_api_key=_first_env("OPENAI_API_KEY", "apiKey"),
        google_places_api_key=_first_env("GOOGLE_PLACES_API_KEY", "googleApiKey"),
        model=_first_env("PLACES_AGENT_MODEL") or DEFAULT_MODEL,
        request_timeout=timeout,
        default_location=_first_env("PLACES_AGENT_LOCATION") or DEFAULT_LOCATION,
    )

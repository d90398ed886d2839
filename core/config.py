# =============================================================================
# core/config.py  -  Runtime configuration
# =============================================================================
#
# All knobs come from environment variables (entry points call
# dotenv.load_dotenv() first, so a .env file works too).  Nothing here talks
# to the network; a missing API key is not an error, the matching provider
# simply reports itself unavailable.
#
# LIVE / OFFLINE TOGGLE:
#   USE_LIVE_PROVIDERS=false turns every provider adapter into an instant
#   "unavailable" answer.  The tools keep working from the local knowledge
#   store, which is handy offline and in demos.
# =============================================================================

import os
from dataclasses import dataclass, field
from typing import Optional

DEFAULT_CLIENT_ENDPOINTS = (
    "http://172.20.10.4:4111",
    "http://192.168.1.163:4111",
    "http://10.0.2.2:4111",      # Android emulator loopback
    "http://localhost:4111",
    "http://127.0.0.1:4111",
)


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_float(name: str, default: float) -> float:
    value = os.environ.get(name)
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    """Provider endpoints, credentials, timeouts and serving options."""

    dictionary_url: str = "https://sozluk.gov.tr/gts"
    etymology_cli: str = "nis"
    etymology_api_url: str = "https://www.nisanyansozluk.com/api/words"
    translation_url: str = "https://api-free.deepl.com/v2/translate"
    translation_api_key: Optional[str] = None
    english_dictionary_url: str = "https://od-api-sandbox.oxforddictionaries.com/api/v2"
    oxford_app_id: Optional[str] = None
    oxford_app_key: Optional[str] = None

    dictionary_timeout: float = 10.0
    provider_timeout: float = 8.0
    use_live_providers: bool = True

    agent_model: str = "gemini/gemini-2.0-flash"
    http_host: str = "0.0.0.0"
    http_port: int = 4111
    client_endpoints: tuple[str, ...] = field(default=DEFAULT_CLIENT_ENDPOINTS)

    @classmethod
    def from_env(cls) -> "Settings":
        endpoints = os.environ.get("CLIENT_ENDPOINTS")
        return cls(
            dictionary_url=os.environ.get("TDK_API_URL", cls.dictionary_url),
            etymology_cli=os.environ.get("NISANYAN_CLI", cls.etymology_cli),
            etymology_api_url=os.environ.get("NISANYAN_API_URL", cls.etymology_api_url),
            translation_url=os.environ.get("DEEPL_API_URL", cls.translation_url),
            translation_api_key=os.environ.get("DEEPL_API_KEY") or None,
            english_dictionary_url=os.environ.get("OXFORD_BASE_URL", cls.english_dictionary_url),
            oxford_app_id=os.environ.get("OXFORD_APP_ID") or None,
            oxford_app_key=os.environ.get("OXFORD_APP_KEY") or None,
            dictionary_timeout=_env_float("DICTIONARY_TIMEOUT", cls.dictionary_timeout),
            provider_timeout=_env_float("PROVIDER_TIMEOUT", cls.provider_timeout),
            use_live_providers=_env_bool("USE_LIVE_PROVIDERS", True),
            agent_model=os.environ.get("AGENT_MODEL", cls.agent_model),
            http_host=os.environ.get("HOST", cls.http_host),
            http_port=int(os.environ.get("PORT", cls.http_port)),
            client_endpoints=(
                tuple(e.strip().rstrip("/") for e in endpoints.split(",") if e.strip())
                if endpoints
                else DEFAULT_CLIENT_ENDPOINTS
            ),
        )

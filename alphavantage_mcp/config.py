from pydantic import BaseModel
import os
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def load_env_file(path: Path) -> None:
    """Copy KEY=VALUE lines from a .env file into os.environ; set variables win."""
    if not path.exists():
        return
    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, _, value = line.partition("=")
        os.environ.setdefault(key.strip(), value.strip().strip('"'))


# Must run before Settings reads os.getenv
load_env_file(Path(__file__).resolve().parent.parent / ".env")


def _sanitize_ascii(val: str) -> str:
    """Drop non-ASCII characters and surrounding whitespace."""
    return val.encode('ascii', errors='ignore').decode('ascii').strip()


class Settings(BaseModel):
    # Alpha Vantage
    alphavantage_api_key: str = _sanitize_ascii(os.getenv("ALPHAVANTAGE_API_KEY", ""))
    alphavantage_base_url: str = _sanitize_ascii(
        os.getenv("ALPHAVANTAGE_BASE_URL", "https://www.alphavantage.co/query")
    )

    # httpx default is 5s
    http_timeout: float = float(os.getenv("ALPHAVANTAGE_TIMEOUT", "5"))

    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()


def masked_key(key: str) -> str:
    return '***' + key[-4:] if len(key) > 4 else 'EMPTY'


def require_api_key() -> str:
    """Return the configured API key or refuse to start without one."""
    if not settings.alphavantage_api_key:
        raise SystemExit(
            "FATAL: ALPHAVANTAGE_API_KEY is not set! "
            "Set it in the environment or in .env before starting the server."
        )
    return settings.alphavantage_api_key


# Log config for debugging
logger.info(
    f"Config: Alpha Vantage → {settings.alphavantage_base_url} "
    f"(key={masked_key(settings.alphavantage_api_key)}, timeout={settings.http_timeout}s)"
)

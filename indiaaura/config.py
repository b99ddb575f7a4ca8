import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()

PACKAGE_DATA_DIR = Path(__file__).resolve().parent / "data"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.getenv(name)
    if not raw:
        return default
    return [part.strip() for part in raw.split(",") if part.strip()]


class Settings(BaseModel):
    LOG_LEVEL: str = os.getenv("INDIAAURA_LOG_LEVEL", "INFO")
    CORS_ORIGINS: List[str] = _env_list("INDIAAURA_CORS_ORIGINS", ["*"])
    DATA_DIR: Path = Path(os.getenv("INDIAAURA_DATA_DIR") or PACKAGE_DATA_DIR)

    # Stand-in for a real backend; off unless explicitly requested
    SIMULATE_LATENCY: bool = _env_bool("INDIAAURA_SIMULATE_LATENCY", False)

    # Wikipedia enrichment
    ENRICHMENT_ENABLED: bool = _env_bool("INDIAAURA_ENRICHMENT_ENABLED", True)
    WIKIPEDIA_SUMMARY_URL: str = os.getenv(
        "WIKIPEDIA_SUMMARY_URL", "https://en.wikipedia.org/api/rest_v1/page/summary/"
    )
    WIKIPEDIA_SEARCH_URL: str = os.getenv(
        "WIKIPEDIA_SEARCH_URL", "https://en.wikipedia.org/w/api.php"
    )
    HTTP_TIMEOUT: float = float(os.getenv("INDIAAURA_HTTP_TIMEOUT", "10"))
    USER_AGENT: str = os.getenv("INDIAAURA_USER_AGENT", "IndiaAura/1.0 (educational project)")

    # Bookmarks cookie
    BOOKMARK_COOKIE_NAME: str = os.getenv("BOOKMARK_COOKIE_NAME", "bookmarks")
    BOOKMARK_MAX_AGE: int = int(os.getenv("BOOKMARK_MAX_AGE", str(60 * 60 * 24 * 30)))
    BOOKMARK_COOKIE_DOMAIN: Optional[str] = os.getenv("BOOKMARK_COOKIE_DOMAIN") or None


settings = Settings()

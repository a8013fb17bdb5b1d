import os
from dataclasses import dataclass, field, replace
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from pts.stats_fetchers.cache import DEFAULT_CACHE_DIR
from pts.stats_fetchers.fangraphs import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT

# Pick up PTS_* overrides from a .env in the working directory, if any.
load_dotenv(find_dotenv(usecwd=True))


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw.strip()).expanduser()


def _env_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip()


def _env_float(name: str, default: float) -> float:
    """Parse a positive float from the environment, falling back on bad values."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


@dataclass(frozen=True)
class Settings:
    cache_dir: Path = field(default_factory=lambda: _env_path("PTS_CACHE_DIR", DEFAULT_CACHE_DIR))
    http_timeout: float = field(default_factory=lambda: _env_float("PTS_HTTP_TIMEOUT", DEFAULT_TIMEOUT))
    user_agent: str = field(default_factory=lambda: _env_str("PTS_USER_AGENT", DEFAULT_USER_AGENT))

    def with_overrides(self, cache_dir: Optional[Path] = None) -> "Settings":
        if cache_dir is None:
            return self
        return replace(self, cache_dir=Path(cache_dir))


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached settings instance sourced from environment variables."""
    return Settings()

"""
Runtime settings, read from the environment (and a .env file if present).
"""

import os
from dataclasses import dataclass
from typing import Optional, Tuple

from dotenv import load_dotenv


__version__ = "0.1.0"


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    log_level: str = "INFO"
    author: str = "ChaelCodes"
    color: str = "#F09383"
    head: str = "bendr"
    tail: str = "round-bum"
    version: str = __version__
    shout: Optional[str] = None
    seed: Optional[int] = None
    cors_allowed_origins: Tuple[str, ...] = ("*",)


def _get_int(name: str, default: Optional[int]) -> Optional[int]:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}")


def _get_bool(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes", "on")


def load_settings() -> Settings:
    """
    Build Settings from environment variables.

    Raises:
        ValueError: If PORT or SNAKE_SEED is not an integer.
    """
    load_dotenv()

    defaults = Settings()

    allowed_origins_env = os.getenv("CORS_ALLOWED_ORIGINS")
    if allowed_origins_env:
        allowed_origins = tuple(o.strip() for o in allowed_origins_env.split(",") if o.strip())
    else:
        allowed_origins = defaults.cors_allowed_origins

    return Settings(
        host=os.getenv("HOST", defaults.host),
        port=_get_int("PORT", defaults.port),
        debug=_get_bool("FLASK_DEBUG"),
        log_level=os.getenv("LOG_LEVEL", defaults.log_level).upper(),
        author=os.getenv("SNAKE_AUTHOR", defaults.author),
        color=os.getenv("SNAKE_COLOR", defaults.color),
        head=os.getenv("SNAKE_HEAD", defaults.head),
        tail=os.getenv("SNAKE_TAIL", defaults.tail),
        version=os.getenv("SNAKE_VERSION", defaults.version),
        shout=os.getenv("SNAKE_SHOUT") or None,
        seed=_get_int("SNAKE_SEED", None),
        cors_allowed_origins=allowed_origins,
    )

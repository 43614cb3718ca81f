import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

CHUNK_SIZE = 8192  # 8KB chunks for download


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class Settings:
    chunk_size: int = CHUNK_SIZE
    timeout: Optional[float] = None
    user_agent: Optional[str] = None


def load_settings():
    """Build Settings from the environment, reading .env first if there is one."""
    load_dotenv(find_dotenv(usecwd=True))

    chunk_size = os.getenv("WEBGET_CHUNK_SIZE")
    timeout = os.getenv("WEBGET_TIMEOUT")

    try:
        chunk_size = int(chunk_size) if chunk_size else CHUNK_SIZE
    except ValueError:
        raise ConfigError(f"WEBGET_CHUNK_SIZE must be an integer, got '{chunk_size}'")
    if chunk_size <= 0:
        raise ConfigError(f"WEBGET_CHUNK_SIZE must be positive, got {chunk_size}")

    try:
        timeout = float(timeout) if timeout else None
    except ValueError:
        raise ConfigError(f"WEBGET_TIMEOUT must be a number of seconds, got '{timeout}'")

    return Settings(
        chunk_size=chunk_size,
        timeout=timeout,
        user_agent=os.getenv("WEBGET_USER_AGENT") or None,
    )

"""Credential and Environment Configuration"""

import os
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

API_KEY_ENV = "OPENAI_API_KEY"
ENV_FILENAME = ".env"


class ConfigError(Exception):
    """Raised when required configuration is missing."""
    pass


def load_env_file(path: Optional[Path] = None) -> bool:
    """Populate os.environ from a local .env file, if there is one.

    Variables already exported in the shell take precedence. A missing or
    unreadable file is not an error.
    """
    env_path = path or Path.cwd() / ENV_FILENAME
    if not env_path.is_file():
        return False
    try:
        return load_dotenv(dotenv_path=env_path, override=False)
    except (OSError, UnicodeDecodeError):
        return False


def get_api_key(environ: Optional[Mapping[str, str]] = None) -> str:
    """Return the API key or raise ConfigError."""
    env = os.environ if environ is None else environ
    api_key = (env.get(API_KEY_ENV) or "").strip()
    if not api_key:
        raise ConfigError(
            f"{API_KEY_ENV} is not set. Export it or add it to a {ENV_FILENAME} file:\n"
            f"  export {API_KEY_ENV}='your-key-here'"
        )
    return api_key


__all__ = [
    "API_KEY_ENV",
    "ENV_FILENAME",
    "ConfigError",
    "load_env_file",
    "get_api_key",
]

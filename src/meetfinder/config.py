"""Configuration management for Meeting Finder."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

MEETFINDER_HOME = Path(os.environ.get("MEETFINDER_HOME", Path.home() / "meetfinder"))
CONFIG_FILE = MEETFINDER_HOME / "config" / "meetfinder.conf"
DATA_DIR = MEETFINDER_HOME / "data"
QUERY_FILE = DATA_DIR / "last_query"


@dataclass
class Config:
    """Meeting Finder configuration."""

    data_url: str = ""
    site_url: str = ""
    meetings_per_page: int = 10
    timezone: str = ""
    request_timeout: float = 10
    environment: str = "production"


def _unquote(value: str) -> str:
    """Strip quotes, or an inline comment from an unquoted value."""
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def _positive_int(key: str, value: str, default: int) -> int:
    try:
        number = int(value)
    except ValueError:
        number = 0
    if number < 1:
        logger.warning(f"Invalid {key.upper()} '{value}', using {default}")
        return default
    return number


def load_config(path: Path | None = None) -> Config:
    """Load configuration from meetfinder.conf, then environment overrides."""
    config = Config()
    path = path or CONFIG_FILE

    if path.exists():
        for line in path.read_text().splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            if "=" not in line:
                continue

            key, _, value = line.partition("=")
            key = key.strip().lower()
            value = _unquote(value.strip())

            match key:
                case "data_url":
                    config.data_url = value
                case "site_url":
                    config.site_url = value
                case "meetings_per_page":
                    config.meetings_per_page = _positive_int(key, value, config.meetings_per_page)
                case "timezone":
                    config.timezone = value
                case "request_timeout":
                    try:
                        config.request_timeout = float(value)
                    except ValueError:
                        logger.warning(f"Invalid REQUEST_TIMEOUT '{value}', using {config.request_timeout}")
                case "environment":
                    config.environment = value
                case _:
                    logger.debug(f"Ignoring unknown config key '{key}'")

    if os.environ.get("MEETFINDER_DATA_URL"):
        config.data_url = os.environ["MEETFINDER_DATA_URL"]

    return config

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from kanaquiz.kana import Family

load_dotenv()

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _parse_bool(name: str, value: str) -> bool:
    value = value.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got '{value}'")


def _parse_port(value: str) -> int:
    try:
        port = int(value)
    except ValueError:
        raise ValueError(f"KANAQUIZ_PORT must be an integer, got '{value}'") from None
    if not 0 < port < 65536:
        raise ValueError(f"KANAQUIZ_PORT out of range: {port}")
    return port


def _parse_log_level(value: str) -> str:
    level = value.strip().upper()
    # getLevelName maps known names to their number and anything else to "Level ..."
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"KANAQUIZ_LOG_LEVEL must be a logging level name, got '{value}'")
    return level


@dataclass
class Settings:
    """Runtime settings for the terminal and web quiz."""
    host: str = "0.0.0.0"
    port: int = 8080
    family: Family = Family.BOTH
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from KANAQUIZ_* environment variables (and .env)."""
        return cls(
            host=os.getenv("KANAQUIZ_HOST", cls.host),
            port=_parse_port(os.getenv("KANAQUIZ_PORT", str(cls.port))),
            family=Family.parse(os.getenv("KANAQUIZ_FAMILY", cls.family.value)),
            debug=_parse_bool("KANAQUIZ_DEBUG", os.getenv("KANAQUIZ_DEBUG", "false")),
            log_level=_parse_log_level(os.getenv("KANAQUIZ_LOG_LEVEL", cls.log_level)),
        )

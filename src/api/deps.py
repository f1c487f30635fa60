import os
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path

from src.adapters.clock import SystemClock
from src.adapters.tz_database import TimezoneDatabase, get_timezone_database
from src.app_shell.config import AppConfig, load_config

DEFAULT_CONFIG_FILE = "settings.yaml"


# --- Settings ---
class Settings:
    """
    Resolved service settings.

    Precedence: defaults < config file < environment.
    DTCALC_CONFIG names the file explicitly (it must then exist);
    otherwise ./settings.yaml is used when present.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        env = os.environ if environ is None else environ
        self.base_dir = Path(os.getcwd())

        explicit = env.get("DTCALC_CONFIG")
        if explicit:
            self.config_path: Path | None = Path(explicit)
            self.config = load_config(self.config_path)
        elif (self.base_dir / DEFAULT_CONFIG_FILE).exists():
            self.config_path = self.base_dir / DEFAULT_CONFIG_FILE
            self.config = load_config(self.config_path)
        else:
            self.config_path = None
            self.config = AppConfig()

        self.host = env.get("HOST", self.config.server.host)
        self.port = int(env.get("PORT", self.config.server.port))
        self.log_level = env.get("LOG_LEVEL", self.config.logging.level).upper()
        self.docs_url = self.config.docs.url
        self.redoc_url = self.config.docs.redoc_url
        self.cors_origins = list(self.config.cors.origins)


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Adapters ---
_clock_instance: SystemClock | None = None


def get_clock() -> SystemClock:
    """Get clock singleton."""
    global _clock_instance
    if _clock_instance is None:
        _clock_instance = SystemClock()
    return _clock_instance


def get_tz_database() -> TimezoneDatabase:
    """Get the read-only timezone database snapshot."""
    return get_timezone_database()

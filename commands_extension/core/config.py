"""Extension configuration"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic.fields import FieldInfo
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

logger = logging.getLogger(__name__)

# === Defaults ===
DEFAULT_WEB_SERVER_PORT = 5000
DATA_DIR = Path("PluginData")
DEFAULT_DATABASE_PATH = DATA_DIR / "commandextensionsplugin.db"

# Host bot settings file, read from the working directory
APP_SETTINGS_FILE = Path("appsettings.json")

# appsettings.json "Settings" keys -> Settings field names
_APP_SETTINGS_KEYS = {
    "WebServerPort": "web_server_port",
}


class AppSettingsJsonSource(PydanticBaseSettingsSource):
    """Reads the ``Settings`` section of the host bot's appsettings.json.

    A missing or unreadable file contributes nothing, so the remaining
    sources (or field defaults) apply.
    """

    path: Path = APP_SETTINGS_FILE

    def _load(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to read {self.path}: {e}")
            return {}

        section = data.get("Settings") if isinstance(data, dict) else None
        if not isinstance(section, dict):
            return {}
        return {
            field_name: section[key]
            for key, field_name in _APP_SETTINGS_KEYS.items()
            if key in section
        }

    def get_field_value(self, field: FieldInfo, field_name: str) -> tuple[Any, str, bool]:
        values = self._load()
        return values.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        return self._load()


class Settings(BaseSettings):
    """Commands extension settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Web UI / management API
    web_server_host: str = Field(default="localhost", description="Web UI bind host")
    web_server_port: int = Field(
        default=DEFAULT_WEB_SERVER_PORT, description="Web UI / management API port"
    )

    # Storage
    database_path: Path = Field(
        default=DEFAULT_DATABASE_PATH, description="SQLite database file"
    )

    # Twitch credentials (only needed when running the standalone host bot)
    client_id: str = Field(default="", description="Twitch OAuth Client ID")
    client_secret: str = Field(default="", description="Twitch OAuth Client Secret")
    bot_id: str = Field(default="", description="Bot User ID")
    owner_id: str = Field(default="", description="Owner User ID")

    # Channel that receives scheduled task messages (empty = bot owner)
    broadcaster_id: str = Field(default="", description="Broadcaster user ID")

    # Environment
    log_level: str = Field(default="INFO", description="Logging level")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            AppSettingsJsonSource(settings_cls),
            file_secret_settings,
        )

    @field_validator("web_server_port", mode="before")
    @classmethod
    def validate_web_server_port(cls, v: Any) -> int:
        """Fall back to the default port instead of failing startup"""
        try:
            port = int(v)
        except (TypeError, ValueError):
            logger.warning(f"Invalid web server port '{v}', defaulting to {DEFAULT_WEB_SERVER_PORT}")
            return DEFAULT_WEB_SERVER_PORT
        if not 0 < port < 65536:
            logger.warning(
                f"Web server port {port} out of range, defaulting to {DEFAULT_WEB_SERVER_PORT}"
            )
            return DEFAULT_WEB_SERVER_PORT
        return port

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid logging level"""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            logger.warning(f"Invalid log level '{v}', defaulting to INFO")
            return "INFO"
        return v_upper

    @property
    def web_ui_url(self) -> str:
        return f"http://{self.web_server_host}:{self.web_server_port}/"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()

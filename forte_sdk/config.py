"""
Configuration management for the Forte SDK.

Settings are read from a JSON file (``~/.forte/config.json`` by default)
and may be overridden with environment variables:

    FORTE_API_URL       - API base URL (default: https://api.powerchord.io)
    FORTE_HOSTNAME      - Hostname sent with every request
    FORTE_TRUNK         - Trunk organization id
    FORTE_BRANCH        - Branch organization id
    FORTE_BEARER_TOKEN  - Pre-issued bearer token
    FORTE_PRIVATE_KEY   - Developer private key
    FORTE_PUBLIC_KEY    - Developer public key
    FORTE_TIMEOUT       - Request timeout in seconds
    FORTE_CONFIG_DIR    - Custom configuration directory
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

from .exceptions import ConfigurationError
from .scope import DEFAULT_API_URL

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path.home() / ".forte"
CONFIG_FILE_NAME = "config.json"

ENV_OVERRIDES = {
    "api_url": "FORTE_API_URL",
    "hostname": "FORTE_HOSTNAME",
    "trunk": "FORTE_TRUNK",
    "branch": "FORTE_BRANCH",
    "bearer_token": "FORTE_BEARER_TOKEN",
    "private_key": "FORTE_PRIVATE_KEY",
    "public_key": "FORTE_PUBLIC_KEY",
    "timeout": "FORTE_TIMEOUT",
}


@dataclass
class ForteConfig:
    """Persisted SDK settings."""

    api_url: str = DEFAULT_API_URL
    hostname: str = ""
    trunk: str = ""
    branch: str = ""
    bearer_token: str = ""
    private_key: str = ""
    public_key: str = ""
    timeout: int = 30
    max_retries: int = 3
    verify_ssl: bool = True
    fingerprinting_enabled: bool = True
    max_workers: int = 4

    def has_credentials(self) -> bool:
        return bool(self.bearer_token) or bool(self.private_key and self.public_key)

    def is_configured(self) -> bool:
        """Check whether enough is set to build a client."""
        return self.has_credentials() and bool(self.hostname and self.trunk)

    def credentials(self) -> Dict[str, str]:
        if self.bearer_token:
            return {"bearer_token": self.bearer_token}
        return {"private_key": self.private_key, "public_key": self.public_key}

    def scope(self) -> Dict[str, str]:
        scope = {"hostname": self.hostname, "trunk": self.trunk}
        if self.branch:
            scope["branch"] = self.branch
        return scope

    def options(self) -> Dict[str, Any]:
        return {"url": self.api_url, "fingerprinting_enabled": self.fingerprinting_enabled}

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ForteConfig":
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


class ConfigManager:
    """Loads, saves and updates the configuration file."""

    def __init__(self, config_dir: Optional[Path] = None):
        env_dir = os.environ.get("FORTE_CONFIG_DIR")
        self.config_dir = Path(config_dir or env_dir or DEFAULT_CONFIG_DIR)
        self._config: Optional[ForteConfig] = None

    def get_config_path(self) -> Path:
        return self.config_dir / CONFIG_FILE_NAME

    def load(self) -> ForteConfig:
        """Load configuration from disk and apply environment overrides."""
        config_path = self.get_config_path()
        data: Dict[str, Any] = {}

        if config_path.exists():
            try:
                with open(config_path, "r", encoding="utf-8") as f:
                    data = json.load(f)
            except (OSError, ValueError) as e:
                raise ConfigurationError(
                    f"Cannot read configuration file {config_path}",
                    details=str(e),
                ) from e

        config = ForteConfig.from_dict(data)
        self._apply_env(config)
        return config

    def _apply_env(self, config: ForteConfig) -> None:
        for attr, env_var in ENV_OVERRIDES.items():
            value = os.environ.get(env_var)
            if value is None:
                continue
            if attr == "timeout":
                try:
                    config.timeout = int(value)
                except ValueError:
                    logger.warning(f"Ignoring non-integer {env_var}={value!r}")
                continue
            setattr(config, attr, value)

    def get(self) -> ForteConfig:
        if self._config is None:
            self._config = self.load()
        return self._config

    def save(self, config: ForteConfig) -> None:
        """Write configuration to disk, readable only by the owner."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        config_path = self.get_config_path()

        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(config.to_dict(), f, indent=2)

        try:
            os.chmod(config_path, 0o600)
        except OSError as e:
            logger.warning(f"Could not restrict permissions on {config_path}: {e}")

        self._config = config
        logger.debug(f"Configuration saved to {config_path}")

    def update(self, **kwargs: Any) -> ForteConfig:
        config = self.get()
        for key, value in kwargs.items():
            if not hasattr(config, key):
                raise ConfigurationError(f"Unknown configuration key: {key}")
            setattr(config, key, value)
        self.save(config)
        return config

    def clear(self) -> None:
        config_path = self.get_config_path()
        if config_path.exists():
            config_path.unlink()
        self._config = None


_config_manager: Optional[ConfigManager] = None


def get_config_manager(config_dir: Optional[Path] = None) -> ConfigManager:
    """Get the shared ConfigManager, replacing it when ``config_dir`` is given."""
    global _config_manager
    if _config_manager is None or config_dir is not None:
        _config_manager = ConfigManager(config_dir)
    return _config_manager


def get_config() -> ForteConfig:
    return get_config_manager().get()

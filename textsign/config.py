"""
Configuration management for textsign

Can be set via:
1. Direct initialization
2. Environment variables (TEXTSIGN_LOG_LEVEL, TEXTSIGN_KEY_DIR, ...)

The sign format is never configurable; every call names it.
"""

import logging
import os
import threading
from dataclasses import dataclass, field
from typing import Optional

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_bool(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in ("1", "true", "yes")


def _env_mode(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        return int(raw, 8)
    except ValueError:
        raise ValueError(f"{name} must be an octal file mode, got {raw!r}") from None


@dataclass
class TextSignConfig:
    """Runtime configuration"""
    log_level: str = field(default_factory=lambda: os.environ.get("TEXTSIGN_LOG_LEVEL", "WARNING"))
    key_dir: str = field(default_factory=lambda: os.environ.get("TEXTSIGN_KEY_DIR", "."))
    secret_key_mode: int = field(default_factory=lambda: _env_mode("TEXTSIGN_SECRET_KEY_MODE", 0o600))
    debug: bool = field(default_factory=lambda: _env_bool("TEXTSIGN_DEBUG"))

    def __post_init__(self):
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {self.log_level}")
        if not 0 <= self.secret_key_mode <= 0o777:
            raise ValueError(f"Invalid secret key mode: {oct(self.secret_key_mode)}")
        if not self.key_dir:
            raise ValueError("key_dir cannot be empty")

    @property
    def effective_log_level(self) -> int:
        """Numeric level; debug forces DEBUG"""
        if self.debug:
            return logging.DEBUG
        return getattr(logging, self.log_level)


_config: Optional[TextSignConfig] = None
_config_lock = threading.Lock()


def get_config() -> TextSignConfig:
    """
    Get the current configuration

    Returns:
        TextSignConfig instance (created from env vars if not set)
    """
    global _config
    with _config_lock:
        if _config is None:
            _config = TextSignConfig()
        return _config


def set_config(config: TextSignConfig) -> None:
    """Replace the current configuration"""
    global _config
    with _config_lock:
        _config = config


def reset_config() -> None:
    """Drop the current configuration so the next get_config() rereads the environment"""
    global _config
    with _config_lock:
        _config = None

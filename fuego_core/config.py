# =============================================================================
# fuego_core/config.py
# Settings for the reservation data layer
# =============================================================================
"""
Settings are read from Streamlit secrets first, then from environment
variables, then from defaults.

Expected secrets.toml format:
    [supabase]
    url = "https://your-project.supabase.co"
    key = "your-anon-key"

    [reservations]
    table = "reservations"
    local_db = "local_data/fuego.db"
    local_id_prefix = "local-"
    retry_mode = "exponential"      # or "none"
    max_attempts = 3

    [manager]
    password_hash = "$2b$12$..."

    [openai]
    api_key = "sk-..."
"""

from __future__ import annotations
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

import streamlit as st

from fuego_core.errors import ConfigurationError
from fuego_core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_TABLE_NAME = "reservations"
DEFAULT_STORAGE_KEY = "fuego_reservations"
DEFAULT_LOCAL_ID_PREFIX = "local-"
DEFAULT_LOCAL_DB_PATH = Path("local_data") / "fuego.db"

RETRY_MODES = ("none", "exponential")


@dataclass
class RetryPolicy:
    """
    Retry policy for remote calls.

    ``none`` makes a single attempt. ``exponential`` makes up to
    ``max_attempts`` attempts, sleeping initial_delay * backoff_base ** n
    between them.
    """
    mode: str = "none"
    max_attempts: int = 3
    backoff_base: float = 2.0
    initial_delay: float = 0.5

    def __post_init__(self):
        if self.mode not in RETRY_MODES:
            raise ConfigurationError(
                f"Unknown retry mode: {self.mode}",
                config_key="retry_mode",
                expected_type=" | ".join(RETRY_MODES),
            )
        if self.max_attempts < 1:
            raise ConfigurationError(
                "max_attempts must be at least 1",
                config_key="max_attempts",
                expected_type="int >= 1",
            )

    @property
    def attempts(self) -> int:
        return 1 if self.mode == "none" else self.max_attempts

    def delays(self) -> Iterator[float]:
        """Yield the sleep before each retry (attempts - 1 values)."""
        for retry in range(self.attempts - 1):
            yield self.initial_delay * (self.backoff_base ** retry)


@dataclass
class ReservationSettings:
    """Resolved configuration for the reservation stores."""
    supabase_url: str = ""
    supabase_key: str = ""
    table_name: str = DEFAULT_TABLE_NAME
    local_db_path: Path = DEFAULT_LOCAL_DB_PATH
    storage_key: str = DEFAULT_STORAGE_KEY
    local_id_prefix: str = DEFAULT_LOCAL_ID_PREFIX
    request_timeout: int = 10
    retry: RetryPolicy = field(default_factory=RetryPolicy)
    manager_password_hash: str = ""
    openai_api_key: str = ""

    @property
    def has_remote_credentials(self) -> bool:
        return bool(self.supabase_url and self.supabase_key)


def _load_secrets() -> Dict[str, Any]:
    """Read Streamlit secrets as plain dicts; a missing secrets file is not an error."""
    try:
        return {section: dict(values) for section, values in st.secrets.items()
                if hasattr(values, "items")}
    except Exception as e:
        logger.debug(f"Streamlit secrets not available: {e}")
        return {}


def _pick(secrets: Dict[str, Any], section: str, key: str, env: str, default: Any = "") -> Any:
    value = secrets.get(section, {}).get(key)
    if value is None or value == "":
        value = os.getenv(env, default)
    return value


def load_settings(secrets: Optional[Dict[str, Any]] = None) -> ReservationSettings:
    """
    Build settings from secrets/env.

    Args:
        secrets: Secrets mapping (defaults to st.secrets)

    Returns:
        ReservationSettings
    """
    if secrets is None:
        secrets = _load_secrets()

    try:
        retry = RetryPolicy(
            mode=str(_pick(secrets, "reservations", "retry_mode", "FUEGO_RETRY_MODE", "none")),
            max_attempts=int(_pick(secrets, "reservations", "max_attempts", "FUEGO_RETRY_ATTEMPTS", 3)),
            backoff_base=float(_pick(secrets, "reservations", "backoff_base", "FUEGO_RETRY_BACKOFF", 2.0)),
            initial_delay=float(_pick(secrets, "reservations", "initial_delay", "FUEGO_RETRY_DELAY", 0.5)),
        )
        timeout = int(_pick(secrets, "reservations", "timeout", "FUEGO_REQUEST_TIMEOUT", 10))
    except ValueError as e:
        raise ConfigurationError(f"Invalid reservation settings: {e}") from e

    return ReservationSettings(
        supabase_url=str(_pick(secrets, "supabase", "url", "SUPABASE_URL")),
        supabase_key=str(_pick(secrets, "supabase", "key", "SUPABASE_KEY")),
        table_name=str(_pick(secrets, "reservations", "table", "FUEGO_TABLE", DEFAULT_TABLE_NAME)),
        local_db_path=Path(_pick(secrets, "reservations", "local_db", "FUEGO_LOCAL_DB", DEFAULT_LOCAL_DB_PATH)),
        storage_key=str(_pick(secrets, "reservations", "storage_key", "FUEGO_STORAGE_KEY", DEFAULT_STORAGE_KEY)),
        local_id_prefix=str(_pick(secrets, "reservations", "local_id_prefix", "FUEGO_LOCAL_ID_PREFIX",
                                  DEFAULT_LOCAL_ID_PREFIX)),
        request_timeout=timeout,
        retry=retry,
        manager_password_hash=str(_pick(secrets, "manager", "password_hash", "FUEGO_MANAGER_PASSWORD_HASH")),
        openai_api_key=str(_pick(secrets, "openai", "api_key", "OPENAI_API_KEY")),
    )


_settings: Optional[ReservationSettings] = None


def get_settings() -> ReservationSettings:
    """Get the process-wide settings (loaded once)."""
    global _settings
    if _settings is None:
        _settings = load_settings()
        logger.info(
            f"Settings loaded. Remote configured: {_settings.has_remote_credentials}, "
            f"retry: {_settings.retry.mode}"
        )
    return _settings


def reset_settings_cache() -> None:
    """Forget cached settings (tests, secrets reload)."""
    global _settings
    _settings = None

# =============================================================================
# fuego_core/errors/__init__.py
# Centralized Error Handling for Fuego Prime
# =============================================================================

from .exceptions import (
    FuegoError,
    RemoteUnavailableError,
    RemoteRowError,
    LocalCorruptError,
    LocalStorageError,
    ValidationFailedError,
    UpdateNotFoundError,
    ConfigurationError,
)

from .handlers import (
    handle_error,
    safe_execute,
)

__all__ = [
    # Exceptions
    "FuegoError",
    "RemoteUnavailableError",
    "RemoteRowError",
    "LocalCorruptError",
    "LocalStorageError",
    "ValidationFailedError",
    "UpdateNotFoundError",
    "ConfigurationError",
    # Handlers
    "handle_error",
    "safe_execute",
]

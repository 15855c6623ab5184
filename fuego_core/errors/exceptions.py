# =============================================================================
# fuego_core/errors/exceptions.py
# Custom Exception Hierarchy for Fuego Prime
# =============================================================================

from typing import Optional, Dict, Any, List


class FuegoError(Exception):
    """
    Base exception for all Fuego Prime errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (e.g., "REMOTE_001")
        details: Additional context as a dictionary
        recoverable: Whether the error can be recovered from
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        recoverable: bool = True,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or "FUEGO_000"
        self.details = details or {}
        self.recoverable = recoverable

    def __str__(self) -> str:
        base = f"[{self.code}] {self.message}"
        if self.details:
            base += f" | Details: {self.details}"
        return base

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization"""
        return {
            "error_type": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
            "details": self.details,
            "recoverable": self.recoverable,
        }


# =============================================================================
# STORAGE EXCEPTIONS
# =============================================================================

# PostgREST answers for a table that was never created
MISSING_TABLE_CODES = ("42P01", "PGRST205")
MISSING_TABLE_MARKERS = ("does not exist", "could not find the table")


class RemoteUnavailableError(FuegoError):
    """Raised when the remote reservation table cannot be reached or used"""

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        backend_code: Optional[str] = None,
        backend_message: Optional[str] = None,
        **kwargs,
    ):
        details = kwargs.pop("details", {})
        if operation:
            details["operation"] = operation
        if backend_code:
            details["backend_code"] = backend_code
        if backend_message:
            details["backend_message"] = backend_message

        super().__init__(
            message=message,
            code="REMOTE_001",
            details=details,
            **kwargs,
        )

    @property
    def schema_missing(self) -> bool:
        """True when the backend says the reservations table does not exist."""
        if self.details.get("backend_code") in MISSING_TABLE_CODES:
            return True
        text = str(self.details.get("backend_message", "")).lower()
        return any(marker in text for marker in MISSING_TABLE_MARKERS)


class RemoteRowError(FuegoError):
    """Raised when a row Supabase returned cannot be read as a reservation"""

    def __init__(self, message: str, operation: Optional[str] = None, **kwargs):
        details = kwargs.pop("details", {})
        if operation:
            details["operation"] = operation

        super().__init__(
            message=message,
            code="REMOTE_002",
            details=details,
            **kwargs,
        )


class LocalCorruptError(FuegoError):
    """Raised when the locally stored reservation blob cannot be decoded"""

    def __init__(self, message: str, key: Optional[str] = None, **kwargs):
        details = kwargs.pop("details", {})
        if key:
            details["key"] = key

        super().__init__(
            message=message,
            code="LOCAL_001",
            details=details,
            **kwargs,
        )


class LocalStorageError(FuegoError):
    """Raised when the local SQLite file cannot be opened, read or written"""

    def __init__(self, message: str, key: Optional[str] = None, **kwargs):
        details = kwargs.pop("details", {})
        if key:
            details["key"] = key

        super().__init__(
            message=message,
            code="LOCAL_002",
            details=details,
            **kwargs,
        )


# =============================================================================
# WORKFLOW EXCEPTIONS
# =============================================================================

class ValidationFailedError(FuegoError):
    """Raised when required reservation fields are missing"""

    def __init__(self, message: str, fields: Optional[List[str]] = None, **kwargs):
        details = kwargs.pop("details", {})
        self.fields = list(fields or [])
        if self.fields:
            details["fields"] = self.fields

        super().__init__(
            message=message,
            code="VALID_001",
            details=details,
            **kwargs,
        )


class UpdateNotFoundError(FuegoError):
    """Raised by callers that treat an unmatched status update as an error"""

    def __init__(self, message: str, reservation_id: Optional[str] = None, **kwargs):
        details = kwargs.pop("details", {})
        if reservation_id:
            details["reservation_id"] = reservation_id

        super().__init__(
            message=message,
            code="UPDATE_001",
            details=details,
            **kwargs,
        )


# =============================================================================
# CONFIGURATION EXCEPTIONS
# =============================================================================

class ConfigurationError(FuegoError):
    """Raised when configuration is invalid or missing"""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        expected_type: Optional[str] = None,
        **kwargs,
    ):
        details = kwargs.pop("details", {})
        if config_key:
            details["config_key"] = config_key
        if expected_type:
            details["expected_type"] = expected_type

        super().__init__(
            message=message,
            code="CONFIG_001",
            details=details,
            recoverable=False,
            **kwargs,
        )

# =============================================================================
# fuego_core/offline/connection_manager.py
# Remote store reachability probe
# =============================================================================
"""
ConnectionProber - answers "is the remote reservation table usable?".

The probe is a count-only request against the table, so it checks network,
credentials, the table itself and its access policy in one round trip
without reading or writing rows. The answer is advisory: the repository
still tries the remote store first on every call.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, List, Optional

from fuego_core.errors import RemoteUnavailableError
from fuego_core.logging import get_logger

logger = get_logger(__name__)


class ConnectionStatus(Enum):
    """Connection status states."""
    ONLINE = "online"                   # Table reachable and readable
    OFFLINE = "offline"                 # Network, auth or policy failure
    SCHEMA_MISSING = "schema_missing"   # Reachable, but the table does not exist
    UNKNOWN = "unknown"                 # Not probed yet


@dataclass
class ConnectionState:
    """Current connection state with metadata."""
    status: ConnectionStatus = ConnectionStatus.UNKNOWN
    last_check: Optional[datetime] = None
    last_online: Optional[datetime] = None
    consecutive_failures: int = 0
    error_message: Optional[str] = None


class ConnectionProber:
    """
    On-demand probe of the remote reservation table.

    Usage:
        prober = ConnectionProber(remote_client)
        if not prober.probe():
            st.warning("Sistema Offline")
    """

    def __init__(self, remote):
        """
        Args:
            remote: Object exposing count_reservations() (SupabaseReservationClient)
        """
        self.remote = remote
        self._state = ConnectionState()
        self._callbacks: List[Callable[[ConnectionState], None]] = []

    @property
    def state(self) -> ConnectionState:
        return self._state

    @property
    def status(self) -> ConnectionStatus:
        return self._state.status

    @property
    def is_online(self) -> bool:
        return self._state.status == ConnectionStatus.ONLINE

    @property
    def schema_missing(self) -> bool:
        return self._state.status == ConnectionStatus.SCHEMA_MISSING

    def probe(self) -> bool:
        """
        Check the remote table.

        Returns:
            True only if the count request succeeded
        """
        old_status = self._state.status
        self._state.last_check = datetime.now()

        try:
            self.remote.count_reservations()
        except RemoteUnavailableError as e:
            self._record_failure(e)
        except Exception as e:
            self._record_failure(RemoteUnavailableError(
                "Connection check failed",
                operation="count",
                backend_message=str(e),
            ))
        else:
            self._state.status = ConnectionStatus.ONLINE
            self._state.last_online = self._state.last_check
            self._state.consecutive_failures = 0
            self._state.error_message = None

        if old_status != self._state.status:
            logger.info(f"Connection status changed: {old_status.value} -> {self._state.status.value}")
            self._notify_callbacks()

        return self.is_online

    def _record_failure(self, error: RemoteUnavailableError) -> None:
        logger.warning(f"Supabase connection check failed: {error}")
        self._state.status = (
            ConnectionStatus.SCHEMA_MISSING if error.schema_missing else ConnectionStatus.OFFLINE
        )
        self._state.consecutive_failures += 1
        self._state.error_message = error.details.get("backend_message", error.message)

    def register_callback(self, callback: Callable[[ConnectionState], None]) -> None:
        """Register a callback for connection status changes."""
        if callback not in self._callbacks:
            self._callbacks.append(callback)

    def unregister_callback(self, callback: Callable[[ConnectionState], None]) -> None:
        """Remove a registered callback."""
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    def _notify_callbacks(self) -> None:
        for callback in self._callbacks:
            try:
                callback(self._state)
            except Exception as e:
                logger.error(f"Error in connection callback: {e}")

    def get_status_display(self) -> dict:
        """Get status information for UI display."""
        return {
            "status": self._state.status.value,
            "is_online": self.is_online,
            "schema_missing": self.schema_missing,
            "last_check": self._state.last_check.isoformat() if self._state.last_check else None,
            "last_online": self._state.last_online.isoformat() if self._state.last_online else None,
            "failures": self._state.consecutive_failures,
            "error": self._state.error_message,
        }

# =============================================================================
# fuego_core/state/reservation_state.py
# In-memory reservation list kept in session state
# =============================================================================
"""
ReservationViewModel - bridge between the repository and the pages.

The view model never writes to a store. It keeps the list the pages render,
refreshes it from the repository when a view is entered and patches it in
place after successful writes. Failures are turned into notifications and
leave the list unchanged; nothing is retried.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, List, MutableMapping, Optional

from fuego_core.data.reservation import Reservation, ReservationInput, ReservationStatus
from fuego_core.errors import FuegoError, UpdateNotFoundError, ValidationFailedError
from fuego_core.logging import get_logger
from fuego_core.offline.connection_manager import ConnectionState, ConnectionStatus
from fuego_core.offline.reservation_repository import BackendHealth
from fuego_core.services.dashboard_service import DashboardService

logger = get_logger(__name__)

SUBMIT_SUCCESS_MESSAGE = "Solicitação enviada com sucesso! Aguarde a confirmação."
SUBMIT_ERROR_MESSAGE = "Erro ao conectar com o servidor. Tente novamente."
UPDATE_ERROR_MESSAGE = "Erro ao atualizar status."
CONNECTION_LOST_MESSAGE = "Sem conexão com o servidor. As reservas ficam salvas neste dispositivo."
CONNECTION_RESTORED_MESSAGE = "Conexão com o servidor restabelecida."
STATUS_MESSAGES = {
    ReservationStatus.CONFIRMED: "Reserva confirmada com sucesso.",
    ReservationStatus.CANCELLED: "Reserva cancelada com sucesso.",
}


@dataclass
class Notification:
    """Transient message for the toast area."""
    message: str
    kind: str = "success"   # success | error | info


class ReservationViewModel:
    """
    Session-scoped reservation list.

    Usage:
        view_model = ReservationViewModel(repository, prober)
        view_model.activate()
        for reservation in view_model.reservations:
            ...
    """

    SESSION_PREFIX = "_reservations_"

    def __init__(self, repository, prober, store: Optional[MutableMapping[str, Any]] = None):
        """
        Args:
            repository: ReservationRepository
            prober: ConnectionProber
            store: Mapping holding the state (defaults to st.session_state)
        """
        if store is None:
            import streamlit as st
            store = st.session_state
        self.repository = repository
        self.prober = prober
        self._store = store
        self._dashboard = DashboardService()
        self._initialize()

    def _key(self, name: str) -> str:
        return f"{self.SESSION_PREFIX}{name}"

    def _initialize(self) -> None:
        defaults = {
            "list": [],
            "is_online": True,
            "schema_missing": False,
            "last_health": None,
            "notifications": [],
            "activated": False,
        }
        for name, value in defaults.items():
            self._store.setdefault(self._key(name), value)

    # -------------------------------------------------------------------------
    # STATE ACCESS
    # -------------------------------------------------------------------------

    @property
    def reservations(self) -> List[Reservation]:
        return self._store[self._key("list")]

    @property
    def is_online(self) -> bool:
        return self._store[self._key("is_online")]

    @property
    def schema_missing(self) -> bool:
        return self._store[self._key("schema_missing")]

    @property
    def last_health(self) -> Optional[BackendHealth]:
        return self._store[self._key("last_health")]

    @property
    def is_activated(self) -> bool:
        return self._store[self._key("activated")]

    def _notify(self, message: str, kind: str = "success") -> None:
        self._store[self._key("notifications")].append(Notification(message, kind))

    def pop_notifications(self) -> List[Notification]:
        """Return and clear pending notifications."""
        pending = self._store[self._key("notifications")]
        self._store[self._key("notifications")] = []
        return pending

    def connection_listener(self) -> Callable[[ConnectionState], None]:
        """
        Callback for ConnectionProber.register_callback.

        Queues a notification when the probe flips between online and
        offline. The first probe result of a session is not announced.
        """
        def on_change(state: ConnectionState) -> None:
            if state.status is ConnectionStatus.UNKNOWN:
                return
            previous = self._store.get(self._key("probed_status"))
            self._store[self._key("probed_status")] = state.status
            if previous is None:
                return
            if state.status is ConnectionStatus.ONLINE:
                self._notify(CONNECTION_RESTORED_MESSAGE, "info")
            elif previous is ConnectionStatus.ONLINE:
                self._notify(CONNECTION_LOST_MESSAGE, "error")

        return on_change

    # -------------------------------------------------------------------------
    # OPERATIONS
    # -------------------------------------------------------------------------

    def activate(self) -> None:
        """Probe connectivity, then reload the list."""
        is_online = self.prober.probe()
        self._store[self._key("is_online")] = is_online
        self._store[self._key("schema_missing")] = getattr(self.prober, "schema_missing", False)

        try:
            result = self.repository.list()
        except Exception as e:
            logger.error(f"Failed to load reservations: {e}")
            self._store[self._key("is_online")] = False
        else:
            self._store[self._key("list")] = list(result.value)
            self._store[self._key("last_health")] = result.health
        self._store[self._key("activated")] = True

    def submit(self, data: ReservationInput) -> Optional[Reservation]:
        """
        Create a reservation from the public form.

        Returns:
            The stored reservation, or None when nothing was stored
        """
        try:
            result = self.repository.create(data)
        except ValidationFailedError as e:
            self._notify(e.message, "error")
            return None
        except FuegoError as e:
            logger.error(f"Reservation submit failed: {e}")
            self._notify(SUBMIT_ERROR_MESSAGE, "error")
            return None

        self._store[self._key("list")] = [result.value] + self.reservations
        self._store[self._key("last_health")] = result.health
        self._notify(SUBMIT_SUCCESS_MESSAGE)
        return result.value

    def update_status(self, reservation_id: str, status: ReservationStatus) -> bool:
        """
        Confirm or cancel a reservation and patch the in-memory copy.

        Returns:
            True when the store that handled the update held the reservation
        """
        try:
            result = self.repository.update_status(reservation_id, status)
            if result.matched is False:
                raise UpdateNotFoundError(
                    f"No reservation with id {reservation_id} in the {result.health.value} store",
                    reservation_id=reservation_id,
                )
        except FuegoError as e:
            logger.error(f"Status update failed for {reservation_id}: {e}")
            self._notify(UPDATE_ERROR_MESSAGE, "error")
            return False

        self._store[self._key("list")] = [
            r.with_status(status) if r.id == reservation_id else r
            for r in self.reservations
        ]
        self._store[self._key("last_health")] = result.health
        self._notify(STATUS_MESSAGES.get(status, "Status atualizado."))
        return True

    # -------------------------------------------------------------------------
    # DASHBOARD HELPERS
    # -------------------------------------------------------------------------

    def stats(self, today: Optional[date] = None) -> dict:
        result = self._dashboard.compute_stats(self.reservations, today=today)
        return result.data if result.success else {"total": 0, "pending": 0, "confirmed": 0, "today": 0}

    def filtered(self, status_filter: str = "all") -> List[Reservation]:
        """Reservations with the given status, newest first."""
        records = sorted(self.reservations, key=lambda r: r.created_at, reverse=True)
        if status_filter == "all":
            return records
        return [r for r in records if r.status.value == status_filter]

    def table(self, status_filter: str = "all"):
        """DataFrame of the filtered reservations for st.dataframe."""
        return self._dashboard.to_frame(self.reservations, status_filter).data


def get_view_model() -> ReservationViewModel:
    """View model bound to the current Streamlit session."""
    import streamlit as st
    from fuego_core.offline.connection_manager import ConnectionProber
    from fuego_core.offline.reservation_repository import get_reservation_repository

    repository = get_reservation_repository()
    # Keep the probe state across reruns for the connection details panel
    prober_key = f"{ReservationViewModel.SESSION_PREFIX}prober"
    if prober_key in st.session_state:
        return ReservationViewModel(repository, st.session_state[prober_key])

    prober = ConnectionProber(repository.remote)
    st.session_state[prober_key] = prober
    view_model = ReservationViewModel(repository, prober)
    prober.register_callback(view_model.connection_listener())
    return view_model

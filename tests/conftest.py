# =============================================================================
# tests/conftest.py
# Pytest Configuration and Fixtures
# =============================================================================

import uuid
from typing import Dict, List
from unittest.mock import MagicMock

import pytest

from fuego_core.data.reservation import (
    Reservation,
    ReservationInput,
    ReservationStatus,
    from_remote_row,
    to_remote_row,
)
from fuego_core.errors import RemoteUnavailableError
from fuego_core.offline.connection_manager import ConnectionProber
from fuego_core.offline.local_database import LocalStore
from fuego_core.offline.reservation_repository import ReservationRepository
from fuego_core.state.reservation_state import ReservationViewModel


# =============================================================================
# FAKE REMOTE STORE
# =============================================================================

class FakeRemoteStore:
    """
    In-memory stand-in for SupabaseReservationClient.

    Rows are kept in the remote (snake_case) shape so the real mapping
    functions run. Set ``fail`` to make every call raise, or
    ``schema_missing`` to fail like a missing table.
    """

    def __init__(self):
        self.rows: List[Dict] = []
        self.fail = False
        self.schema_missing = False
        self.calls: List[str] = []
        self._clock = 1_700_000_000

    def _check(self, operation: str) -> None:
        self.calls.append(operation)
        if self.schema_missing:
            raise RemoteUnavailableError(
                "Supabase failed",
                operation=operation,
                backend_code="42P01",
                backend_message='relation "public.reservations" does not exist',
            )
        if self.fail:
            raise RemoteUnavailableError(
                "Supabase failed",
                operation=operation,
                backend_message="Network is unreachable",
            )

    def list_reservations(self) -> List[Reservation]:
        self._check("list")
        rows = sorted(self.rows, key=lambda r: r["created_at"], reverse=True)
        return [from_remote_row(row) for row in rows]

    def insert_reservation(self, data: ReservationInput) -> Reservation:
        self._check("insert")
        self._clock += 60
        row = dict(to_remote_row(data))
        row["id"] = str(uuid.uuid4())
        row["created_at"] = _iso(self._clock)
        self.rows.append(row)
        return from_remote_row(row)

    def update_status(self, reservation_id: str, status: ReservationStatus) -> int:
        self._check("update")
        matched = 0
        for row in self.rows:
            if row["id"] == reservation_id:
                row["status"] = status.value
                matched += 1
        return matched

    def count_reservations(self) -> int:
        self._check("count")
        return len(self.rows)


def _iso(epoch_seconds: int) -> str:
    from datetime import datetime, timezone
    return datetime.fromtimestamp(epoch_seconds, tz=timezone.utc).isoformat()


# =============================================================================
# STORE FIXTURES
# =============================================================================

@pytest.fixture
def remote():
    return FakeRemoteStore()


@pytest.fixture
def local_store(tmp_path):
    store = LocalStore(tmp_path / "fuego.db", storage_key="fuego_reservations")
    store.initialize()
    yield store
    store.close()


@pytest.fixture
def repository(remote, local_store):
    return ReservationRepository(remote, local_store)


@pytest.fixture
def prober(remote):
    return ConnectionProber(remote)


@pytest.fixture
def session_store():
    """Plain dict standing in for st.session_state."""
    return {}


@pytest.fixture
def view_model(repository, prober, session_store):
    return ReservationViewModel(repository, prober, store=session_store)


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================

@pytest.fixture
def sample_input():
    return ReservationInput(
        client_name="Maria Silva",
        phone="(11) 99999-9999",
        date="2025-01-01",
        time="20:30",
        pax="4 Pessoas",
        table_type="Varanda",
    )


@pytest.fixture
def sample_reservations():
    """Three local reservations, deliberately not in time order."""
    return [
        Reservation(id="local-aaa", client_name="Ana", phone="1", pax="2 Pessoas",
                    date="2025-01-02", time="12:00", table_type="Varanda",
                    status=ReservationStatus.PENDING, created_at=2_000),
        Reservation(id="local-bbb", client_name="Bruno", phone="2", pax="3 Pessoas",
                    date="2025-01-03", time="13:00", table_type="Salão Principal",
                    status=ReservationStatus.CONFIRMED, created_at=3_000),
        Reservation(id="local-ccc", client_name="Carla", phone="3", pax="6 Pessoas",
                    date="2025-01-01", time="21:00", table_type="Booth Privativo",
                    status=ReservationStatus.CANCELLED, created_at=1_000),
    ]


@pytest.fixture
def remote_row():
    """Row as returned by the Supabase REST API."""
    return {
        "id": "6f1c9a7e-2b1e-4a53-9d6c-0c8d9f3f8a11",
        "created_at": "2025-01-01T18:30:00.123456+00:00",
        "client_name": "Maria Silva",
        "phone": "(11) 99999-9999",
        "pax": 4,
        "date": "2025-01-01",
        "time": "20:30",
        "table_type": "Varanda",
        "status": "pending",
    }


# =============================================================================
# MOCK FIXTURES
# =============================================================================

@pytest.fixture
def mock_supabase():
    """Mock Supabase client"""
    mock_client = MagicMock()
    mock_client.table.return_value.select.return_value.order.return_value.execute.return_value.data = []
    mock_client.table.return_value.insert.return_value.execute.return_value.data = []
    mock_client.table.return_value.update.return_value.eq.return_value.execute.return_value.data = []
    mock_client.table.return_value.select.return_value.execute.return_value.count = 0
    return mock_client

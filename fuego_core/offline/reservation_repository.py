# =============================================================================
# fuego_core/offline/reservation_repository.py
# Remote-first reservation repository with local fallback
# =============================================================================
"""
ReservationRepository - the single writer of both reservation stores.

Every operation tries Supabase first. When Supabase fails, the operation is
served by the local store instead. The two stores are never merged: whichever
one answered a call is the complete result of that call, and the
``BackendHealth`` returned with it says which one that was.

Usage:
------
from fuego_core.offline import get_reservation_repository

repository = get_reservation_repository()
result = repository.list()
print(result.health)       # BackendHealth.REMOTE / BackendHealth.LOCAL
for reservation in result.value:
    ...
"""

from __future__ import annotations
import secrets
import string
from dataclasses import dataclass
from enum import Enum
from typing import Generic, List, Optional, TypeVar

from fuego_core.config import get_settings
from fuego_core.data.reservation import (
    Reservation,
    ReservationInput,
    ReservationStatus,
    now_ms,
    sort_newest_first,
    validate_reservation_input,
)
from fuego_core.errors import RemoteUnavailableError
from fuego_core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

LOCAL_ID_ALPHABET = string.ascii_lowercase + string.digits
LOCAL_ID_LENGTH = 9


class BackendHealth(Enum):
    """Which store served a repository call."""
    REMOTE = "remote"
    LOCAL = "local"


@dataclass
class RepositoryResult(Generic[T]):
    """
    Value of a repository call plus the store that produced it.

    ``error`` holds the remote failure that caused a fallback.
    ``matched`` is only set by update_status: whether the target id was
    found by the store that handled the update (None when unknown).
    """
    value: T
    health: BackendHealth
    error: Optional[RemoteUnavailableError] = None
    matched: Optional[bool] = None

    @property
    def is_remote(self) -> bool:
        return self.health is BackendHealth.REMOTE


class ReservationRepository:
    """Orchestrates create/list/update over the remote and local stores."""

    def __init__(self, remote, local, local_id_prefix: str = "local-"):
        """
        Args:
            remote: SupabaseReservationClient (or any object with the same methods)
            local: LocalStore
            local_id_prefix: Prefix of ids generated for local-only records
        """
        self.remote = remote
        self.local = local
        self.local_id_prefix = local_id_prefix

    def new_local_id(self) -> str:
        """Locally generated id; the prefix keeps it apart from server UUIDs."""
        suffix = "".join(secrets.choice(LOCAL_ID_ALPHABET) for _ in range(LOCAL_ID_LENGTH))
        return f"{self.local_id_prefix}{suffix}"

    # =========================================================================
    # READ
    # =========================================================================

    def list(self) -> RepositoryResult[List[Reservation]]:
        """All reservations, newest first, from whichever store answers."""
        try:
            records = self.remote.list_reservations()
        except RemoteUnavailableError as e:
            logger.warning(f"Supabase unreachable or table missing, using local fallback: {e}")
            return RepositoryResult(
                value=sort_newest_first(self.local.load()),
                health=BackendHealth.LOCAL,
                error=e,
            )

        return RepositoryResult(value=sort_newest_first(records), health=BackendHealth.REMOTE)

    # =========================================================================
    # WRITE
    # =========================================================================

    def create(self, data: ReservationInput) -> RepositoryResult[Reservation]:
        """
        Persist a new pending reservation.

        Raises:
            ValidationFailedError: required fields are empty (no store is touched)
        """
        validate_reservation_input(data)

        try:
            created = self.remote.insert_reservation(data)
        except RemoteUnavailableError as e:
            logger.warning(f"Supabase insert failed, using local fallback: {e}")
            remote_error = e
        else:
            logger.info(f"Reservation {created.id} stored in Supabase")
            return RepositoryResult(value=created, health=BackendHealth.REMOTE)

        reservation = Reservation(
            id=self.new_local_id(),
            client_name=data.client_name,
            phone=data.phone,
            pax=data.pax,
            date=data.date,
            time=data.time,
            table_type=data.table_type,
            status=ReservationStatus.PENDING,
            created_at=now_ms(),
        )
        self.local.save([reservation] + self.local.load())
        logger.info(f"Reservation {reservation.id} stored locally")

        return RepositoryResult(value=reservation, health=BackendHealth.LOCAL, error=remote_error)

    def update_status(
        self,
        reservation_id: str,
        status: ReservationStatus,
    ) -> RepositoryResult[ReservationStatus]:
        """
        Apply ``status`` to one reservation.

        The status is applied as requested, terminal records included. An id
        the local store does not hold leaves local storage untouched and is
        reported through ``matched=False``.
        """
        try:
            updated = self.remote.update_status(reservation_id, status)
        except RemoteUnavailableError as e:
            logger.warning(f"Supabase update failed, using local fallback: {e}")
            remote_error = e
        else:
            if updated == 0:
                logger.warning(f"Supabase update matched no row for reservation {reservation_id}")
            return RepositoryResult(
                value=status,
                health=BackendHealth.REMOTE,
                matched=updated > 0,
            )

        records = self.local.load()
        matched = False
        for index, record in enumerate(records):
            if record.id == reservation_id:
                records[index] = record.with_status(status)
                matched = True

        if matched:
            self.local.save(records)
        else:
            logger.warning(f"Reservation {reservation_id} not found in local store; update skipped")

        return RepositoryResult(value=status, health=BackendHealth.LOCAL, error=remote_error, matched=matched)


_repository: Optional[ReservationRepository] = None


def get_reservation_repository() -> ReservationRepository:
    """Get the global ReservationRepository wired from settings."""
    global _repository
    if _repository is None:
        from fuego_core.data.supabase_client import SupabaseReservationClient, get_supabase_client
        from fuego_core.offline.local_database import get_local_store

        settings = get_settings()
        remote = SupabaseReservationClient(
            get_supabase_client(settings),
            table_name=settings.table_name,
            retry=settings.retry,
        )
        _repository = ReservationRepository(
            remote,
            get_local_store(settings),
            local_id_prefix=settings.local_id_prefix,
        )
    return _repository

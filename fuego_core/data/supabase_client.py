# =============================================================================
# fuego_core/data/supabase_client.py
# Supabase client and the reservations table gateway
# =============================================================================

from __future__ import annotations
import time
from typing import Callable, List, Optional, TypeVar

from supabase import Client, create_client
from supabase.client import ClientOptions

from fuego_core.config import ReservationSettings, RetryPolicy
from fuego_core.data.reservation import (
    Reservation,
    ReservationInput,
    ReservationStatus,
    from_remote_row,
    now_ms,
    to_remote_row,
)
from fuego_core.errors import RemoteRowError, RemoteUnavailableError
from fuego_core.logging import get_logger, LogContext

logger = get_logger(__name__)

T = TypeVar("T")

# Shown to managers when the reservations table is missing
SCHEMA_SQL = """create table reservations (
  id uuid default gen_random_uuid() primary key,
  created_at timestamp with time zone default timezone('utc'::text, now()) not null,
  client_name text,
  phone text,
  pax int,
  date text,
  time text,
  table_type text,
  status text default 'pending'
);

alter table reservations enable row level security;

create policy "Public Access" on reservations
for all
using (true)
with check (true);"""


def get_supabase_client(settings: ReservationSettings) -> Optional[Client]:
    """
    Create a Supabase client from settings.

    Returns:
        Supabase client instance or None if not configured
    """
    if not settings.has_remote_credentials:
        logger.warning("Supabase credentials not configured; reservations will use local storage")
        return None

    try:
        options = ClientOptions(postgrest_client_timeout=settings.request_timeout)
        return create_client(settings.supabase_url, settings.supabase_key, options=options)
    except Exception as e:
        logger.warning(f"Failed to initialize Supabase client: {e}")
        return None


def _to_remote_error(operation: str, error: Exception) -> RemoteUnavailableError:
    """Wrap a postgrest/httpx failure, keeping the raw text for the logs."""
    if isinstance(error, RemoteUnavailableError):
        return error
    return RemoteUnavailableError(
        f"Supabase {operation} failed",
        operation=operation,
        backend_code=getattr(error, "code", None),
        backend_message=getattr(error, "message", None) or str(error),
    )


class SupabaseReservationClient:
    """
    CRUD gateway for the ``reservations`` table.

    Every failure (no client, network, auth, missing table, rejected by
    row-level security) surfaces as RemoteUnavailableError.
    """

    def __init__(
        self,
        client: Optional[Client],
        table_name: str = "reservations",
        retry: Optional[RetryPolicy] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.client = client
        self.table_name = table_name
        self.retry = retry or RetryPolicy()
        self._sleep = sleep

    def is_connected(self) -> bool:
        """Check if a Supabase client is available."""
        return self.client is not None

    def _table(self):
        return self.client.table(self.table_name)

    def _call(self, operation: str, func: Callable[[], T]) -> T:
        """Run ``func`` under the retry policy, converting failures."""
        if not self.is_connected():
            raise RemoteUnavailableError(
                "Supabase client not configured",
                operation=operation,
            )

        delays = self.retry.delays()
        while True:
            try:
                with LogContext(logger, f"Supabase {operation}"):
                    return func()
            except Exception as e:
                error = _to_remote_error(operation, e)
                delay = next(delays, None)
                if delay is None or error.schema_missing:
                    if error is e:
                        raise
                    raise error from e
                logger.info(f"Retrying Supabase {operation} in {delay:.2f}s")
                self._sleep(delay)

    # =========================================================================
    # OPERATIONS
    # =========================================================================

    def list_reservations(self) -> List[Reservation]:
        """
        All rows, newest first.

        Rows that cannot be read are logged and left out; they never turn
        an answered request into a remote failure.
        """
        def run():
            response = (
                self._table()
                .select("*")
                .order("created_at", desc=True)
                .execute()
            )
            return response.data or []

        records = []
        for row in self._call("list", run):
            try:
                records.append(from_remote_row(row))
            except (KeyError, ValueError, TypeError) as e:
                logger.warning(f"Skipping unreadable reservation row {row.get('id')!r}: {e}")
        return records

    def insert_reservation(self, data: ReservationInput) -> Reservation:
        """
        Insert a pending row and return the server echo.

        The row is stored once the request succeeds, so a malformed echo is
        not a remote failure: the submitted fields are returned under the
        server id instead.

        Raises:
            RemoteUnavailableError: the insert did not go through
            RemoteRowError: the echo carries no id
        """
        def run():
            response = self._table().insert([to_remote_row(data)]).execute()
            if not response.data:
                raise RemoteUnavailableError(
                    "Supabase insert returned no row",
                    operation="insert",
                )
            return response.data[0]

        row = self._call("insert", run)
        try:
            return from_remote_row(row)
        except (KeyError, ValueError, TypeError) as e:
            if not row.get("id"):
                raise RemoteRowError("Supabase insert echo has no id", operation="insert") from e
            logger.warning(f"Supabase insert echo for {row['id']} could not be read ({e}); using submitted fields")
            return Reservation(
                id=str(row["id"]),
                client_name=data.client_name,
                phone=data.phone,
                pax=data.pax,
                date=data.date,
                time=data.time,
                table_type=data.table_type,
                status=ReservationStatus.PENDING,
                created_at=now_ms(),
            )

    def update_status(self, reservation_id: str, status: ReservationStatus) -> int:
        """
        Set the status column of one row.

        Returns:
            Number of rows the server reports as updated (0 is not an error)
        """
        def run():
            response = (
                self._table()
                .update({"status": status.value})
                .eq("id", reservation_id)
                .execute()
            )
            return len(response.data or [])

        return self._call("update", run)

    def count_reservations(self) -> int:
        """Zero-row existence check (count only, no data transferred)."""
        def run():
            response = (
                self._table()
                .select("*", count="exact", head=True)
                .execute()
            )
            return response.count or 0

        return self._call("count", run)

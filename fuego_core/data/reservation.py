# =============================================================================
# fuego_core/data/reservation.py
# Reservation entity and field mapping between the two stores
# =============================================================================
"""
The application works with ``Reservation`` objects. Two serialized shapes
exist:

- local:  camelCase keys, ``pax`` as the display string ("4 Pessoas"),
          ``createdAt`` in epoch milliseconds
- remote: snake_case columns of the ``reservations`` table, ``pax`` as an
          integer, ``created_at`` as an ISO timestamp
"""

from __future__ import annotations
import re
import time
from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

import pandas as pd

from fuego_core.errors import ValidationFailedError


class ReservationStatus(Enum):
    """Reservation lifecycle states."""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self is not ReservationStatus.PENDING


TIME_SLOTS = [
    "12:00", "12:30", "13:00", "13:30", "14:00", "14:30", "15:00", "15:30",
    "16:00", "16:30", "17:00", "17:30", "18:00", "18:30", "19:00", "19:30",
    "20:00", "20:30", "21:00", "21:30", "22:00", "22:30", "23:00",
]

TABLE_TYPES = ["Salão Principal", "Varanda", "Perto da Janela", "Booth Privativo"]

PAX_SUFFIX = "Pessoas"
PAX_OPTIONS = [f"{n} {PAX_SUFFIX}" for n in range(2, 9)]

DEFAULT_TIME = "20:00"
DEFAULT_PAX = "2 Pessoas"
DEFAULT_PAX_COUNT = 2
DEFAULT_TABLE_TYPE = TABLE_TYPES[0]

REQUIRED_FIELDS = ("client_name", "date", "phone")
VALIDATION_MESSAGE = "Por favor, preencha todos os campos obrigatórios."


def now_ms() -> int:
    return int(time.time() * 1000)


# =============================================================================
# ENTITIES
# =============================================================================

@dataclass
class ReservationInput:
    """Payload submitted by the public reservation form."""
    client_name: str
    phone: str
    date: str
    time: str = DEFAULT_TIME
    pax: str = DEFAULT_PAX
    table_type: str = DEFAULT_TABLE_TYPE


@dataclass
class Reservation:
    """A stored reservation."""
    id: str
    client_name: str
    phone: str
    pax: str
    date: str
    time: str
    table_type: str
    status: ReservationStatus = ReservationStatus.PENDING
    created_at: int = field(default_factory=now_ms)

    def with_status(self, status: ReservationStatus) -> Reservation:
        """Copy of this record carrying a new status."""
        data = asdict(self)
        data["status"] = status
        return Reservation(**data)


def validate_reservation_input(data: ReservationInput) -> None:
    """
    Reject a create payload with empty required fields.

    Raises:
        ValidationFailedError: listing every empty required field
    """
    missing = [
        name for name in REQUIRED_FIELDS
        if not str(getattr(data, name, "") or "").strip()
    ]
    if missing:
        raise ValidationFailedError(VALIDATION_MESSAGE, fields=missing)


# =============================================================================
# PAX / PHONE NORMALIZATION
# =============================================================================

def pax_to_int(pax: Any) -> int:
    """'4 Pessoas' -> 4. Falls back to 2 when no digits are present."""
    if isinstance(pax, int):
        return pax
    digits = re.sub(r"\D", "", str(pax or ""))
    return int(digits) if digits and int(digits) > 0 else DEFAULT_PAX_COUNT


def int_to_pax(count: Any) -> str:
    """4 -> '4 Pessoas'. Strings are passed through unchanged."""
    if isinstance(count, int):
        return f"{count} {PAX_SUFFIX}"
    return str(count) if count else DEFAULT_PAX


def format_phone(raw: str) -> str:
    """Apply the (XX) XXXXX-XXXX mask to up to 11 digits."""
    value = re.sub(r"\D", "", raw or "")[:11]
    if len(value) > 2:
        value = f"({value[:2]}) {value[2:]}"
    if len(value) > 10:
        value = f"{value[:10]}-{value[10:]}"
    return value


# =============================================================================
# LOCAL SHAPE
# =============================================================================

def to_local_dict(reservation: Reservation) -> Dict[str, Any]:
    return {
        "id": reservation.id,
        "clientName": reservation.client_name,
        "phone": reservation.phone,
        "pax": reservation.pax,
        "date": reservation.date,
        "time": reservation.time,
        "tableType": reservation.table_type,
        "status": reservation.status.value,
        "createdAt": reservation.created_at,
    }


def from_local_dict(data: Dict[str, Any]) -> Reservation:
    """Raises KeyError/ValueError/TypeError when the record is malformed."""
    return Reservation(
        id=str(data["id"]),
        client_name=data["clientName"],
        phone=data.get("phone", ""),
        pax=int_to_pax(data.get("pax")),
        date=data["date"],
        time=data.get("time", DEFAULT_TIME),
        table_type=data.get("tableType") or DEFAULT_TABLE_TYPE,
        status=ReservationStatus(data.get("status", "pending")),
        created_at=int(data["createdAt"]),
    )


# =============================================================================
# REMOTE SHAPE
# =============================================================================

def to_remote_row(data: ReservationInput) -> Dict[str, Any]:
    """Insert payload for the reservations table."""
    return {
        "client_name": data.client_name,
        "phone": data.phone,
        "pax": pax_to_int(data.pax),
        "date": data.date,
        "time": data.time,
        "table_type": data.table_type,
        "status": ReservationStatus.PENDING.value,
    }


def _timestamp_to_ms(value: Optional[str]) -> int:
    if not value:
        return now_ms()
    # Postgres trims trailing zeros and may send up to 9 fractional digits
    stamp = pd.Timestamp(value)
    if stamp.tzinfo is None:
        stamp = stamp.tz_localize("UTC")
    return int(stamp.value // 1_000_000)


def _parse_status(value: Any) -> ReservationStatus:
    """Read a status column value; case and surrounding spaces are ignored."""
    return ReservationStatus(str(value or ReservationStatus.PENDING.value).strip().lower())


def from_remote_row(row: Dict[str, Any]) -> Reservation:
    return Reservation(
        id=str(row["id"]),
        client_name=row.get("client_name") or "",
        phone=row.get("phone") or "",
        pax=int_to_pax(row.get("pax")),
        date=row.get("date") or "",
        time=row.get("time") or DEFAULT_TIME,
        table_type=row.get("table_type") or DEFAULT_TABLE_TYPE,
        status=_parse_status(row.get("status")),
        created_at=_timestamp_to_ms(row.get("created_at")),
    )


def sort_newest_first(records: Iterable[Reservation]) -> List[Reservation]:
    return sorted(records, key=lambda r: r.created_at, reverse=True)

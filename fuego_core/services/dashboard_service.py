# =============================================================================
# fuego_core/services/dashboard_service.py
# Manager dashboard figures and reservation table
# =============================================================================

from __future__ import annotations
from datetime import date
from typing import Iterable, List, Optional

import pandas as pd

from fuego_core.data.reservation import Reservation, ReservationStatus, to_local_dict
from fuego_core.errors import ValidationFailedError
from .base_service import BaseService, ServiceResult

STATUS_FILTERS = ("all", "pending", "confirmed", "cancelled")

TABLE_COLUMNS = {
    "id": "ID",
    "clientName": "Cliente",
    "phone": "Telefone",
    "date": "Data",
    "time": "Horário",
    "pax": "Pessoas",
    "tableType": "Mesa",
    "status": "Status",
    "createdAt": "Criada em",
}


class DashboardService(BaseService):
    """Figures and tables shown on the manager dashboard."""

    def compute_stats(
        self,
        records: Iterable[Reservation],
        today: Optional[date] = None,
    ) -> ServiceResult:
        """
        Count reservations.

        Returns:
            ServiceResult with {"total", "pending", "confirmed", "today"}
        """
        def compute():
            frame = self._frame(records)
            day = (today or date.today()).isoformat()
            if frame.empty:
                return {"total": 0, "pending": 0, "confirmed": 0, "today": 0}
            return {
                "total": int(len(frame)),
                "pending": int((frame["status"] == ReservationStatus.PENDING.value).sum()),
                "confirmed": int((frame["status"] == ReservationStatus.CONFIRMED.value).sum()),
                "today": int((frame["date"] == day).sum()),
            }

        return self.safe_execute("Computing reservation stats", compute)

    def to_frame(
        self,
        records: Iterable[Reservation],
        status_filter: str = "all",
    ) -> ServiceResult:
        """
        Reservation table for display, newest first.

        Args:
            records: Reservations to show
            status_filter: one of all | pending | confirmed | cancelled
        """
        def build():
            if status_filter not in STATUS_FILTERS:
                raise ValidationFailedError(
                    f"Unknown status filter: {status_filter}",
                    fields=["status_filter"],
                )
            frame = self._frame(records)
            if frame.empty:
                return pd.DataFrame(columns=list(TABLE_COLUMNS.values()))
            if status_filter != "all":
                frame = frame[frame["status"] == status_filter]
            frame = frame.sort_values("createdAt", ascending=False).reset_index(drop=True)
            frame["createdAt"] = pd.to_datetime(frame["createdAt"], unit="ms")
            return frame[list(TABLE_COLUMNS)].rename(columns=TABLE_COLUMNS)

        return self.safe_execute("Building reservation table", build)

    @staticmethod
    def _frame(records: Iterable[Reservation]) -> pd.DataFrame:
        rows: List[dict] = [to_local_dict(r) for r in records]
        return pd.DataFrame(rows, columns=list(TABLE_COLUMNS))

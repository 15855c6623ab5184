# =============================================================================
# fuego_core/offline/__init__.py
# Remote-first reservation storage with local fallback
# =============================================================================
"""
Reservation storage for Fuego Prime.

Architecture:
------------
                ┌───────────────────────────┐
                │   ReservationViewModel    │
                │  (fuego_core.state)       │
                └─────────────┬─────────────┘
                   probe()    │   list/create/update_status
              ┌───────────────┴───────────────┐
              ▼                               ▼
   ┌──────────────────┐            ┌──────────────────────┐
   │ ConnectionProber │            │ ReservationRepository │
   │   (advisory)     │            │  (single writer)      │
   └────────┬─────────┘            └──────────┬────────────┘
            │                      remote first│ on failure
            ▼                                  ▼        ▼
        ┌────────┐                       ┌────────┐  ┌────────────┐
        │Supabase│◄──────────────────────│Supabase│  │ LocalStore │
        └────────┘                       └────────┘  │  (SQLite)  │
                                                     └────────────┘

The stores are never merged or synchronized.

Usage:
------
from fuego_core.offline import get_reservation_repository

result = get_reservation_repository().list()
print(result.health)   # BackendHealth.REMOTE or BackendHealth.LOCAL
"""

from fuego_core.offline.connection_manager import (
    ConnectionProber,
    ConnectionState,
    ConnectionStatus,
)

from fuego_core.offline.local_database import (
    LocalStore,
    get_local_store,
)

from fuego_core.offline.reservation_repository import (
    BackendHealth,
    RepositoryResult,
    ReservationRepository,
    get_reservation_repository,
)

__all__ = [
    # Connectivity
    "ConnectionProber",
    "ConnectionState",
    "ConnectionStatus",
    # Local fallback
    "LocalStore",
    "get_local_store",
    # Repository (main API)
    "BackendHealth",
    "RepositoryResult",
    "ReservationRepository",
    "get_reservation_repository",
]

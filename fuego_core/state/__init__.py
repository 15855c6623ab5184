# =============================================================================
# fuego_core/state/__init__.py
# Session state for the Fuego Prime pages
# =============================================================================

from .reservation_state import Notification, ReservationViewModel, get_view_model

__all__ = ["Notification", "ReservationViewModel", "get_view_model"]

# =============================================================================
# fuego_core/services/__init__.py
# Service Layer for Fuego Prime
# =============================================================================
"""
Usage Example:
-------------
    from fuego_core.services import DashboardService

    service = DashboardService()
    stats = service.compute_stats(reservations)
    if stats.success:
        st.metric("Pendentes", stats.data["pending"])
"""

from .base_service import BaseService, ServiceResult
from .dashboard_service import DashboardService, STATUS_FILTERS

__all__ = [
    "BaseService",
    "ServiceResult",
    "DashboardService",
    "STATUS_FILTERS",
]

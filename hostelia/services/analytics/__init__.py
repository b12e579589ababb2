"""
Dashboard analytics: pure metric reductions and the dashboard service.
"""

from hostelia.services.analytics.dashboard_service import DashboardService, own_fee_overview

__all__ = ["DashboardService", "own_fee_overview"]

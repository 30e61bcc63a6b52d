# Services package

from app.services.dashboard import DashboardLimits, build_dashboard

__all__ = [
    "DashboardLimits",
    "build_dashboard",
]

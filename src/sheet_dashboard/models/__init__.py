from .dashboard_models import CategoryEntry, DashboardState, FinancialSummary

__all__ = ["CategoryEntry", "DashboardState", "FinancialSummary"]

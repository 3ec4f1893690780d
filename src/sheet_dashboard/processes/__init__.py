from .main_process import DashboardService
from .process import (
    build_category_entries,
    build_financial_summary,
    fetch_all_category_data,
    fetch_financial_data,
    sample_category_data,
)

__all__ = [
    "DashboardService",
    "build_category_entries",
    "build_financial_summary",
    "fetch_all_category_data",
    "fetch_financial_data",
    "sample_category_data",
]

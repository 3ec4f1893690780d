from datetime import datetime

from pydantic import BaseModel

from ..shared.consts import (
    DEFAULT_INCOME_GROWTH,
    DEFAULT_TOTAL_BUDGET,
    DEFAULT_TOTAL_INCOME,
)


class CategoryEntry(BaseModel):
    name: str
    value: float
    color: str


class FinancialSummary(BaseModel):
    total_budget: float = DEFAULT_TOTAL_BUDGET
    total_income: float = DEFAULT_TOTAL_INCOME
    income_growth: float = DEFAULT_INCOME_GROWTH


class DashboardState(BaseModel):
    categories: list[CategoryEntry] = []
    financial: FinancialSummary = FinancialSummary()
    loading: bool = False
    error: str | None = None
    updated_at: datetime | None = None

    @property
    def spent(self) -> float:
        return sum(entry.value for entry in self.categories)

    @property
    def remaining(self) -> float:
        return self.financial.total_budget - self.spent

    @property
    def notice(self) -> str | None:
        """Dismissible message shown above the data when the last load failed."""
        if self.error is None:
            return None
        return (
            f"Data Connection Issue: {self.error}. "
            "Using sample data. Please check your Google Sheets configuration."
        )

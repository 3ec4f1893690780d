from typing import Final, Self

from pydantic import BaseModel, ConfigDict

from ..shared.config import Config

CATEGORY_NAMES: Final[tuple[str, ...]] = (
    "Debt & Loan",
    "Entertainment",
    "Family",
    "Food",
    "Health",
    "Housing",
    "Investment",
    "Shopping",
    "Subscription",
    "Transport",
    "Work & Education",
    "Others",
)

# Category values are read from column B starting at row 2
FIRST_CATEGORY_ROW: Final[int] = 2
CATEGORY_VALUE_COL: Final[str] = "B"


class SheetConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    spreadsheet_id: str
    sheet_name: str
    range: str

    @classmethod
    def from_config(cls, config: Config) -> Self:
        return cls(
            spreadsheet_id=config.SHEET_ID,
            sheet_name=config.SHEET_NAME,
            range=config.DEFAULT_RANGE,
        )

    def with_range(self, a1_range: str) -> Self:
        return self.model_copy(update={"range": a1_range})


class CategoryMapping(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: str
    sheet_config: SheetConfig


class FinancialRanges(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_budget: str
    total_income: str
    income_growth: str

    @classmethod
    def from_config(cls, config: Config) -> Self:
        return cls(
            total_budget=config.TOTAL_BUDGET_RANGE,
            total_income=config.TOTAL_INCOME_RANGE,
            income_growth=config.INCOME_GROWTH_RANGE,
        )


def default_category_range(index: int) -> str:
    """Single-cell range of the ``index``-th category, e.g. ``"B2"``."""
    return f"{CATEGORY_VALUE_COL}{FIRST_CATEGORY_ROW + index}"


def build_category_mappings(config: Config) -> list[CategoryMapping]:
    """
    Build the ordered category mappings for the configured spreadsheet.
    Args:
        config (Config): Application config. CATEGORY_RANGE_OVERRIDES
            replaces the default range of the categories it names.
    Returns:
        list[CategoryMapping]: One mapping per category, in display order.
    """
    base = SheetConfig.from_config(config)
    overrides = config.CATEGORY_RANGE_OVERRIDES

    mappings: list[CategoryMapping] = []
    for index, category in enumerate(CATEGORY_NAMES):
        a1_range = overrides.get(category, default_category_range(index))
        mappings.append(
            CategoryMapping(category=category, sheet_config=base.with_range(a1_range))
        )

    return mappings

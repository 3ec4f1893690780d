import logging
import random
from typing import Sequence

from ..models import CategoryEntry, FinancialSummary
from ..sheet import CategoryMapping, FinancialRanges
from ..sheet_csv import CellValue, CsvFetchAdapter, Grid, extract_value
from ..shared.consts import (
    CATEGORY_COLORS,
    DEFAULT_INCOME_GROWTH,
    DEFAULT_TOTAL_BUDGET,
    DEFAULT_TOTAL_INCOME,
    SAMPLE_VALUE_MIN,
    SAMPLE_VALUE_SPAN,
)

logger = logging.getLogger(__name__)


def category_color(index: int, palette: Sequence[str] = CATEGORY_COLORS) -> str:
    """Palette color for the ``index``-th category, wrapping around."""
    return palette[index % len(palette)]


def numeric_or_zero(value: CellValue) -> float:
    if isinstance(value, str):
        return 0
    return value


def sample_category_data(
    mappings: Sequence[CategoryMapping],
    rng: random.Random | None = None,
) -> list[CategoryEntry]:
    """Placeholder entries used when the sheet could not be read."""
    rng = rng or random.Random()
    return [
        CategoryEntry(
            name=mapping.category,
            value=SAMPLE_VALUE_MIN + rng.randrange(SAMPLE_VALUE_SPAN),
            color=category_color(index),
        )
        for index, mapping in enumerate(mappings)
    ]


def build_category_entries(
    grid: Grid, mappings: Sequence[CategoryMapping]
) -> list[CategoryEntry]:
    entries: list[CategoryEntry] = []
    for index, mapping in enumerate(mappings):
        value = extract_value(grid, mapping.sheet_config.range)
        if isinstance(value, str):
            logger.debug(
                f"{mapping.category}: non-numeric cell {value!r} at "
                f"{mapping.sheet_config.range}, using 0"
            )
        entries.append(
            CategoryEntry(
                name=mapping.category,
                value=numeric_or_zero(value),
                color=category_color(index),
            )
        )
    return entries


def fetch_all_category_data(
    fetcher: CsvFetchAdapter,
    spreadsheet_id: str,
    mappings: Sequence[CategoryMapping],
    rng: random.Random | None = None,
) -> list[CategoryEntry]:
    """
    Fetch the sheet once and read one value per category.
    Args:
        fetcher (CsvFetchAdapter): Adapter used to download the grid.
        spreadsheet_id (str): Spreadsheet to read.
        mappings (Sequence[CategoryMapping]): Categories in display order.
        rng (random.Random | None): Source for placeholder values.
    Returns:
        list[CategoryEntry]: One entry per mapping, in the same order.
    Raises:
        FetchError: If the CSV export could not be downloaded.
    """
    sheet_data = fetcher.fetch(spreadsheet_id)

    if not sheet_data:
        logger.warning("No data fetched from sheet, using sample data")
        return sample_category_data(mappings, rng)

    return build_category_entries(sheet_data, mappings)


def build_financial_summary(grid: Grid, ranges: FinancialRanges) -> FinancialSummary:
    """Read the three summary cells, each falling back to its own default."""
    total_budget = numeric_or_zero(extract_value(grid, ranges.total_budget))
    total_income = numeric_or_zero(extract_value(grid, ranges.total_income))
    income_growth = numeric_or_zero(extract_value(grid, ranges.income_growth))

    return FinancialSummary(
        total_budget=total_budget or DEFAULT_TOTAL_BUDGET,
        total_income=total_income or DEFAULT_TOTAL_INCOME,
        income_growth=income_growth or DEFAULT_INCOME_GROWTH,
    )


def fetch_financial_data(
    fetcher: CsvFetchAdapter,
    spreadsheet_id: str,
    ranges: FinancialRanges,
) -> FinancialSummary:
    sheet_data = fetcher.fetch(spreadsheet_id)
    return build_financial_summary(sheet_data, ranges)

from typing import Final

CSV_EXPORT_URL_TEMPLATE: Final[str] = (
    "https://docs.google.com/spreadsheets/d/{spreadsheet_id}/export?format=csv&gid={gid}"
)
CSV_EXPORT_GID: Final[int] = 0

CATEGORY_COLORS: Final[tuple[str, ...]] = (
    "#EF4444",
    "#F59E0B",
    "#10B981",
    "#3B82F6",
    "#8B5CF6",
    "#EC4899",
    "#14B8A6",
    "#F97316",
    "#6366F1",
    "#84CC16",
    "#06B6D4",
    "#64748B",
)

# Placeholder category values are drawn from [MIN, MIN + SPAN)
SAMPLE_VALUE_MIN: Final[int] = 100
SAMPLE_VALUE_SPAN: Final[int] = 500

DEFAULT_TOTAL_BUDGET: Final[float] = 5000
DEFAULT_TOTAL_INCOME: Final[float] = 6500
DEFAULT_INCOME_GROWTH: Final[float] = 8.5

DEFAULT_REFRESH_INTERVAL_SECONDS: Final[int] = 5 * 60
DEFAULT_REQUEST_TIMEOUT: Final[float] = 30

"""sheet-csv: read single cells out of a public Google Sheet's CSV export.

Main pieces:
    resolve_range: A1 range string to zero-based ResolvedRange.
    extract_value: Origin-cell value of a range, as float or raw text.
    CsvFetchAdapter: Downloads the CSV export and splits it into a grid.

Quick Start:
    >>> from sheet_dashboard.sheet_csv import CsvFetchAdapter, extract_value
    >>> grid = CsvFetchAdapter().fetch("your_spreadsheet_id")
    >>> extract_value(grid, "B2")
    650.0
"""

from .fetcher import CsvFetchAdapter, parse_csv_strict, split_csv_text
from .grid import extract_value
from .schemas import CellValue, Grid, ResolvedRange
from .utils import resolve_range

__all__ = [
    "CellValue",
    "CsvFetchAdapter",
    "Grid",
    "ResolvedRange",
    "extract_value",
    "parse_csv_strict",
    "resolve_range",
    "split_csv_text",
]

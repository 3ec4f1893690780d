"""Cell lookup over a parsed CSV grid.

A grid is the list of rows produced by a splitter in
:mod:`sheet_dashboard.sheet_csv.fetcher`. Lookups never raise: a reference
that points outside the grid, or at an empty cell, reads as ``0``.
"""

from .schemas import CellValue, Grid
from .utils import parse_leading_float, resolve_range


def get_raw_cell(grid: Grid, row: int | None, col: int | None) -> str | None:
    """Return the raw text at ``(row, col)``, or None if out of bounds."""
    if row is None or col is None or row < 0 or col < 0:
        return None

    try:
        return grid[row][col]
    except IndexError:
        return None


def extract_value(grid: Grid, a1_range: str) -> CellValue:
    """Get the value of the origin cell of ``a1_range``.

    Only the top-left cell of the range is read; ``"A2:B13"`` yields the
    value at ``A2``.

    Args:
        grid: Rows of raw cell strings.
        a1_range: Range in A1 notation (e.g. ``"B2"``, ``"A2:B2"``).

    Returns:
        The cell as a float if its text starts with a number, the raw text
        otherwise, or ``0`` when the cell is missing or empty.

    Example:
        >>> extract_value([["Food", "650"]], "B1")
        650.0
        >>> extract_value([["Food", "N/A"]], "B1")
        'N/A'
        >>> extract_value([], "B1")
        0
    """
    resolved = resolve_range(a1_range)
    row, col = resolved.origin
    value = get_raw_cell(grid, row, col)

    if not value:
        return 0

    number = parse_leading_float(value)
    if number is None:
        return value
    return number

"""Data schemas for sheet-csv.

Classes:
    ResolvedRange: Zero-based bounds of an A1 range reference.

Example:
    >>> from sheet_dashboard.sheet_csv.schemas import ResolvedRange
    >>> ResolvedRange(start_row=1, end_row=12, start_col=0, end_col=1)
    ResolvedRange(start_row=1, end_row=12, start_col=0, end_col=1)
"""

from pydantic import BaseModel, Field

Grid = list[list[str]]
CellValue = float | str


class ResolvedRange(BaseModel):
    """Zero-based, inclusive bounds of a range such as ``"A2:B13"``.

    Bounds are kept exactly as written: a reversed range like ``"B5:A1"``
    is not normalized, so ``start_*`` may be greater than ``end_*``. A
    component that could not be parsed at all is ``None``; a component that
    parsed to a number outside the sheet (``"A0"`` gives row ``-1``) is kept
    as is. Only the start corner is read by the extractor.

    Attributes:
        start_row: Row of the left operand, 0-based.
        end_row: Row of the right operand, 0-based.
        start_col: Column of the left operand, 0-based.
        end_col: Column of the right operand, 0-based.
    """

    start_row: int | None = Field(description="Start row (0-based)")
    end_row: int | None = Field(description="End row (0-based)")
    start_col: int | None = Field(description="Start column (0-based)")
    end_col: int | None = Field(description="End column (0-based)")

    @property
    def origin(self) -> tuple[int | None, int | None]:
        return self.start_row, self.start_col

"""Utility functions for sheet-csv.

Helpers for turning A1 references into grid indices and raw cell text into
numbers. Parsing is lenient in the way spreadsheet exports need: a number
is read from the start of the text and anything after it is ignored, so a
cell such as ``"650\\r"`` (CRLF exports split on ``"\\n"``) still reads as
``650``.

Functions:
    resolve_range: Convert an A1 range to a ResolvedRange.
    parse_leading_int: Read the integer prefix of a string.
    parse_leading_float: Read the float prefix of a string.
"""

import re

from .schemas import ResolvedRange

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")
_LEADING_FLOAT = re.compile(
    r"^\s*([+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?))"
)


def parse_leading_int(text: str) -> int | None:
    """Return the base-10 integer at the start of ``text``, or None.

    Only ASCII digits count. A number too long to convert is treated as
    unparseable.
    """
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        return None


def parse_leading_float(text: str) -> float | None:
    """Return the float at the start of ``text``, or None.

    Accepts an optional sign, ``Infinity``, decimals with or without a
    leading digit and an exponent. Trailing characters are ignored.
    """
    match = _LEADING_FLOAT.match(text)
    if match is None:
        return None
    return float(match.group(1))


def _resolve_cell(cell: str) -> tuple[int | None, int | None]:
    # Only the first character is the column, "AA1" is not supported
    col = ord(cell[0]) - ord("A") if cell else None

    row = parse_leading_int(cell[1:])
    if row is not None:
        row -= 1

    return row, col


def resolve_range(a1_range: str) -> ResolvedRange:
    """Convert an A1 range string to a ResolvedRange.

    Args:
        a1_range: ``"B13"`` or ``"A2:B13"``. The column is a single
            uppercase letter; the row is 1-based.

    Returns:
        A ResolvedRange with 0-based bounds. Without a right operand the
        single reference is used for both corners.

    Note:
        No validation is done. Lowercase or multi-letter columns resolve
        to indices outside ``A``-``Z`` and a missing row number resolves
        to ``None``; callers reading the grid treat both as absent.

    Example:
        >>> resolve_range("B13")
        ResolvedRange(start_row=12, end_row=12, start_col=1, end_col=1)
        >>> resolve_range("A2:B13").end_row
        12
    """
    parts = a1_range.split(":")
    start = parts[0]
    end = parts[1] if len(parts) > 1 else ""

    start_row, start_col = _resolve_cell(start)

    if end:
        end_row, end_col = _resolve_cell(end)
        return ResolvedRange(
            start_row=start_row,
            end_row=end_row,
            start_col=start_col,
            end_col=end_col,
        )

    return ResolvedRange(
        start_row=start_row,
        end_row=start_row,
        start_col=start_col,
        end_col=start_col,
    )

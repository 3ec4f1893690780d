from __future__ import annotations

import pytest

from sheet_dashboard.sheet_csv import extract_value, split_csv_text


def test_numeric_cell_becomes_float() -> None:
    grid = [["Food", "480"]]
    value = extract_value(grid, "B1")
    assert value == 480
    assert isinstance(value, float)


def test_non_numeric_cell_is_returned_unchanged() -> None:
    assert extract_value([["Food", "N/A"]], "B1") == "N/A"


def test_only_origin_cell_is_read() -> None:
    grid = [["Food", "650"], ["Housing", "850"]]
    assert extract_value(grid, "A1:B2") == "Food"
    assert extract_value(grid, "B2:A1") == 850


@pytest.mark.parametrize("ref", ["A1", "B3", "Z99", "A1:B2"])
def test_empty_grid_yields_zero(ref: str) -> None:
    assert extract_value([], ref) == 0


def test_short_grid_and_short_row_yield_zero() -> None:
    grid = [["Food", "650"], ["Housing"]]
    assert extract_value(grid, "B5") == 0
    assert extract_value(grid, "B2") == 0


def test_empty_cell_yields_zero() -> None:
    assert extract_value([["Food", ""]], "B1") == 0


def test_invalid_indices_do_not_wrap_around() -> None:
    grid = [["1", "2"], ["3", "4"]]
    assert extract_value(grid, "A0") == 0
    assert extract_value(grid, "@1") == 0
    assert extract_value(grid, "Bx") == 0
    assert extract_value(grid, "") == 0


def test_csv_round_trip() -> None:
    grid = split_csv_text("Food,650\nHousing,850")
    assert extract_value(grid, "B1") == 650
    assert extract_value(grid, "B2") == 850


def test_crlf_export_still_reads_numbers() -> None:
    grid = split_csv_text("Food,650\r\nHousing,850\r\n")
    assert extract_value(grid, "B1") == 650
    assert extract_value(grid, "A2") == "Housing"


def test_overlong_row_number_reads_as_absent() -> None:
    assert extract_value([["1"]], "A" + "1" * 5000) == 0


def test_non_ascii_digits_are_not_numbers() -> None:
    assert extract_value([["٣٠٠"]], "A1") == "٣٠٠"
    assert extract_value([["x"], ["650"]], "A٢") == 0

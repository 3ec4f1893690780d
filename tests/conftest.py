from __future__ import annotations

import threading

import pytest
import requests

from sheet_dashboard.shared.config import Config
from sheet_dashboard.shared.exceptions import FetchError


class FakeResponse:
    def __init__(self, text: str = "", status_code: int = 200) -> None:
        self.text = text
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class FakeSession:
    """Stands in for requests.Session, recording every GET."""

    def __init__(self, response: FakeResponse | None = None, error: Exception | None = None) -> None:
        self.response = response or FakeResponse()
        self.error = error
        self.calls: list[tuple[str, float | None]] = []

    def get(self, url: str, timeout: float | None = None) -> FakeResponse:
        self.calls.append((url, timeout))
        if self.error is not None:
            raise self.error
        return self.response


class FakeFetcher:
    """Returns a fixed grid, or raises FetchError when ``fail`` is set."""

    def __init__(self, grid: list[list[str]] | None = None, fail: bool = False) -> None:
        self.grid = grid if grid is not None else []
        self.fail = fail
        self.calls = 0
        self._lock = threading.Lock()

    def fetch(self, spreadsheet_id: str) -> list[list[str]]:
        with self._lock:
            self.calls += 1
        if self.fail:
            raise FetchError("HTTP error! status: 404", status_code=404)
        return self.grid


@pytest.fixture
def config() -> Config:
    return Config(SHEET_ID="test-sheet-id", REFRESH_INTERVAL_SECONDS=1)


@pytest.fixture
def category_grid() -> list[list[str]]:
    """Header row, then twelve category rows with values in column B."""
    rows = [["Category", "Amount", "", "", "Summary"]]
    for i in range(12):
        rows.append([f"Category {i}", str(100 + i * 10)])
    rows[1] += ["", "", "4200"]
    rows[2] += ["", "", "7100"]
    rows[3] += ["", "", "3.5"]
    return rows

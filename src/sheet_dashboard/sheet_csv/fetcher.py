"""CSV export fetching for public Google Sheets.

The adapter downloads the CSV export of a spreadsheet and turns it into a
grid with a splitter. The default splitter is the naive one: rows on
``"\\n"`` and cells on ``","``. It has no quoting support, so a cell that
contains a comma or a newline shifts every cell after it. Pass
``splitter=parse_csv_strict`` to read quoted exports correctly.

Example:
    >>> fetcher = CsvFetchAdapter(timeout=10)
    >>> grid = fetcher.fetch("your_spreadsheet_id")
    >>> grid[1][1]
    '650'
"""

import csv
import io
import logging
from typing import Callable

import requests
from gspread.utils import extract_id_from_url
from requests.exceptions import HTTPError, RequestException

from ..shared.consts import (
    CSV_EXPORT_GID,
    CSV_EXPORT_URL_TEMPLATE,
    DEFAULT_REQUEST_TIMEOUT,
)
from ..shared.exceptions import FetchError
from .schemas import Grid

logger = logging.getLogger(__name__)

Splitter = Callable[[str], Grid]


def split_csv_text(text: str) -> Grid:
    """Split CSV text into rows on newline and cells on comma.

    ``N`` lines give exactly ``N`` rows, so a trailing newline gives a
    trailing ``[""]`` row. Carriage returns are left in the cell text.
    """
    return [row.split(",") for row in text.split("\n")]


def parse_csv_strict(text: str) -> Grid:
    """Split CSV text with the :mod:`csv` reader, honouring quotes."""
    reader = csv.reader(io.StringIO(text, newline=""))
    return list(reader)


def build_csv_export_url(spreadsheet_id: str, gid: int = CSV_EXPORT_GID) -> str:
    """Build the CSV export URL for a spreadsheet id or full sheet URL."""
    if spreadsheet_id.startswith("http"):
        spreadsheet_id = extract_id_from_url(spreadsheet_id)
    return CSV_EXPORT_URL_TEMPLATE.format(spreadsheet_id=spreadsheet_id, gid=gid)


class CsvFetchAdapter:
    """Fetches a spreadsheet's CSV export and splits it into a grid.

    Attributes:
        timeout: Request timeout in seconds.
        splitter: Callable turning response text into a grid.
        session: The requests session used for HTTP calls.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        splitter: Splitter = split_csv_text,
        session: requests.Session | None = None,
    ) -> None:
        self.timeout = timeout
        self.splitter = splitter
        self.session = session if session is not None else requests.Session()

    def fetch(self, spreadsheet_id: str) -> Grid:
        """Download and split the CSV export of ``spreadsheet_id``.

        Raises:
            FetchError: On a network failure or a non-2xx response.
        """
        csv_url = build_csv_export_url(spreadsheet_id)
        logger.info(f"Fetching data from: {csv_url}")

        try:
            res = self.session.get(csv_url, timeout=self.timeout)
        except RequestException as e:
            raise FetchError(f"Request failed: {e}") from e

        try:
            res.raise_for_status()
        except HTTPError as e:
            logger.error(f"CSV export returned {res.status_code}")
            raise FetchError(
                f"HTTP error! status: {res.status_code}",
                status_code=res.status_code,
            ) from e

        grid = self.splitter(res.text)
        logger.info(f"Fetched {len(grid)} rows")
        return grid

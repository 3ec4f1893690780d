import logging
import random
import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from threading import Event, Thread
from typing import Callable

from ..models import CategoryEntry, DashboardState, FinancialSummary
from ..sheet import CategoryMapping, FinancialRanges, build_category_mappings
from ..sheet_csv import CsvFetchAdapter
from ..shared.config import Config
from ..shared.enums import RefreshPolicy
from ..shared.exceptions import FetchError
from .process import fetch_all_category_data, fetch_financial_data, sample_category_data

logger = logging.getLogger(__name__)

OnRefresh = Callable[[DashboardState], None]


class DashboardService:
    """Loads dashboard data from the sheet and keeps the latest state.

    ``state`` is replaced, never mutated, so readers always see a complete
    snapshot. With ``RefreshPolicy.OVERLAP`` concurrent refreshes all run
    and whichever finishes last sets ``state``. With
    ``RefreshPolicy.SINGLE_FLIGHT`` a refresh requested while another is in
    flight returns the current state without fetching.
    """

    def __init__(
        self,
        config: Config,
        fetcher: CsvFetchAdapter | None = None,
        mappings: list[CategoryMapping] | None = None,
        policy: RefreshPolicy | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.config = config
        self.fetcher = fetcher or CsvFetchAdapter(timeout=config.REQUEST_TIMEOUT)
        self.mappings = mappings if mappings is not None else build_category_mappings(config)
        self.financial_ranges = FinancialRanges.from_config(config)
        self.policy = policy or config.REFRESH_POLICY
        self.rng = rng

        self.state = DashboardState(loading=False)
        self._state_lock = threading.Lock()
        self._in_flight = 0
        self._in_flight_lock = threading.Lock()
        self._refresh_count = 0

    def load(self) -> tuple[list[CategoryEntry], FinancialSummary]:
        """Fetch categories and financial summary concurrently.

        Both results are returned together; if either fetch fails, the
        error propagates and neither is returned.

        Raises:
            FetchError: If either CSV download failed.
        """
        spreadsheet_id = self.config.SHEET_ID
        fetcher = self.fetcher

        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="SheetFetch") as executor:
            categories_future = executor.submit(
                fetch_all_category_data,
                fetcher,
                spreadsheet_id,
                self.mappings,
                self.rng,
            )
            financial_future = executor.submit(
                fetch_financial_data,
                fetcher,
                spreadsheet_id,
                self.financial_ranges,
            )
            return categories_future.result(), financial_future.result()

    def refresh(self) -> DashboardState:
        if not self.__begin_refresh():
            logger.info("Refresh already in flight, skipping")
            return self.state

        completed = False
        try:
            self.__set_state(self.state.model_copy(update={"loading": True}))

            try:
                categories, financial = self.load()
                error = None
            except FetchError as e:
                logger.exception("Error loading sheet data")
                categories = sample_category_data(self.mappings, self.rng)
                financial = FinancialSummary()
                error = str(e)

            state = DashboardState(
                categories=categories,
                financial=financial,
                loading=False,
                error=error,
                updated_at=datetime.now(),
            )
            self.__set_state(state)
            completed = True
            return state
        finally:
            if not completed:
                self.__set_state(self.state.model_copy(update={"loading": False}))
            self.__end_refresh()

    def trigger_refresh(self, on_refresh: OnRefresh | None = None) -> Thread:
        """Run ``refresh`` on a background thread and return the thread."""
        with self._in_flight_lock:
            self._refresh_count += 1
            name = f"Refresh-{self._refresh_count}"

        def _run() -> None:
            try:
                state = self.refresh()
            except Exception:
                logger.exception(f"{name} failed")
                raise
            if on_refresh is not None:
                on_refresh(state)

        t = Thread(target=_run, daemon=True, name=name)
        t.start()
        return t

    def run_periodic(self, stop_event: Event, on_refresh: OnRefresh | None = None) -> None:
        """Trigger a refresh now and then every REFRESH_INTERVAL_SECONDS.

        Ticks do not wait for the previous refresh to finish; whether a slow
        refresh overlaps the next one is decided by ``policy``. Returns once
        ``stop_event`` is set.
        """
        interval = self.config.REFRESH_INTERVAL_SECONDS
        logger.info(f"Refreshing every {interval}s with policy {self.policy.value}")

        self.trigger_refresh(on_refresh)
        while not stop_event.wait(interval):
            self.trigger_refresh(on_refresh)

    def __begin_refresh(self) -> bool:
        with self._in_flight_lock:
            if self.policy is RefreshPolicy.SINGLE_FLIGHT and self._in_flight > 0:
                return False
            self._in_flight += 1
            return True

    def __end_refresh(self) -> None:
        with self._in_flight_lock:
            self._in_flight -= 1

    def __set_state(self, state: DashboardState) -> None:
        with self._state_lock:
            self.state = state

import logging
from threading import Event

from sheet_dashboard import logger
from sheet_dashboard.models import DashboardState
from sheet_dashboard.processes import DashboardService
from sheet_dashboard.shared.config import Config
from sheet_dashboard.shared.utils import formated_datetime


def log_state(state: DashboardState) -> None:
    if state.notice:
        logger.warning(state.notice)

    updated_at = formated_datetime(state.updated_at) if state.updated_at else "-"
    logger.info(f"Dashboard updated at {updated_at}")
    for entry in state.categories:
        logger.info(f"  {entry.name:<18} {entry.value:>10.2f}  {entry.color}")

    financial = state.financial
    logger.info(
        f"Budget: {financial.total_budget:.2f} total, {state.spent:.2f} spent, "
        f"{state.remaining:.2f} remaining"
    )
    logger.info(
        f"Income: {financial.total_income:.2f} ({financial.income_growth:+.1f}%)"
    )


def main():
    config = Config.from_env()
    service = DashboardService(config)
    stop_event = Event()

    try:
        service.run_periodic(stop_event, on_refresh=log_state)
    except KeyboardInterrupt:
        logger.info("Stopping")
        stop_event.set()


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s [%(threadName)s] %(name)s: %(message)s",
    )
    logger.info("=== STARTING DASHBOARD ===")
    main()

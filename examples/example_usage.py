"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the business rules live in services and the
pure timekeeping/progress engines.
"""

import importlib
import logging

from dotenv import load_dotenv

from config import get_settings_module
from ojt_dtr.common.datetime_utils import today_local
from ojt_dtr.container import build_container

logger = logging.getLogger("example_usage")


def main():
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    container.timelog_service.save_entry(
        1,
        {"log_date": today_local().isoformat(), "time_in": "08:00", "time_out": "17:00"},
    )
    tracker = container.progress_report_service.build_tracker(1, today=today_local())
    logger.info("rendered=%s remaining=%s done=%s", tracker.total_hours, tracker.remaining_hours, tracker.projected_completion)


if __name__ == "__main__":
    main()

from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv  # noqa: E402

from config import get_settings_module  # noqa: E402
from ojt_dtr.database.bootstrap import ensure_demo_student  # noqa: E402

logger = logging.getLogger("seed_db")


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    student_id = ensure_demo_student(db_config)
    logger.info("OK: demo student_id=%d in %s", student_id, db_config.get("database"))


if __name__ == "__main__":
    main()

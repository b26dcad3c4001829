"""
Settle the most recently completed week.

Meant to be run once a week by an external scheduler, e.g. cron at
Sunday 00:05 in the competition time zone::

    5 0 * * 0  cd /srv/fitduo && python scripts/finalize_week.py

Safe to run repeatedly: an already settled week is a no-op.

Usage:
    python scripts/finalize_week.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

from sqlmodel import Session

from app.competition.settlement import finalize_week
from app.core.config import settings
from app.core.logger import setup_logger
from app.db.session import engine

if __name__ == "__main__":
    setup_logger(level=settings.LOG_LEVEL, log_file=settings.LOG_FILE)

    with Session(engine) as session:
        outcome = finalize_week(session)

    print(outcome.model_dump_json(indent=2))

"""
Create the IGC Fitness tables (users, password_reset_codes).

Reads the database URL from the environment / .env like the API does.
Postgres deployments should prefer ``alembic upgrade head``; this is for
a fresh local database.

Usage:
    python scripts/init_db.py [--sqlite PATH]
"""

import argparse
import logging
import os
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

LOGGER = logging.getLogger("init_db")


def main() -> int:
    parser = argparse.ArgumentParser(description="Create the IGC Fitness database tables")
    parser.add_argument("--sqlite", metavar="PATH", help="Use a local SQLite file instead of the configured database")
    args = parser.parse_args()

    if args.sqlite:
        os.environ["SQLALCHEMY_DATABASE_URI"] = f"sqlite:///{Path(args.sqlite).resolve()}"

    # Settings are read on import, so the override above must come first
    from app.core.config import settings
    from app.core.logging import setup_logging
    from app.db.init_db import init_db

    setup_logging()
    LOGGER.info("Initializing schema on %s", settings.DATABASE_URL.split("@")[-1])
    try:
        init_db()
    except Exception:
        LOGGER.exception("Schema creation failed")
        return 1
    LOGGER.info("Schema ready")
    return 0


if __name__ == "__main__":
    sys.exit(main())

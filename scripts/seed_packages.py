#!/usr/bin/env python3
"""
Insert sample packages into the configured database
Run from the project root: python scripts/seed_packages.py
"""
import logging

from delivery_tracker.config.settings import settings
from delivery_tracker.config.database import SessionLocal, init_db
from delivery_tracker.core.logging import setup_logging
from delivery_tracker.shared.database.seed import seed_packages

logger = logging.getLogger("seed_packages")

def main():
    setup_logging(settings.log_level)
    init_db()

    db = SessionLocal()
    try:
        created = seed_packages(db)
        for package in created:
            logger.info(f"Created {package.consignment_number} for {package.consignee_name}")
    except Exception:
        db.rollback()
        logger.exception("Seeding failed")
        raise
    finally:
        db.close()

if __name__ == "__main__":
    main()

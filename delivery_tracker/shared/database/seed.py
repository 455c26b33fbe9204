# delivery_tracker/shared/database/seed.py
from typing import Iterable, Dict, Any, List
import logging

from sqlalchemy.orm import Session

from .models import Package, GeoLocation

logger = logging.getLogger(__name__)

SAMPLE_PACKAGES = [
    {
        "consignment_number": "CN-100001",
        "consignee_name": "Jane Doe",
        "latitude": 52.5200,
        "longitude": 13.4050
    },
    {
        "consignment_number": "CN-100002",
        "consignee_name": "John Smith",
        "latitude": 48.8566,
        "longitude": 2.3522
    },
    {
        "consignment_number": "CN-100003",
        "consignee_name": "Ana Pérez",
        "latitude": 40.4168,
        "longitude": -3.7038
    },
]

def seed_packages(db: Session, rows: Iterable[Dict[str, Any]] = SAMPLE_PACKAGES) -> List[Package]:
    """Insert packages with their delivery addresses; skips an already populated table"""
    existing = db.query(Package).count()
    if existing > 0:
        logger.info(f"{existing} packages already stored, skipping seed")
        return []

    created = []
    for row in rows:
        package = Package(
            consignment_number=row["consignment_number"],
            consignee_name=row["consignee_name"],
            delivery_address=GeoLocation(
                latitude=row["latitude"],
                longitude=row["longitude"]
            )
        )
        db.add(package)
        created.append(package)

    db.commit()
    logger.info(f"Seeded {len(created)} packages")
    return created

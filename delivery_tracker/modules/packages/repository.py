# delivery_tracker/modules/packages/repository.py
from sqlalchemy.orm import Session, joinedload
from typing import List, Optional

from delivery_tracker.shared.database.models import Package
import logging

logger = logging.getLogger(__name__)

class PackageRepository:
    """Read access to packages and their delivery addresses"""

    def __init__(self, db: Session):
        self.db = db

    def _query(self):
        return self.db.query(Package).options(joinedload(Package.delivery_address))

    def find_all(self) -> List[Package]:
        """All packages, in whatever order the store returns them"""
        packages = self._query().all()
        logger.debug(f"Loaded {len(packages)} packages")
        return packages

    def find_by_consignment_number(self, consignment_number: str) -> Optional[Package]:
        return (
            self._query()
            .filter(Package.consignment_number == consignment_number)
            .first()
        )

    def find_by_consignee_name(self, consignee_name: str) -> Optional[Package]:
        return (
            self._query()
            .filter(Package.consignee_name == consignee_name)
            .first()
        )

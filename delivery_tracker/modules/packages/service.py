# delivery_tracker/modules/packages/service.py
from typing import List, Optional
from sqlalchemy.orm import Session
import logging

from delivery_tracker.core.exceptions import MissingDeliveryAddressError, PackageNotFoundError
from delivery_tracker.shared.database.models import Package
from .repository import PackageRepository
from .schemas import GeoLocationView, PackageView

logger = logging.getLogger(__name__)


def to_view(package: Package) -> PackageView:
    """Map a stored package and its GeoLocation to the API representation"""
    address = package.delivery_address
    if address is None:
        raise MissingDeliveryAddressError(
            f"Package '{package.consignment_number}' (id={package.id}) has no delivery address"
        )

    return PackageView(
        consignment_number=package.consignment_number,
        consignee_name=package.consignee_name,
        delivery_address=GeoLocationView(
            latitude=address.latitude,
            longitude=address.longitude
        )
    )


class PackageService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = PackageRepository(db)

    async def list_all(self) -> List[PackageView]:
        """Every package as a view, in repository order"""
        packages = self.repository.find_all()
        views = [to_view(package) for package in packages]
        logger.info(f"Listing {len(views)} packages")
        return views

    async def get_by_consignment_number(self, consignment_number: str) -> PackageView:
        package = self.repository.find_by_consignment_number(consignment_number)
        return self._require(package, f"Package with consignment number '{consignment_number}' not found")

    def _require(self, package: Optional[Package], message: str) -> PackageView:
        if package is None:
            raise PackageNotFoundError(message)
        return to_view(package)

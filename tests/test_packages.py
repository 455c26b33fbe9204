"""Unit tests for the package repository, view mapping and listing service."""
import asyncio

import pytest

from delivery_tracker.core.exceptions import MissingDeliveryAddressError, PackageNotFoundError
from delivery_tracker.modules.packages import PackageRepository, PackageService, to_view
from delivery_tracker.shared.database.models import GeoLocation, Package
from delivery_tracker.shared.database.seed import SAMPLE_PACKAGES, seed_packages


def run(coro):
    return asyncio.run(coro)


class TestPackageRepository:
    """Test the storage lookups."""

    def test_find_all_empty(self, db_session):
        assert PackageRepository(db_session).find_all() == []

    def test_find_all_returns_every_package(self, db_session, make_package):
        make_package("CN-1", "Alice", 10.0, 20.0)
        make_package("CN-2", "Bob", 30.0, 40.0)

        packages = PackageRepository(db_session).find_all()

        assert sorted(p.consignment_number for p in packages) == ["CN-1", "CN-2"]
        assert all(p.delivery_address is not None for p in packages)

    def test_find_by_consignment_number(self, db_session, make_package):
        make_package("CN-1", "Alice", 10.0, 20.0)

        repository = PackageRepository(db_session)

        assert repository.find_by_consignment_number("CN-1").consignee_name == "Alice"
        assert repository.find_by_consignment_number("CN-404") is None

    def test_find_by_consignee_name(self, db_session, make_package):
        make_package("CN-1", "Alice", 10.0, 20.0)

        repository = PackageRepository(db_session)

        assert repository.find_by_consignee_name("Alice").consignment_number == "CN-1"
        assert repository.find_by_consignee_name("Nobody") is None

    def test_consignment_number_is_not_unique(self, db_session, make_package):
        make_package("CN-1", "Alice", 10.0, 20.0)
        make_package("CN-1", "Bob", 30.0, 40.0)

        assert len(PackageRepository(db_session).find_all()) == 2


class TestDeliveryAddressOwnership:
    """Deleting or detaching removes the owned GeoLocation."""

    def test_deleting_package_deletes_address(self, db_session, make_package):
        package = make_package("CN-1", "Alice", 10.0, 20.0)

        db_session.delete(package)
        db_session.commit()

        assert db_session.query(Package).count() == 0
        assert db_session.query(GeoLocation).count() == 0

    def test_detaching_address_removes_orphan(self, db_session, make_package):
        package = make_package("CN-1", "Alice", 10.0, 20.0)

        package.delivery_address = None
        db_session.commit()

        assert db_session.query(GeoLocation).count() == 0
        assert db_session.query(Package).count() == 1


class TestToView:
    """Test entity to view mapping."""

    def test_maps_all_fields(self):
        package = Package(
            consignment_number="CN-1",
            consignee_name="Alice",
            delivery_address=GeoLocation(latitude=52.52, longitude=-13.405),
        )

        view = to_view(package)

        assert view.consignment_number == "CN-1"
        assert view.consignee_name == "Alice"
        assert view.delivery_address.latitude == 52.52
        assert view.delivery_address.longitude == -13.405

    def test_serializes_with_camel_case(self):
        package = Package(
            consignment_number="CN-1",
            consignee_name="Alice",
            delivery_address=GeoLocation(latitude=1.5, longitude=2.5),
        )

        assert to_view(package).model_dump(by_alias=True) == {
            "consignmentNumber": "CN-1",
            "consigneeName": "Alice",
            "deliveryAddress": {"latitude": 1.5, "longitude": 2.5},
        }

    def test_out_of_range_coordinates_are_not_validated(self):
        package = Package(
            consignment_number="CN-1",
            consignee_name="Alice",
            delivery_address=GeoLocation(latitude=123.0, longitude=-500.0),
        )

        assert to_view(package).delivery_address.latitude == 123.0

    def test_missing_address_fails(self):
        package = Package(consignment_number="CN-1", consignee_name="Alice")

        with pytest.raises(MissingDeliveryAddressError) as exc_info:
            to_view(package)

        assert "CN-1" in str(exc_info.value)


class TestPackageService:
    """Test listing and lookups."""

    def test_list_all_preserves_repository_order(self, db_session, make_package):
        make_package("CN-1", "Alice", 10.0, 20.0)
        make_package("CN-2", "Bob", 30.0, 40.0)
        make_package("CN-3", "Carol", 50.0, 60.0)

        service = PackageService(db_session)
        expected = [p.consignment_number for p in service.repository.find_all()]

        views = run(service.list_all())

        assert [v.consignment_number for v in views] == expected

    def test_list_all_empty(self, db_session):
        assert run(PackageService(db_session).list_all()) == []

    def test_list_all_is_all_or_nothing(self, db_session, make_package):
        make_package("CN-1", "Alice", 10.0, 20.0)
        make_package("CN-2", "Bob")

        with pytest.raises(MissingDeliveryAddressError):
            run(PackageService(db_session).list_all())

    def test_get_by_consignment_number(self, db_session, make_package):
        make_package("CN-1", "Alice", 10.0, 20.0)

        view = run(PackageService(db_session).get_by_consignment_number("CN-1"))

        assert view.consignee_name == "Alice"

    def test_get_by_consignment_number_not_found(self, db_session):
        with pytest.raises(PackageNotFoundError) as exc_info:
            run(PackageService(db_session).get_by_consignment_number("CN-404"))

        assert exc_info.value.status_code == 404
        assert "CN-404" in exc_info.value.message


class TestSeed:
    """Test sample data seeding."""

    def test_seed_inserts_sample_packages(self, db_session):
        created = seed_packages(db_session)

        assert len(created) == len(SAMPLE_PACKAGES)
        assert db_session.query(GeoLocation).count() == len(SAMPLE_PACKAGES)

    def test_seed_skips_populated_table(self, db_session, make_package):
        make_package("CN-1", "Alice", 10.0, 20.0)

        assert seed_packages(db_session) == []
        assert db_session.query(Package).count() == 1

# delivery_tracker/shared/database/models.py
from sqlalchemy import Column, Integer, String, Float, ForeignKey
from sqlalchemy.orm import relationship, declarative_base

Base = declarative_base()


class GeoLocation(Base):
    """Delivery coordinates, owned by at most one Package"""
    __tablename__ = "geo_locations"

    id = Column(Integer, primary_key=True, index=True)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)

    package = relationship("Package", back_populates="delivery_address", uselist=False)

    def __repr__(self):
        return f"<GeoLocation(id={self.id}, lat={self.latitude}, lon={self.longitude})>"


class Package(Base):
    """Tracked package"""
    __tablename__ = "packages"

    id = Column(Integer, primary_key=True, index=True)
    # Intended as the business key; uniqueness is not enforced
    consignment_number = Column(String(100), nullable=False, index=True)
    consignee_name = Column(String(255), nullable=False, index=True)
    delivery_address_id = Column(Integer, ForeignKey("geo_locations.id"), unique=True, nullable=True)

    # Package owns its GeoLocation: deleting or detaching removes the coordinates
    delivery_address = relationship(
        "GeoLocation",
        back_populates="package",
        cascade="all, delete-orphan",
        single_parent=True,
        uselist=False,
    )

    def __repr__(self):
        return f"<Package(id={self.id}, consignment_number='{self.consignment_number}')>"

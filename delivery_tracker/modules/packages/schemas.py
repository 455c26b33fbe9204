# delivery_tracker/modules/packages/schemas.py
from pydantic import BaseModel, Field

class GeoLocationView(BaseModel):
    latitude: float = Field(..., description="Latitude of the delivery point")
    longitude: float = Field(..., description="Longitude of the delivery point")

    class Config:
        from_attributes = True


class PackageView(BaseModel):
    """Package as returned by the API"""
    consignment_number: str = Field(..., alias="consignmentNumber")
    consignee_name: str = Field(..., alias="consigneeName")
    delivery_address: GeoLocationView = Field(..., alias="deliveryAddress")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "consignmentNumber": "CN-100234",
                "consigneeName": "Jane Doe",
                "deliveryAddress": {
                    "latitude": 52.5200,
                    "longitude": 13.4050
                }
            }
        }

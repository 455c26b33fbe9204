# delivery_tracker/modules/packages/router.py
from typing import List

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from delivery_tracker.config.database import get_db
from .service import PackageService
from .schemas import PackageView

router = APIRouter()

@router.get("", response_model=List[PackageView])
async def get_all_packages(db: Session = Depends(get_db)):
    """
    List every tracked package

    **Response:**
    - Consignment number, consignee name and delivery coordinates
    - Empty list when no packages are stored
    """
    service = PackageService(db)
    return await service.list_all()

@router.get("/{consignment_number}", response_model=PackageView)
async def get_package(
    consignment_number: str = Path(..., description="Consignment number of the package"),
    db: Session = Depends(get_db)
):
    """Look up a single package by consignment number (404 when unknown)"""
    service = PackageService(db)
    return await service.get_by_consignment_number(consignment_number)

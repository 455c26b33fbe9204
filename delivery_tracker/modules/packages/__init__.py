# delivery_tracker/modules/packages/__init__.py
"""
Packages module - delivery tracking

- List every package with its delivery coordinates
- Look up a package by consignment number or consignee name

Layout:
- router.py: FastAPI endpoints
- service.py: entity to view mapping and listing
- repository.py: data access
- schemas.py: response models
"""

from .router import router
from .service import PackageService, to_view
from .repository import PackageRepository

__all__ = [
    "router",
    "PackageService",
    "PackageRepository",
    "to_view"
]

"""
Supplier endpoints.
"""

from __future__ import annotations

from core.router import build_crud_router

from .repository import ENTITY
from .schemas import SupplierCreate, SupplierUpdate

router = build_crud_router(ENTITY, create_model=SupplierCreate, update_model=SupplierUpdate)

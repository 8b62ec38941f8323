"""
Purchase invoice endpoints.
"""

from __future__ import annotations

from core.router import build_crud_router

from .repository import ENTITY
from .schemas import PurchaseInvoiceCreate, PurchaseInvoiceUpdate

router = build_crud_router(ENTITY, create_model=PurchaseInvoiceCreate, update_model=PurchaseInvoiceUpdate)

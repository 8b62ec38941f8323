"""
Invoice detail endpoints.
"""

from __future__ import annotations

from core.router import build_crud_router

from .repository import ENTITY
from .schemas import InvoiceDetailCreate, InvoiceDetailUpdate

router = build_crud_router(ENTITY, create_model=InvoiceDetailCreate, update_model=InvoiceDetailUpdate)

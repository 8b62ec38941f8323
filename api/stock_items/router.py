"""
Stock item endpoints.
"""

from __future__ import annotations

from core.router import build_crud_router

from .repository import ENTITY
from .schemas import StockItemCreate, StockItemUpdate

router = build_crud_router(ENTITY, create_model=StockItemCreate, update_model=StockItemUpdate)
